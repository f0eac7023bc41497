from __future__ import annotations

from typing import Iterable

import pandas as pd

from statement.core.schema import StatementRow
from statement.exporters.statement_xlsx import HEADERS


def export_statement_csv(rows: Iterable[StatementRow]) -> bytes:
    df = pd.DataFrame([row.cells() for row in rows], columns=HEADERS, dtype=object)
    return df.to_csv(index=False).encode("utf-8-sig")
