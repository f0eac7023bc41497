"""Typed, 1-based cell access over an uploaded attendance sheet.

Workbooks (.xlsx/.xlsm) are read with openpyxl so that date cells and rich
text survive; CSV exports go through pandas.  Either way the extractors only
ever see a :class:`Grid`.
"""

from __future__ import annotations

import csv
import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from io import BytesIO, StringIO
from pathlib import Path
from typing import Any, Iterable, Literal

import pandas as pd
from openpyxl import load_workbook
from openpyxl.cell.rich_text import CellRichText

from statement.core.errors import SheetNotFoundError, WorkbookReadError

CellKind = Literal["empty", "number", "text", "date", "rich_text"]

CSV_SUFFIXES = {".csv"}
CSV_ENCODINGS = ("utf-8-sig", "cp949")

_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class RawCell:
    kind: CellKind = "empty"
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "RawCell":
        if value is None or value == "":
            return EMPTY_CELL
        if isinstance(value, CellRichText):
            text = "".join(str(getattr(run, "text", run) or "") for run in value)
            return cls("rich_text", text) if text else EMPTY_CELL
        if isinstance(value, bool):
            return cls("text", str(value))
        if isinstance(value, (datetime, date)):
            return cls("date", value)
        if isinstance(value, (int, float)):
            if isinstance(value, float) and math.isnan(value):
                return EMPTY_CELL
            return cls("number", value)
        return cls("text", str(value))

    @property
    def is_empty(self) -> bool:
        return self.kind == "empty"

    def text(self) -> str:
        """Trimmed display text of the cell."""

        if self.kind == "empty":
            return ""
        if self.kind == "number":
            value = self.value
            if isinstance(value, float) and value.is_integer():
                return str(int(value))
            return str(value)
        if self.kind == "date":
            return self.value.isoformat()
        return str(self.value).strip()

    def number(self) -> float:
        """Numeric reading of the cell; anything unreadable is ``0``."""

        if self.kind == "number":
            value = float(self.value)
            return value if math.isfinite(value) else 0.0
        if self.kind in {"text", "rich_text"}:
            match = _LEADING_FLOAT.match(str(self.value).strip())
            if not match:
                return 0.0
            value = float(match.group(0))
            return value if math.isfinite(value) else 0.0
        return 0.0


EMPTY_CELL = RawCell()


class Grid:
    """Read-only sheet contents addressed by 1-based (row, column)."""

    def __init__(self, rows: list[list[RawCell]], title: str = "") -> None:
        self.title = title
        self._rows = rows
        self.row_count = len(rows)
        self.column_count = max((len(row) for row in rows), default=0)

    def cell(self, row: int, column: int) -> RawCell:
        if row < 1 or column < 1 or row > self.row_count:
            return EMPTY_CELL
        values = self._rows[row - 1]
        if column > len(values):
            return EMPTY_CELL
        return values[column - 1]

    def text(self, row: int, column: int) -> str:
        return self.cell(row, column).text()

    @classmethod
    def from_values(cls, rows: Iterable[Iterable[Any]], title: str = "") -> "Grid":
        return cls([[RawCell.of(value) for value in row] for row in rows], title=title)

    @classmethod
    def from_worksheet(cls, worksheet) -> "Grid":
        return cls.from_values(worksheet.iter_rows(values_only=True), title=worksheet.title)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, title: str = "") -> "Grid":
        rows: list[list[Any]] = []
        for raw in frame.itertuples(index=False, name=None):
            row: list[Any] = []
            for value in raw:
                if value is None or (not isinstance(value, str) and pd.isna(value)):
                    row.append(None)
                elif isinstance(value, pd.Timestamp):
                    row.append(value.to_pydatetime())
                elif hasattr(value, "item"):
                    row.append(value.item())
                else:
                    row.append(value)
            rows.append(row)
        return cls.from_values(rows, title=title)


def _suffix(filename: str) -> str:
    return Path(filename).suffix.lower()


def _decode_csv(content: bytes) -> str:
    last_error: Exception | None = None
    for encoding in CSV_ENCODINGS:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
    raise WorkbookReadError() from last_error


def _read_csv(content: bytes) -> pd.DataFrame:
    text = _decode_csv(content)
    try:
        # title rows and trailing memo cells make rows differ in width
        width = max((len(row) for row in csv.reader(StringIO(text))), default=0)
        if width == 0:
            return pd.DataFrame()
        return pd.read_csv(StringIO(text), header=None, names=list(range(width)), skip_blank_lines=False)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (pd.errors.ParserError, csv.Error) as exc:
        raise WorkbookReadError() from exc


def _open_workbook(content: bytes):
    try:
        return load_workbook(BytesIO(content), data_only=True, rich_text=True)
    except Exception as exc:  # openpyxl/zipfile errors for anything that is not a workbook
        raise WorkbookReadError() from exc


def sheet_names(filename: str, content: bytes) -> list[str]:
    """Sheet names in workbook order; a CSV upload is a single sheet."""

    if _suffix(filename) in CSV_SUFFIXES:
        return [Path(filename).stem]
    workbook = _open_workbook(content)
    return list(workbook.sheetnames)


def load_grid(filename: str, content: bytes, sheet_name: str) -> Grid:
    if _suffix(filename) in CSV_SUFFIXES:
        if sheet_name != Path(filename).stem:
            raise SheetNotFoundError()
        return Grid.from_frame(_read_csv(content), title=sheet_name)

    workbook = _open_workbook(content)
    if sheet_name not in workbook.sheetnames:
        raise SheetNotFoundError()
    return Grid.from_worksheet(workbook[sheet_name])
