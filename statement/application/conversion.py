"""Application service for attendance → statement conversion."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from statement.core import periods
from statement.core.errors import NoSheetsError
from statement.core.schema import SheetInfo
from statement.core.wages import build_statement_rows
from statement.exporters.statement_csv import export_statement_csv
from statement.exporters.statement_xlsx import export_statement_xlsx
from statement.extractors import attendance_sheet, grid

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
OUTPUT_FORMATS = {"xlsx": XLSX_MEDIA_TYPE, "csv": CSV_MEDIA_TYPE}


@dataclass
class ConversionRequest:
    filename: str
    content: bytes
    sheet_name: str
    output_format: str = "xlsx"


@dataclass
class ConversionResult:
    filename: str
    month: str
    total_rows: int
    media_type: str
    payload: bytes


class ConversionService:
    """Runs one upload through locate → reconstruct → price → export."""

    def __init__(self, today: date | None = None) -> None:
        self._today = today

    def list_sheets(self, filename: str, content: bytes) -> list[SheetInfo]:
        names = grid.sheet_names(filename, content)
        if not names:
            raise NoSheetsError()
        return [SheetInfo(name=name, index=index) for index, name in enumerate(names)]

    def convert(self, request: ConversionRequest) -> ConversionResult:
        output_format = request.output_format if request.output_format in OUTPUT_FORMATS else "xlsx"

        period = periods.infer_period(request.sheet_name, today=self._today)
        company = periods.infer_company(request.filename)
        parsed = attendance_sheet.parse(request.filename, request.content, request.sheet_name)
        rows = build_statement_rows(parsed.rows, period)

        if output_format == "csv":
            payload = export_statement_csv(rows)
        else:
            payload = export_statement_xlsx(rows, period)

        filename = periods.statement_filename(period, company, extension=output_format)
        logger.info("converted %r sheet %r into %s (%d rows)", request.filename, request.sheet_name, filename, len(rows))
        return ConversionResult(
            filename=filename,
            month=period.month,
            total_rows=len(rows),
            media_type=OUTPUT_FORMATS[output_format],
            payload=payload,
        )


_service = ConversionService()


def get_conversion_service() -> ConversionService:
    """Return the conversion service for the process."""

    return _service
