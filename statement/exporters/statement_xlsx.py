from __future__ import annotations

from io import BytesIO
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from statement.core.periods import statement_sheet_title
from statement.core.schema import DayClass, Period, StatementRow

HEADERS = ["NO.", "일정", "성별", "성명", "기본", "연장", "주특", "주휴", "공수", "단가", "연장", "계"]
NUMBER_COLUMNS = {5, 6, 7, 8, 10, 11, 12}
DATE_COLUMN = 2
MIN_COLUMN_WIDTH = 10

RED = "FFFF0000"
BLUE = "FF0000FF"

_THIN = Side(style="thin")
_BORDER = Border(top=_THIN, left=_THIN, bottom=_THIN, right=_THIN)
_CENTER = Alignment(horizontal="center", vertical="center")
_HEADER_FILL = PatternFill(fill_type="solid", fgColor="FFFFFF00")


def date_font_color(day_class: DayClass) -> str | None:
    if day_class.is_sunday or day_class.is_holiday:
        return RED
    if day_class.is_saturday:
        return BLUE
    return None


def _fit_columns(worksheet) -> None:
    for index, column in enumerate(worksheet.iter_cols(), start=1):
        longest = 0
        for cell in column:
            length = len(str(cell.value)) if cell.value not in (None, "") else MIN_COLUMN_WIDTH
            longest = max(longest, length)
        worksheet.column_dimensions[get_column_letter(index)].width = max(longest + 2, MIN_COLUMN_WIDTH)


def export_statement_xlsx(rows: Iterable[StatementRow], period: Period) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = statement_sheet_title(period)

    worksheet.append(HEADERS)
    for cell in worksheet[1]:
        cell.fill = _HEADER_FILL
        cell.font = Font(bold=True)
        cell.alignment = _CENTER
        cell.border = _BORDER

    for row in rows:
        worksheet.append(row.cells())
        color = date_font_color(row.day_class)
        for cell in worksheet[worksheet.max_row]:
            cell.border = _BORDER
            cell.alignment = _CENTER
            if cell.column in NUMBER_COLUMNS:
                cell.number_format = "#,##0"
            if cell.column == DATE_COLUMN and color:
                cell.font = Font(color=color)

    _fit_columns(worksheet)

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
