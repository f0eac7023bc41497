from io import BytesIO
from pathlib import Path
import sys

from openpyxl import load_workbook

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statement.core.schema import AttendanceRow, DayClass, Period
from statement.core.wages import build_statement_rows
from statement.exporters.statement_csv import export_statement_csv
from statement.exporters.statement_xlsx import BLUE, HEADERS, RED, date_font_color, export_statement_xlsx

PERIOD = Period(year="24", month="03")


def _statement():
    rows = [
        AttendanceRow(gender="남", name="홍길동", day=1, basic_hours=8, overtime_hours=2),
        AttendanceRow(gender="여", name="김영희", day=2, basic_hours=6),
        AttendanceRow(gender="남", name="홍길동", day=4, weekly_holiday_hours=8),
    ]
    return build_statement_rows(rows, PERIOD)


def test_date_font_color():
    assert date_font_color(DayClass(is_sunday=True)) == RED
    assert date_font_color(DayClass(is_holiday=True, is_saturday=True)) == RED
    assert date_font_color(DayClass(is_saturday=True)) == BLUE
    assert date_font_color(DayClass()) is None


def test_xlsx_statement_layout():
    workbook = load_workbook(BytesIO(export_statement_xlsx(_statement(), PERIOD)))
    sheet = workbook.active

    assert sheet.title == "03월 상세명세서"
    assert [cell.value for cell in sheet[1]] == HEADERS
    assert sheet["A1"].font.b is True
    assert sheet["A1"].fill.fgColor.rgb == "FFFFFF00"
    assert (sheet["A1"].alignment.horizontal, sheet["A1"].alignment.vertical) == ("center", "center")
    assert sheet["D2"].alignment.vertical == "center"

    assert sheet["B2"].value == "03/1"
    assert sheet["E2"].value == 8
    assert sheet["F2"].value == 2
    assert sheet["I2"].value == "1"
    assert sheet["J2"].value == 117480
    assert sheet["L2"].value == 117480
    assert sheet["J2"].number_format == "#,##0"
    assert sheet["L3"].value == 61133  # 0.75 * 81510 = 61132.5
    assert sheet["L4"].value == 99600

    # 3/1 is a holiday, 3/2 a Saturday, 3/4 a plain Monday
    assert sheet["B2"].font.color.rgb == RED
    assert sheet["B3"].font.color.rgb == BLUE
    assert getattr(sheet["B4"].font.color, "rgb", None) not in {RED, BLUE}

    assert sheet.column_dimensions["D"].width >= 10


def test_csv_statement():
    text = export_statement_csv(_statement()).decode("utf-8-sig")
    lines = text.splitlines()
    assert lines[0] == ",".join(HEADERS)
    assert lines[1] == "1,03/1,남,홍길동,8,2,,,1,117480,,117480"
    assert len(lines) == 4
