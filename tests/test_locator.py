from datetime import datetime
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont

from statement.extractors.grid import Grid
from statement.extractors.locator import ColumnMap, DateHeader, locate


def test_header_row_below_title_rows():
    grid = Grid.from_values(
        [
            ["3월 출역현황"],
            [],
            ["성별", "성명", "구분", 1, 2, 3],
            ["남", "홍길동", "기본", 8, 8, None],
        ]
    )
    layout = locate(grid)
    assert layout.columns == ColumnMap(gender_col=1, name_col=2, category_col=3, header_row=3)
    assert layout.date_headers == [DateHeader(4, 1), DateHeader(5, 2), DateHeader(6, 3)]


def test_shuffled_header_columns_and_slash_dates():
    grid = Grid.from_values([[None, "구분", "이름", "성별", "3/1", "3/2"]])
    layout = locate(grid)
    assert layout.columns == ColumnMap(gender_col=4, name_col=3, category_col=2, header_row=1)
    assert layout.date_headers == [DateHeader(5, 1), DateHeader(6, 2)]


def test_missing_labels_fall_back_to_defaults():
    grid = Grid.from_values([["직원", "시간"], ["홍길동", 8]])
    assert locate(grid).columns == ColumnMap(gender_col=1, name_col=2, category_col=3, header_row=1)


def test_first_label_wins():
    grid = Grid.from_values([["성별", "성명", "성명", "구분"], ["성별"]])
    columns = locate(grid).columns
    assert columns.name_col == 2
    assert columns.gender_col == 1
    assert columns.header_row == 1


def test_rich_text_labels_are_recognised():
    label = CellRichText(["성", TextBlock(InlineFont(b=True), "별")])
    grid = Grid.from_values([["비고"], [label, "성명", "구분", 1]])
    layout = locate(grid)
    assert layout.columns.header_row == 2
    assert layout.date_headers == [DateHeader(4, 1)]


def test_date_cells_use_day_of_month():
    grid = Grid.from_values([["성별", "성명", "구분", datetime(2024, 3, 5), datetime(2024, 3, 6)]])
    assert locate(grid).date_headers == [DateHeader(4, 5), DateHeader(5, 6)]


def test_column_keeps_first_day_found():
    grid = Grid.from_values(
        [
            ["성별", "성명", "구분", "1", None],
            [None, None, None, "5", "2"],
        ]
    )
    assert locate(grid).date_headers == [DateHeader(4, 1), DateHeader(5, 2)]


def test_out_of_range_and_sparse_columns_are_skipped():
    grid = Grid.from_values([["성별", "성명", "구분", "비고", "45", 7, "0", None, "3/9"]])
    assert locate(grid).date_headers == [DateHeader(6, 7), DateHeader(9, 9)]


def test_headers_sorted_by_column_across_rows():
    grid = Grid.from_values(
        [
            ["성별", "성명", "구분", None, None, "3"],
            [None, None, None, "1"],
        ]
    )
    assert locate(grid).date_headers == [DateHeader(4, 1), DateHeader(6, 3)]


def test_scan_stops_after_ten_date_columns():
    grid = Grid.from_values(
        [
            ["성별", "성명", "구분", *range(1, 11)],
            [None] * 13 + ["20"],
        ]
    )
    headers = locate(grid).date_headers
    assert len(headers) == 10
    assert all(header.column != 14 for header in headers)


def test_scan_width_is_limited_to_35_columns():
    row = ["성별", "성명", "구분"] + [None] * 36
    row[37] = "4"  # column 38
    row[38] = "5"  # column 39
    grid = Grid.from_values([row])
    assert locate(grid).date_headers == [DateHeader(38, 4)]
