"""Header and date-column detection for attendance sheets.

Attendance sheets are edited by hand, so there is no fixed template.  The
header row is whichever row carries the 성별/성명/구분 labels, and the date
columns to the right of 구분 may hold real date cells, "3/1" style text or
bare day numbers.  Rules are applied in a fixed order so that the same sheet
always yields the same layout; anything not found falls back to defaults.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from statement.extractors.grid import Grid

logger = logging.getLogger(__name__)

HEADER_SCAN_ROWS = 15
DATE_SCAN_ROWS = 10
DATE_SCAN_WIDTH = 35
DATE_HEADER_TARGET = 10

GENDER_LABELS = {"성별"}
NAME_LABELS = {"성명", "이름"}
CATEGORY_LABELS = {"구분"}

DEFAULT_GENDER_COL = 1
DEFAULT_NAME_COL = 2
DEFAULT_CATEGORY_COL = 3
DEFAULT_HEADER_ROW = 1

_MONTH_DAY = re.compile(r"(\d{1,2})/(\d{1,2})")
_BARE_DAY = re.compile(r"^(\d{1,2})$")


@dataclass(frozen=True)
class ColumnMap:
    gender_col: int = DEFAULT_GENDER_COL
    name_col: int = DEFAULT_NAME_COL
    category_col: int = DEFAULT_CATEGORY_COL
    header_row: int = DEFAULT_HEADER_ROW


@dataclass(frozen=True)
class DateHeader:
    column: int
    day: int


@dataclass(frozen=True)
class SheetLayout:
    columns: ColumnMap
    date_headers: list[DateHeader] = field(default_factory=list)


def find_columns(grid: Grid) -> ColumnMap:
    gender_col: int | None = None
    name_col: int | None = None
    category_col: int | None = None
    header_row: int | None = None

    for row in range(1, min(HEADER_SCAN_ROWS, grid.row_count) + 1):
        for column in range(1, grid.column_count + 1):
            label = grid.text(row, column)
            if label in GENDER_LABELS and gender_col is None:
                gender_col = column
                header_row = row
            elif label in NAME_LABELS and name_col is None:
                name_col = column
            elif label in CATEGORY_LABELS and category_col is None:
                category_col = column
        if gender_col and name_col and category_col:
            break

    logger.debug(
        "header detection: gender=%s name=%s category=%s header_row=%s",
        gender_col,
        name_col,
        category_col,
        header_row,
    )
    return ColumnMap(
        gender_col=gender_col or DEFAULT_GENDER_COL,
        name_col=name_col or DEFAULT_NAME_COL,
        category_col=category_col or DEFAULT_CATEGORY_COL,
        header_row=header_row or DEFAULT_HEADER_ROW,
    )


def _day_from_text(text: str) -> int | None:
    match = _MONTH_DAY.search(text)
    if match:
        day = int(match.group(2))
        return day if 1 <= day <= 31 else None
    match = _BARE_DAY.match(text)
    if match:
        day = int(match.group(1))
        if 1 <= day <= 31:
            return day
    return None


def find_date_headers(grid: Grid, columns: ColumnMap) -> list[DateHeader]:
    first_column = columns.category_col + 1
    last_column = min(columns.category_col + DATE_SCAN_WIDTH, grid.column_count)
    found: dict[int, int] = {}

    for row in range(1, min(DATE_SCAN_ROWS, grid.row_count) + 1):
        for column in range(first_column, last_column + 1):
            if column in found:
                continue
            cell = grid.cell(row, column)
            if cell.kind == "date":
                found[column] = cell.value.day
                continue
            day = _day_from_text(cell.text())
            if day is not None:
                found[column] = day
        if len(found) >= DATE_HEADER_TARGET:
            break

    headers = [DateHeader(column=column, day=day) for column, day in sorted(found.items())]
    logger.debug("date headers found: %d %s", len(headers), headers[:5])
    return headers


def locate(grid: Grid) -> SheetLayout:
    columns = find_columns(grid)
    return SheetLayout(columns=columns, date_headers=find_date_headers(grid, columns))
