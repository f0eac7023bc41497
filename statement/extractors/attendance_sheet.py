"""Parser for the 근태표 (per-worker, per-category attendance sheet).

Below the header every worker occupies a block of rows, one per category
(기본/연장/주특/주휴).  Gender and name are usually written only on the first
row of the block (or merged over it), so they are carried forward until the
next non-blank value.  Hours are read from the date columns found by
:mod:`statement.extractors.locator` and regrouped into one row per worker and
day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from statement.core import rates
from statement.core.errors import EmptySheetError
from statement.core.schema import AttendanceRow
from statement.extractors.grid import Grid, load_grid
from statement.extractors.locator import ColumnMap, DateHeader, locate

logger = logging.getLogger(__name__)

GENDERS = {"남", "여"}
DEFAULT_GENDER = "남"

BASIC = "기본"
OVERTIME = "연장"
WEEKEND_SPECIAL = "주특"
WEEKLY_HOLIDAY = "주휴"
CATEGORY_CODES = (BASIC, OVERTIME, WEEKEND_SPECIAL, WEEKLY_HOLIDAY)


@dataclass(frozen=True)
class RowCursor:
    """Gender and name in effect for the current data row."""

    gender: str = DEFAULT_GENDER
    name: str = ""

    def advance(self, gender_text: str, name_text: str) -> "RowCursor":
        return RowCursor(
            gender=gender_text if gender_text in GENDERS else self.gender,
            name=name_text or self.name,
        )


@dataclass
class WorkerAccumulator:
    gender: str
    name: str
    order: int
    hours: dict[str, dict[int, float]] = field(
        default_factory=lambda: {code: {} for code in CATEGORY_CODES}
    )

    def record(self, category: str, day: int, value: float) -> None:
        if value <= 0:
            return
        if category == BASIC and not rates.is_canonical(value):
            return
        self.hours[category][day] = value

    def rows(self) -> list[AttendanceRow]:
        basic = self.hours[BASIC]
        overtime = self.hours[OVERTIME]
        weekend_special = self.hours[WEEKEND_SPECIAL]
        weekly_holiday = self.hours[WEEKLY_HOLIDAY]

        # overtime alone never makes a statement row
        days = set(basic) | set(weekend_special) | set(weekly_holiday)
        result: list[AttendanceRow] = []
        for day in days:
            basic_hours = basic.get(day, 0)
            weekend_special_hours = weekend_special.get(day, 0)
            weekly_holiday_hours = weekly_holiday.get(day, 0)
            if basic_hours > 0 or weekend_special_hours > 0 or weekly_holiday_hours > 0:
                result.append(
                    AttendanceRow(
                        gender=self.gender,
                        name=self.name,
                        day=day,
                        basic_hours=basic_hours,
                        overtime_hours=overtime.get(day, 0),
                        weekend_special_hours=weekend_special_hours,
                        weekly_holiday_hours=weekly_holiday_hours,
                    )
                )
        return result


@dataclass
class AttendanceParseResult:
    sheet_name: str
    rows: list[AttendanceRow]


def _accumulate(
    grid: Grid, columns: ColumnMap, date_headers: list[DateHeader]
) -> dict[tuple[str, str], WorkerAccumulator]:
    workers: dict[tuple[str, str], WorkerAccumulator] = {}
    cursor = RowCursor()

    for row in range(columns.header_row + 1, grid.row_count + 1):
        cursor = cursor.advance(grid.text(row, columns.gender_col), grid.text(row, columns.name_col))
        category = grid.text(row, columns.category_col)
        if not cursor.name or category not in CATEGORY_CODES:
            continue

        key = (cursor.gender, cursor.name)
        worker = workers.get(key)
        if worker is None:
            worker = WorkerAccumulator(gender=cursor.gender, name=cursor.name, order=len(workers))
            workers[key] = worker

        for header in date_headers:
            worker.record(category, header.day, grid.cell(row, header.column).number())

    return workers


def reconstruct(grid: Grid, columns: ColumnMap, date_headers: list[DateHeader]) -> list[AttendanceRow]:
    """Rebuild per-day attendance rows ordered by day, then worker sheet order."""

    workers = _accumulate(grid, columns, date_headers)
    logger.debug("workers found: %d", len(workers))

    keyed: list[tuple[int, int, AttendanceRow]] = []
    for worker in workers.values():
        for row in worker.rows():
            keyed.append((row.day, worker.order, row))
    keyed.sort(key=lambda item: (item[0], item[1]))
    return [row for _, _, row in keyed]


def parse_grid(grid: Grid) -> list[AttendanceRow]:
    layout = locate(grid)
    rows = reconstruct(grid, layout.columns, layout.date_headers)
    logger.info(
        "sheet %r: %d date columns, %d statement rows", grid.title, len(layout.date_headers), len(rows)
    )
    if not rows:
        raise EmptySheetError()
    return rows


def parse(filename: str, content: bytes, sheet_name: str) -> AttendanceParseResult:
    grid = load_grid(filename, content, sheet_name)
    return AttendanceParseResult(sheet_name=sheet_name, rows=parse_grid(grid))
