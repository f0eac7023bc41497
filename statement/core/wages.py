from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from statement.core import holidays, rates
from statement.core.schema import AttendanceRow, Period, StatementRow, WageBreakdown


def price(row: AttendanceRow) -> WageBreakdown:
    """Monetary totals for one attendance row.

    Overtime hours are reported on the statement but never priced.
    """

    entry = rates.ZERO_RATE
    if row.basic_hours > 0:
        entry = rates.lookup_rate(row.gender, row.basic_hours)
    basic_total = rates.round_won(entry.work_units * Decimal(entry.price))
    weekend_special_total = rates.weekend_special_total(row.weekend_special_hours)
    weekly_holiday_total = rates.weekly_holiday_total(row.weekly_holiday_hours)

    return WageBreakdown(
        work_units=entry.work_units,
        unit_price=entry.price,
        basic_total=basic_total,
        weekend_special_total=weekend_special_total,
        weekly_holiday_total=weekly_holiday_total,
        grand_total=basic_total + weekend_special_total + weekly_holiday_total,
    )


def format_work_units(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    text = format(value.quantize(Decimal("0.0001")), "f")
    return text.rstrip("0").rstrip(".")


def _blank_if_zero(value: float) -> float | None:
    return value if value > 0 else None


def build_statement_rows(rows: Iterable[AttendanceRow], period: Period) -> list[StatementRow]:
    year = holidays.full_year(period.year)
    month = int(period.month)

    statement: list[StatementRow] = []
    for index, row in enumerate(rows, start=1):
        wage = price(row)
        statement.append(
            StatementRow(
                no=index,
                date_label=f"{period.month}/{row.day}",
                gender=row.gender,
                name=row.name,
                basic_hours=_blank_if_zero(row.basic_hours),
                overtime_hours=_blank_if_zero(row.overtime_hours),
                weekend_special_hours=_blank_if_zero(row.weekend_special_hours),
                weekly_holiday_hours=_blank_if_zero(row.weekly_holiday_hours),
                work_units=format_work_units(wage.work_units) if wage.work_units > 0 else None,
                unit_price=wage.unit_price if wage.unit_price > 0 else None,
                total=wage.grand_total,
                day_class=holidays.classify(year, month, row.day),
            )
        )
    return statement
