"""Daily wage rate table.

Basic hours are priced from a fixed table keyed by gender and shift length.
Only the four canonical shift lengths have an entry; anything else prices at
zero.  Weekend-special (주특) and weekly-holiday (주휴) hours use a flat base
price scaled by the shift fraction instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CANONICAL_HOURS: tuple[float, ...] = (8, 6, 2.5, 1)

WEEKEND_SPECIAL_BASE_PRICE = 171800
WEEKLY_HOLIDAY_BASE_PRICE = 99600


@dataclass(frozen=True)
class RateEntry:
    work_units: Decimal
    price: int


ZERO_RATE = RateEntry(work_units=Decimal("0"), price=0)

MALE_RATES: dict[float, RateEntry] = {
    8: RateEntry(Decimal("1"), 117480),
    6: RateEntry(Decimal("0.75"), 88110),
    2.5: RateEntry(Decimal("0.3125"), 36713),
    1: RateEntry(Decimal("0.125"), 14685),
}

FEMALE_RATES: dict[float, RateEntry] = {
    8: RateEntry(Decimal("1"), 108680),
    6: RateEntry(Decimal("0.75"), 81510),
    2.5: RateEntry(Decimal("0.3125"), 33963),
    1: RateEntry(Decimal("0.125"), 13585),
}

SPECIAL_UNITS: dict[float, Decimal] = {
    8: Decimal("1"),
    6: Decimal("0.75"),
    2.5: Decimal("0.3125"),
    1: Decimal("0.125"),
}


def is_canonical(hours: float) -> bool:
    return hours in CANONICAL_HOURS


def lookup_rate(gender: str, hours: float) -> RateEntry:
    rates = MALE_RATES if gender == "남" else FEMALE_RATES
    return rates.get(hours, ZERO_RATE)


def special_units(hours: float) -> Decimal:
    """Shift fraction for surcharge pricing, linear in hours off the table."""

    units = SPECIAL_UNITS.get(hours)
    if units is not None:
        return units
    return Decimal(str(hours)) / Decimal("8")


def round_won(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def weekend_special_total(hours: float) -> int:
    if hours <= 0:
        return 0
    return round_won(Decimal(WEEKEND_SPECIAL_BASE_PRICE) * special_units(hours))


def weekly_holiday_total(hours: float) -> int:
    if hours <= 0:
        return 0
    return round_won(Decimal(WEEKLY_HOLIDAY_BASE_PRICE) * special_units(hours))
