from __future__ import annotations

from datetime import date
from pathlib import Path

import yaml

from statement.core.schema import DayClass

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def _load_holiday_table() -> dict:
    path = CONFIG_DIR / "holidays.kr.yaml"
    if not path.exists():
        return {"fixed": {}, "lunar": {}}
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return {
        "fixed": {int(month): [int(day) for day in days] for month, days in (data.get("fixed") or {}).items()},
        "lunar": {
            int(year): {int(month): [int(day) for day in days] for month, days in (months or {}).items()}
            for year, months in (data.get("lunar") or {}).items()
        },
    }


HOLIDAY_TABLE = _load_holiday_table()


def holidays(year: int, month: int) -> frozenset[int]:
    """Day numbers of public holidays in the month.

    Lunar holidays are only known for the years listed in the table; any other
    year gets the fixed solar holidays alone.
    """

    days = set(HOLIDAY_TABLE["fixed"].get(month, []))
    days.update(HOLIDAY_TABLE["lunar"].get(year, {}).get(month, []))
    return frozenset(days)


def classify(year: int, month: int, day: int) -> DayClass:
    try:
        weekday = date(year, month, day).weekday()
    except ValueError:
        weekday = None
    return DayClass(
        is_saturday=weekday == 5,
        is_sunday=weekday == 6,
        is_holiday=day in holidays(year, month),
    )


def full_year(year: str) -> int:
    short = int(year)
    return 2000 + short if short < 50 else 1900 + short
