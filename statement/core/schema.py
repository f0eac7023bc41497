from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, constr

Gender = Literal["남", "여"]
CategoryCode = Literal["기본", "연장", "주특", "주휴"]


class Period(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: constr(pattern=r"^\d{2}$")
    month: constr(pattern=r"^\d{2}$")


class SheetInfo(BaseModel):
    name: str
    index: int


class AttendanceRow(BaseModel):
    """One worker on one day, after the sheet has been reconstructed."""

    model_config = ConfigDict(frozen=True)

    gender: Gender
    name: str
    day: int = Field(ge=1, le=31)
    basic_hours: float = 0
    overtime_hours: float = 0
    weekend_special_hours: float = 0
    weekly_holiday_hours: float = 0


class WageBreakdown(BaseModel):
    work_units: Decimal = Decimal("0")
    unit_price: int = 0
    basic_total: int = 0
    weekend_special_total: int = 0
    weekly_holiday_total: int = 0
    grand_total: int = 0


class DayClass(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_saturday: bool = False
    is_sunday: bool = False
    is_holiday: bool = False


class StatementRow(BaseModel):
    no: int
    date_label: str
    gender: Gender
    name: str
    basic_hours: float | None = None
    overtime_hours: float | None = None
    weekend_special_hours: float | None = None
    weekly_holiday_hours: float | None = None
    work_units: str | None = None
    unit_price: int | None = None
    overtime_amount: str = ""
    total: int = 0
    day_class: DayClass = Field(default_factory=DayClass)

    def cells(self) -> list[Any]:
        """Row values in statement column order, blanks rendered as ``""``."""

        values: list[Any] = [
            self.no,
            self.date_label,
            self.gender,
            self.name,
            _display_number(self.basic_hours),
            _display_number(self.overtime_hours),
            _display_number(self.weekend_special_hours),
            _display_number(self.weekly_holiday_hours),
            self.work_units if self.work_units is not None else "",
            self.unit_price if self.unit_price is not None else "",
            self.overtime_amount,
            self.total,
        ]
        return values


def _display_number(value: float | None) -> Any:
    if value is None:
        return ""
    if float(value).is_integer():
        return int(value)
    return value
