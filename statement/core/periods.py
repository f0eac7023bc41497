"""Statement period and company label inference.

Sheets are usually named after the payroll month ("2403월", "24년 3월",
"2024년 3월") and uploads after the client company ("한결_3월근태.xlsx").
Both are best effort; nothing here ever fails.
"""

from __future__ import annotations

import re
from datetime import date

from statement.core.schema import Period

DEFAULT_COMPANY = "한결"

_PERIOD_PATTERNS: list[tuple[re.Pattern[str], bool]] = [
    (re.compile(r"(\d{2})(\d{2})월"), False),
    (re.compile(r"(\d{2})년\s*(\d{1,2})월"), False),
    (re.compile(r"(\d{4})년?\s*(\d{1,2})월"), True),
]
_MONTH_ONLY = re.compile(r"(\d{1,2})월")
_COMPANY_PREFIX = re.compile(r"^([^_]+)_")
_HANGUL_ONLY = re.compile(r"^[\uAC00-\uD7AF]+$")


def infer_period(sheet_name: str, today: date | None = None) -> Period:
    today = today or date.today()
    current_year = str(today.year)[-2:]

    for pattern, four_digit_year in _PERIOD_PATTERNS:
        match = pattern.search(sheet_name)
        if match:
            year = match.group(1)[-2:] if four_digit_year else match.group(1)
            return Period(year=year, month=match.group(2).zfill(2))

    match = _MONTH_ONLY.search(sheet_name)
    if match:
        return Period(year=current_year, month=match.group(1).zfill(2))

    return Period(year=current_year, month=f"{today.month:02d}")


def _decode_filename(filename: str) -> str:
    # multipart parsers may hand over UTF-8 bytes decoded as latin-1
    try:
        return filename.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return filename


def infer_company(filename: str) -> str:
    for candidate in (_decode_filename(filename), filename):
        match = _COMPANY_PREFIX.match(candidate)
        if match and _HANGUL_ONLY.match(match.group(1)):
            return match.group(1)
    return DEFAULT_COMPANY


def statement_filename(period: Period, company: str, extension: str = "xlsx") -> str:
    return f"{period.year}-{period.month}-{company}-상세명세서.{extension}"


def statement_sheet_title(period: Period) -> str:
    return f"{period.month}월 상세명세서"
