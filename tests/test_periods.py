from datetime import date
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statement.core.periods import (
    DEFAULT_COMPANY,
    infer_company,
    infer_period,
    statement_filename,
    statement_sheet_title,
)
from statement.core.schema import Period

TODAY = date(2026, 10, 17)


@pytest.mark.parametrize(
    ("sheet_name", "year", "month"),
    [
        ("2403월", "24", "03"),
        ("24년 3월", "24", "03"),
        ("24년3월 근태", "24", "03"),
        ("2024년 11월", "24", "11"),
        ("2024 3월", "24", "03"),
        ("3월", "26", "03"),
        ("근태현황", "26", "10"),
    ],
)
def test_infer_period(sheet_name, year, month):
    period = infer_period(sheet_name, today=TODAY)
    assert (period.year, period.month) == (year, month)


def test_company_is_prefix_before_underscore():
    assert infer_company("한결건설_3월근태.xlsx") == "한결건설"


def test_company_recovers_latin1_decoded_utf8():
    garbled = "대한_근태.xlsx".encode("utf-8").decode("latin-1")
    assert infer_company(garbled) == "대한"


@pytest.mark.parametrize(
    "filename",
    ["대한_근태.xlsx", "대한_근태.xlsx".encode("utf-8").decode("latin-1")],
)
def test_company_checks_decoded_and_raw_name(filename):
    assert infer_company(filename) == "대한"


@pytest.mark.parametrize("filename", ["근태.xlsx", "abc_3월.xlsx", "대한1_근태.xlsx", "_근태.xlsx"])
def test_company_falls_back_to_default(filename):
    assert infer_company(filename) == DEFAULT_COMPANY


def test_output_naming():
    period = Period(year="24", month="03")
    assert statement_filename(period, "한결") == "24-03-한결-상세명세서.xlsx"
    assert statement_filename(period, "한결", extension="csv") == "24-03-한결-상세명세서.csv"
    assert statement_sheet_title(period) == "03월 상세명세서"
