from __future__ import annotations

import pytest

from consultant_import.normalize.currency import parse_currency
from consultant_import.normalize.dates import parse_locale_date, parse_serial_date


def test_locale_date_to_iso():
    assert parse_locale_date("05/01/2026") == "2026-01-05"


def test_locale_date_pads_month_and_day():
    assert parse_locale_date("5/1/2026") == "2026-01-05"


@pytest.mark.parametrize("raw", [None, "", "null", "2026-01-05", "05/01", "aa/bb/cccc"])
def test_locale_date_malformed_is_absent(raw):
    assert parse_locale_date(raw) is None


def test_serial_one_is_last_day_of_1899():
    assert parse_serial_date("1") == "1899-12-31"


def test_serial_modern_value():
    assert parse_serial_date("45292") == "2024-01-01"


def test_serial_fraction_keeps_the_day():
    assert parse_serial_date("45292.75") == "2024-01-01"


def test_serial_entry_point_accepts_locale_dates():
    assert parse_serial_date("31/12/2025") == "2025-12-31"


@pytest.mark.parametrize("raw", [None, "", "null", "abc", "nan", "inf", "3000000", "99999999", "-1000000"])
def test_serial_malformed_is_absent(raw):
    assert parse_serial_date(raw) is None


def test_currency_with_thousands_separator():
    assert parse_currency("1.234,56") == 1234.56


def test_currency_decimal_comma():
    assert parse_currency("69,61") == 69.61


def test_currency_large_and_symbol():
    assert parse_currency("R$ 12.345.678,90") == 12345678.90


def test_currency_integer():
    assert parse_currency("1500") == 1500.0


@pytest.mark.parametrize(
    "raw", [None, "", "null", "abc", "1,2,3", "NaN", "nan", "inf", "-Infinity", "1_000", "1e5", ",5"]
)
def test_currency_malformed_is_absent(raw):
    assert parse_currency(raw) is None


def test_currency_signed_amount():
    assert parse_currency("-1.500,5") == -1500.5
