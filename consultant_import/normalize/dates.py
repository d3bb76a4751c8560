from __future__ import annotations

import math

import pandas as pd

from .text import is_absent

"""Date normalizers returning ISO `YYYY-MM-DD` strings.

Two input shapes reach the import:
- locale text `DD/MM/YYYY` (zero padding optional)
- spreadsheet serial numbers, counted in days from 1899-12-30. That anchor
  reproduces the spreadsheet convention that treats 1900 as a leap year, so
  serial 1 is 1899-12-31 rather than 1900-01-01.
"""

__all__ = [
    "SERIAL_EPOCH",
    "parse_locale_date",
    "parse_serial_date",
]

SERIAL_EPOCH = pd.Timestamp("1899-12-30")
MIN_YEAR = 1
MAX_YEAR = 9999


def parse_locale_date(value: str | None) -> str | None:
    """Convert `DD/MM/YYYY` to `YYYY-MM-DD`.

    >>> parse_locale_date("05/01/2026")
    '2026-01-05'
    >>> parse_locale_date("5/1/2026")
    '2026-01-05'
    """
    if is_absent(value):
        return None
    parts = str(value).strip().split("/")
    if len(parts) != 3:
        return None
    day, month, year = (p.strip() for p in parts)
    if not (day.isdigit() and month.isdigit() and year.isdigit()):
        return None
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def parse_serial_date(value: str | None) -> str | None:
    """Convert a spreadsheet serial day count to `YYYY-MM-DD`.

    Values containing a slash are locale dates and go through
    parse_locale_date instead. The fractional part (time of day) is dropped.

    >>> parse_serial_date("1")
    '1899-12-31'
    >>> parse_serial_date("45292")
    '2024-01-01'
    """
    if is_absent(value):
        return None
    text = str(value).strip()
    if "/" in text:
        return parse_locale_date(text)

    try:
        serial = float(text.replace(",", "."))
    except ValueError:
        return None
    if math.isnan(serial) or math.isinf(serial):
        return None

    try:
        moment = SERIAL_EPOCH + pd.to_timedelta(serial * 86400, unit="s")
    except (OverflowError, ValueError):
        return None
    # ISO text only exists for years 1..9999
    if pd.isna(moment) or not MIN_YEAR <= moment.year <= MAX_YEAR:
        return None
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
