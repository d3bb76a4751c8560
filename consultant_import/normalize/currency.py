from __future__ import annotations

import math
import re

from .text import is_absent

"""Locale currency parsing ("1.234,56" -> 1234.56)."""

__all__ = [
    "parse_currency",
]

_CURRENCY_SYMBOLS = ("R$",)

# digits with optional '.' thousands groups and one ',' decimal part
_LOCALE_NUMBER = re.compile(r"^[+-]?\d[\d.]*(,\d+)?$")


def parse_currency(value: str | None) -> float | None:
    """Parse a decimal written with '.' thousands and ',' decimal separators.

    Thousands separators are removed before the decimal comma is converted.
    Anything that is not a finite locale number ("NaN", "inf", "1_000") is absent.

    >>> parse_currency("1.234,56")
    1234.56
    >>> parse_currency("69,61")
    69.61
    """
    if is_absent(value):
        return None
    text = str(value).strip()
    for symbol in _CURRENCY_SYMBOLS:
        text = text.replace(symbol, "")
    text = "".join(text.split())
    if not _LOCALE_NUMBER.match(text):
        return None
    try:
        amount = float(text.replace(".", "").replace(",", ".", 1))
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None
