from __future__ import annotations

import re
import unicodedata
from collections.abc import Collection

"""Text helpers shared by the normalizers and the entity resolver."""

__all__ = [
    "NULL_SENTINELS",
    "clean_text",
    "is_absent",
    "normalize_text",
]

NULL_SENTINELS: frozenset[str] = frozenset({"null", "undefined"})

_WHITESPACE = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Comparison key: diacritics stripped, whitespace collapsed, case folded.

    >>> normalize_text("  João   da SILVA ")
    'joao da silva'
    """
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFD", str(value))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE.sub(" ", stripped).strip().casefold()


def is_absent(value: str | None, sentinels: Collection[str] = NULL_SENTINELS) -> bool:
    """True for None, blank strings and null placeholders exported by spreadsheets."""
    if value is None:
        return True
    stripped = str(value).strip()
    return stripped == "" or stripped.lower() in sentinels


def clean_text(value: str | None, sentinels: Collection[str] = NULL_SENTINELS) -> str:
    """Trimmed text, or "" for absent values."""
    if is_absent(value, sentinels):
        return ""
    return str(value).strip()
