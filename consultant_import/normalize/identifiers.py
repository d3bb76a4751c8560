from __future__ import annotations

import re

from .text import NULL_SENTINELS

"""Identifier normalizers (CPF, CNPJ) and phone cleanup.

CPF is the short 11-digit personal id (canonical XXX.XXX.XXX-XX), CNPJ the long
14-digit company id (canonical XX.XXX.XXX/XXXX-XX). Bare digit strings of the
right length are punctuated, a CPF exported with a dot instead of the final
hyphen is repaired, and the result is clamped to the canonical length.
"""

__all__ = [
    "CPF_MAX_LENGTH",
    "CNPJ_MAX_LENGTH",
    "clean_cpf",
    "clean_cnpj",
    "clean_phone",
]

CPF_MAX_LENGTH = 14
CNPJ_MAX_LENGTH = 18

# "***" is how masked ids are exported
_ID_SENTINELS = NULL_SENTINELS | {"***"}

_WHITESPACE = re.compile(r"\s+")
_NON_DIGIT = re.compile(r"\D")
_CPF_DOT_SUFFIX = re.compile(r"^\d{3}\.\d{3}\.\d{3}\.\d{2}$")


def _prepare(value: str | None) -> str:
    if value is None:
        return ""
    cleaned = str(value).strip()
    if cleaned.lower() in _ID_SENTINELS:
        return ""
    cleaned = _WHITESPACE.sub("", cleaned)
    return cleaned.replace('"', "")


def clean_cpf(value: str | None) -> str | None:
    """Normalize a CPF.

    >>> clean_cpf("12345678901")
    '123.456.789-01'
    >>> clean_cpf("123.456.789.01")
    '123.456.789-01'
    """
    cleaned = _prepare(value)
    if not cleaned:
        return None

    digits = _NON_DIGIT.sub("", cleaned)
    if len(digits) == 11:
        cleaned = f"{digits[0:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:11]}"

    if _CPF_DOT_SUFFIX.match(cleaned):
        cleaned = cleaned[:11] + "-" + cleaned[12:]

    return cleaned[:CPF_MAX_LENGTH] or None


def clean_cnpj(value: str | None) -> str | None:
    """Normalize a CNPJ.

    >>> clean_cnpj("12345678000199")
    '12.345.678/0001-99'
    """
    cleaned = _prepare(value)
    if not cleaned:
        return None

    digits = _NON_DIGIT.sub("", cleaned)
    if len(digits) == 14:
        cleaned = f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:14]}"

    return cleaned[:CNPJ_MAX_LENGTH] or None


def clean_phone(value: str | None) -> str | None:
    """Collapse runs of whitespace; keep the operator's formatting otherwise."""
    if value is None:
        return None
    cleaned = str(value).strip()
    if not cleaned or cleaned.lower() in NULL_SENTINELS:
        return None
    return _WHITESPACE.sub(" ", cleaned)
