from __future__ import annotations

import re
from datetime import date

from ..models.record import ConsultantStatus, TerminationReason
from .text import is_absent, normalize_text

"""Boolean, year and enumeration coercion.

None of these reject a row: absent input takes the field default and unknown
enumeration labels degrade to a catch-all. The validation pipeline decides which
degradations deserve a warning.
"""

__all__ = [
    "parse_active_flag",
    "parse_status",
    "parse_termination_reason",
    "parse_year",
]

TRUE_LITERALS = frozenset({"true", "1", "sim", "yes"})

# Portuguese (stored) and English labels, compared after normalize_text
_STATUS_LABELS: dict[str, ConsultantStatus] = {
    "ativo": ConsultantStatus.ACTIVE,
    "active": ConsultantStatus.ACTIVE,
    "perdido": ConsultantStatus.LOST,
    "lost": ConsultantStatus.LOST,
    "encerrado": ConsultantStatus.ENDED,
    "ended": ConsultantStatus.ENDED,
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_active_flag(value: str | None, default: bool = True) -> bool:
    """Absent -> default, otherwise case-insensitive literal match."""
    if is_absent(value):
        return default
    return str(value).strip().lower() in TRUE_LITERALS


def parse_status(value: str | None) -> ConsultantStatus:
    """Map a status label to ConsultantStatus; unknown or blank is ACTIVE."""
    return _STATUS_LABELS.get(normalize_text(value), ConsultantStatus.ACTIVE)


def parse_year(value: str | None, default: int | None = None) -> int:
    """Leading integer of the cell (e.g. "2025", "2025.0"); default current year."""
    fallback = default if default is not None else date.today().year
    if is_absent(value):
        return fallback
    match = _LEADING_INT.match(str(value))
    if match is None:
        return fallback
    year = int(match.group(1))
    return year or fallback


def parse_termination_reason(value: str | None) -> TerminationReason | None:
    """Match free text against the closed reason list.

    Order: exact (diacritic/case-insensitive), then substring in either
    direction (first canonical entry wins), then TerminationReason.OTHER.
    Blank input means no reason at all.
    """
    if is_absent(value):
        return None
    key = normalize_text(value)

    for reason in TerminationReason:
        if normalize_text(reason.value) == key:
            return reason

    for reason in TerminationReason:
        canonical = normalize_text(reason.value)
        if key in canonical or canonical in key:
            return reason

    return TerminationReason.OTHER
