from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from .record import NormalizedRecord

"""Row outcome and import summary models.

A row ends either Accepted (carrying its record) or Rejected (carrying at least
one fatal error); both carry warnings. Encoding the two cases as distinct types
means an outcome cannot hold a record and errors at the same time.
"""

__all__ = [
    "Accepted",
    "Rejected",
    "RowOutcome",
    "ImportSummary",
    "prefix_row",
]


def prefix_row(row_number: int, message: str) -> str:
    return f"Row {row_number}: {message}"


@dataclass(frozen=True)
class Accepted:
    row_number: int  # 1-based, header is row 1
    record: NormalizedRecord
    warnings: tuple[str, ...] = ()

    @property
    def data(self) -> NormalizedRecord | None:
        return self.record

    @property
    def errors(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class Rejected:
    row_number: int
    errors: tuple[str, ...]
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Rejected outcome requires at least one error")

    @property
    def data(self) -> NormalizedRecord | None:
        return None


RowOutcome = Union[Accepted, Rejected]


@dataclass(frozen=True)
class ImportSummary:
    """Aggregate of one preview run.

    Attributes:
        success_count: Rows that produced a record
        errors: Row-prefixed fatal messages (or one file-level message)
        warnings: Row-prefixed warnings
        total_rows: Data rows seen (excluding header and blank lines)
    """
    success_count: int
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    total_rows: int = 0

    @property
    def rejected_count(self) -> int:
        return self.total_rows - self.success_count

    @staticmethod
    def from_outcomes(outcomes: Iterable[RowOutcome]) -> ImportSummary:
        outcomes = list(outcomes)
        return ImportSummary(
            success_count=sum(1 for o in outcomes if isinstance(o, Accepted)),
            errors=tuple(prefix_row(o.row_number, e) for o in outcomes for e in o.errors),
            warnings=tuple(prefix_row(o.row_number, w) for o in outcomes for w in o.warnings),
            total_rows=len(outcomes),
        )

    @staticmethod
    def file_failure(message: str) -> ImportSummary:
        """Summary for a file that yielded no processable rows at all."""
        return ImportSummary(success_count=0, errors=(message,), warnings=(), total_rows=0)
