from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .tokenizer import tokenize

"""Header mapping for tokenized CSV content.

The first parsed row is the header; every following row becomes a RawRow
addressed by column name. Row numbers follow the spreadsheet convention: the
header is row 1, the first data row is row 2 (blank lines were already dropped
by the tokenizer).
"""

__all__ = [
    "EmptyFileError",
    "HeaderMap",
    "RawRow",
    "Table",
    "read_table",
]

logger = logging.getLogger(__name__)


class EmptyFileError(Exception):
    """Raised when the file has no data row after the header."""


@dataclass(frozen=True)
class HeaderMap:
    """Ordered column names with a name -> position index."""
    columns: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for pos, name in enumerate(self.columns):
            index.setdefault(name, pos)  # first occurrence wins on duplicate headers
        object.__setattr__(self, "_index", index)

    def position(self, column: str) -> int | None:
        return self._index.get(column)

    def __contains__(self, column: object) -> bool:
        return column in self._index

    def missing(self, expected: Iterable[str]) -> list[str]:
        return [c for c in expected if c not in self._index]


@dataclass(frozen=True)
class RawRow:
    """One data row positionally aligned to the header.

    Short rows are padded implicitly: `get` returns "" for a missing trailing
    cell and for a column that is not in the header.
    """
    row_number: int
    cells: tuple[str, ...]
    header: HeaderMap

    def get(self, column: str) -> str:
        pos = self.header.position(column)
        if pos is None or pos >= len(self.cells):
            return ""
        return self.cells[pos]

    def as_dict(self) -> dict[str, str]:
        return {name: self.get(name) for name in self.header.columns}


@dataclass(frozen=True)
class Table:
    header: HeaderMap
    rows: list[RawRow]


def read_table(
    text: str,
    delimiter: str = ";",
    expected_columns: Iterable[str] | None = None,
) -> Table:
    """Tokenize decoded text and map data rows onto the header.

    Steps:
    1. Tokenize (blank rows are skipped there)
    2. Validate a header plus at least one data row exist
    3. Build the header map from the first row
    4. Log (never fail on) expected columns missing from the header
    """
    parsed = tokenize(text, delimiter=delimiter)
    if len(parsed) < 2:
        raise EmptyFileError("File is empty or has no data rows")

    header = HeaderMap(tuple(c.strip() for c in parsed[0]))

    if expected_columns is not None:
        missing = header.missing(expected_columns)
        if missing:
            logger.warning("header is missing expected columns: %s", missing)

    rows = [
        RawRow(row_number=idx + 1, cells=tuple(cells), header=header)
        for idx, cells in enumerate(parsed[1:], start=1)
    ]
    return Table(header=header, rows=rows)
