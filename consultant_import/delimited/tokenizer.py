from __future__ import annotations

from enum import Enum

"""Delimited-text tokenizer.

Character-by-character state machine with two states:

- UNQUOTED: a quote enters QUOTED, the delimiter ends the field, LF or CRLF ends
  the row (rows whose trimmed fields are all empty are dropped), a lone CR is
  ignored, anything else is appended.
- QUOTED: a doubled quote appends one literal quote, a single quote returns to
  UNQUOTED, anything else (delimiters and line breaks included) is data.

Every field is trimmed of surrounding whitespace when it is closed.
"""

__all__ = [
    "tokenize",
]

QUOTE = '"'


class _State(Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def _close_row(rows: list[list[str]], row: list[str]) -> None:
    if any(cell != "" for cell in row):
        rows.append(row)


def tokenize(text: str, delimiter: str = ";") -> list[list[str]]:
    """Split decoded text into rows of trimmed string fields.

    Parameters
    ----------
    text: decoded file content
    delimiter: single-character field separator (default semicolon)
    """
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    state = _State.UNQUOTED

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        next_char = text[i + 1] if i + 1 < n else ""

        if state is _State.QUOTED:
            if char == QUOTE:
                if next_char == QUOTE:
                    cell.append(QUOTE)
                    i += 1
                else:
                    state = _State.UNQUOTED
            else:
                cell.append(char)
        elif char == QUOTE:
            state = _State.QUOTED
        elif char == delimiter:
            row.append("".join(cell).strip())
            cell = []
        elif char == "\n" or (char == "\r" and next_char == "\n"):
            if char == "\r":
                i += 1  # consume the LF of CRLF
            row.append("".join(cell).strip())
            _close_row(rows, row)
            row = []
            cell = []
        elif char != "\r":
            cell.append(char)
        i += 1

    # flush pending field/row at end of input
    if cell or row:
        row.append("".join(cell).strip())
        _close_row(rows, row)

    return rows
