from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import SEVERITY_ERROR, SEVERITY_WARNING, ErrorRecord
from ..models.outcome import RowOutcome

"""Diagnostic log buffering.

- JSON Lines with a fixed schema (no extra keys)
- One file per run: `<log_dir>/import-YYYYMMDD-HHMMSS.log` (UTC), created on
  first flush
- Records are buffered and written in one go; single-threaded use only
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """In-memory buffer of diagnostics. flush() appends them as JSON Lines."""

    def __init__(self, log_dir: Path | str = "logs") -> None:
        self._records: list[ErrorRecord] = []
        self._log_dir = Path(log_dir)
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._log_dir / f"import-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def extend_from_outcomes(self, file_name: str, outcomes: Iterable[RowOutcome]) -> None:
        """Buffer one record per row error and warning, in row order."""
        for outcome in outcomes:
            for message in outcome.errors:
                self.append(ErrorRecord.create(file_name, outcome.row_number, SEVERITY_ERROR, message))
            for message in outcome.warnings:
                self.append(ErrorRecord.create(file_name, outcome.row_number, SEVERITY_WARNING, message))

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._records)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Write buffered records; returns the file path, or None if nothing was written."""
        if not self._records:
            return None
        fp = self.file_path
        fp.parent.mkdir(parents=True, exist_ok=True)
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
