from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the diagnostic log.

This module defines the ErrorRecord dataclass used for structured JSON Lines
logging of row diagnostics. It supports row=-1 as a sentinel value for
file-level failures where no specific row applies.
"""

__all__ = [
    "ErrorRecord",
    "SEVERITY_ERROR",
    "SEVERITY_WARNING",
]

SEVERITY_ERROR = "ERROR"
SEVERITY_WARNING = "WARNING"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured diagnostic record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: CSV filename being imported
        row: Row number (header is row 1). Use -1 for file-level failures
        severity: ERROR (row rejected) or WARNING (row accepted, degraded)
        message: Human-readable diagnostic without the row prefix
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    severity: str
    message: str

    @staticmethod
    def create(file: str, row: int, severity: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            severity=severity,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to one JSON line (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
