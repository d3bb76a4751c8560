from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ..delimited.encoding import decode_with_encoding
from ..delimited.reader import EmptyFileError, read_table
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ImportConfig
from ..models.error_record import SEVERITY_ERROR, ErrorRecord
from ..models.outcome import Accepted, ImportSummary, RowOutcome
from ..models.record import EXPECTED_HEADERS, NormalizedRecord
from ..models.reference import ReferenceDataset
from .progress import RowProgress
from .resolver import EntityResolver
from .validation import validate_row

"""Batch import orchestration.

Two phases:
- preview: decode -> tokenize -> validate every row -> summarize. Pure apart
  from logging; nothing is stored.
- commit: hand the accepted records, in row order, to the persistence
  collaborator in a single call.

Per-row failures become RowOutcome diagnostics; a file without data rows
becomes a single file-level error in the summary (row -1 in the diagnostic log).
"""

__all__ = [
    "ProcessingError",
    "ImportPreview",
    "RecordSink",
    "read_source_file",
    "preview",
    "run",
    "commit",
]

logger = logging.getLogger(__name__)

RecordSink = Callable[[list[NormalizedRecord]], object]

SOURCE_SUFFIX = ".csv"


class ProcessingError(Exception):
    """Base exception for processing errors."""


@dataclass(frozen=True)
class ImportPreview:
    """Result of the preview phase, kept by the caller until commit or discard."""
    outcomes: tuple[RowOutcome, ...]
    summary: ImportSummary
    file_name: str = "<upload>"
    encoding: str = "utf-8"
    elapsed_seconds: float = 0.0
    header: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accepted_records(self) -> list[NormalizedRecord]:
        """Records of accepted rows, in input row order."""
        return [o.record for o in self.outcomes if isinstance(o, Accepted)]

    @property
    def failed(self) -> bool:
        """True when the file itself could not be processed."""
        return not self.outcomes and bool(self.summary.errors)


def read_source_file(path: Path) -> bytes:
    """Read the bytes of an operator-selected CSV file.

    Raises:
        ProcessingError: If the path is missing, not a file, not a .csv or unreadable
    """
    if not path.exists():
        raise ProcessingError(f"File not found: {path}")
    if not path.is_file():
        raise ProcessingError(f"Path is not a file: {path}")
    if path.suffix.lower() != SOURCE_SUFFIX:
        raise ProcessingError(f"Invalid format: {path.name} is not a CSV file")
    try:
        return path.read_bytes()
    except OSError as e:
        raise ProcessingError(f"Error reading file {path}: {e}") from e


def preview(
    file_bytes: bytes,
    reference: ReferenceDataset,
    config: ImportConfig | None = None,
    *,
    file_name: str = "<upload>",
    error_log: ErrorLogBuffer | None = None,
    today: date | None = None,
) -> ImportPreview:
    """Run the full pipeline over every row without side effects.

    Args:
        file_bytes: Raw uploaded content
        reference: Snapshot of organizations/managers/coordinators/accounts
        config: Import configuration (defaults when None)
        file_name: Name used in diagnostics
        error_log: Optional buffer receiving one record per error/warning
        today: Date used for defaulted fields (tests pin it)

    Returns:
        ImportPreview with per-row outcomes (input order) and the summary
    """
    cfg = config or ImportConfig()
    start = time.perf_counter()

    decoded = decode_with_encoding(file_bytes, cfg.fallback_encodings)
    try:
        table = read_table(decoded.text, delimiter=cfg.delimiter, expected_columns=EXPECTED_HEADERS)
    except EmptyFileError as e:
        logger.error("file=%s %s", file_name, e)
        if error_log is not None:
            error_log.append(ErrorRecord.create(file_name, -1, SEVERITY_ERROR, str(e)))
        return ImportPreview(
            outcomes=(),
            summary=ImportSummary.file_failure(str(e)),
            file_name=file_name,
            encoding=decoded.encoding,
            elapsed_seconds=time.perf_counter() - start,
        )

    resolver = EntityResolver(reference)
    outcomes: list[RowOutcome] = []
    accepted = 0
    with RowProgress(len(table.rows)) as progress:
        for row in table.rows:
            outcome = validate_row(row, resolver, cfg, today=today)
            outcomes.append(outcome)
            if isinstance(outcome, Accepted):
                accepted += 1
            progress.advance()
            progress.set_postfix(accepted=accepted, rejected=len(outcomes) - accepted)

    summary = ImportSummary.from_outcomes(outcomes)
    if error_log is not None:
        error_log.extend_from_outcomes(file_name, outcomes)

    elapsed = time.perf_counter() - start
    logger.info(
        "file=%s encoding=%s rows=%d accepted=%d rejected=%d warnings=%d",
        file_name,
        decoded.encoding,
        summary.total_rows,
        summary.success_count,
        summary.rejected_count,
        len(summary.warnings),
    )
    return ImportPreview(
        outcomes=tuple(outcomes),
        summary=summary,
        file_name=file_name,
        encoding=decoded.encoding,
        elapsed_seconds=elapsed,
        header=table.header.columns,
    )


def run(
    file_bytes: bytes,
    reference: ReferenceDataset,
    config: ImportConfig | None = None,
) -> tuple[ImportSummary, list[NormalizedRecord]]:
    """Preview a file and return its summary plus the accepted records."""
    result = preview(file_bytes, reference, config)
    return result.summary, result.accepted_records


def commit(result: ImportPreview, sink: RecordSink) -> int:
    """Hand accepted records to the persistence collaborator in one batch.

    Storage failures raised by the sink propagate unchanged to the caller.

    Returns:
        Number of records handed over (0 when nothing was accepted; the sink
        is not called in that case)
    """
    records: Sequence[NormalizedRecord] = result.accepted_records
    if not records:
        logger.warning("file=%s no valid records to import", result.file_name)
        return 0
    sink(list(records))
    logger.info("file=%s committed records=%d", result.file_name, len(records))
    return len(records)
