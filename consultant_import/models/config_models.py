from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclass for the consultant CSV import.

This module defines the domain model for configuration. It is separate from the
YAML loader in consultant_import/config/loader.py and focuses on typing and the
defaults applied when a key is absent.
"""

DEFAULT_DELIMITER = ";"
DEFAULT_FALLBACK_ENCODINGS: tuple[str, ...] = ("cp1252", "latin-1")
DEFAULT_NULL_SENTINELS: frozenset[str] = frozenset({"null", "undefined"})
DEFAULT_ROLE = "Consultor"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for one import run.

    Every field has a default so that a run without config/import.yml behaves
    like the documented operator contract (semicolon separated, UTF-8 first).
    """
    delimiter: str = DEFAULT_DELIMITER  # Field separator
    fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS  # Tried after UTF-8, in order
    # Cell values treated as absent (compared lower-cased)
    null_sentinels: frozenset[str] = field(default_factory=lambda: DEFAULT_NULL_SENTINELS)
    default_role: str = DEFAULT_ROLE  # cargo_consultores when blank
    error_log_dir: str = "logs"  # Diagnostic JSON Lines directory
    preview_rows: int = 50  # Rows rendered by the preview table
    log_level: str = DEFAULT_LOG_LEVEL  # Console logger level (DEBUG, INFO, WARNING, ERROR)
