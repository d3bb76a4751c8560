from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_DELIMITER,
    DEFAULT_FALLBACK_ENCODINGS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NULL_SENTINELS,
    DEFAULT_ROLE,
    ImportConfig,
)
from ..models.reference import ReferenceDataset

"""Config loader.

Responsibilities:
- Load YAML config/import.yml
- Validate keys against the bundled JSON schema (config_schema.json)
- Apply defaults for absent keys
- Load the reference snapshot (YAML or JSON) used by the CLI
"""

__all__ = [
    "ConfigError",
    "SCHEMA_PATH",
    "REFERENCE_SCHEMA_PATH",
    "default_config",
    "load_config",
    "load_reference_dataset",
]

_schema_dir = Path(__file__).parent
SCHEMA_PATH = _schema_dir / "config_schema.json"
REFERENCE_SCHEMA_PATH = _schema_dir / "reference_schema.json"


class ConfigError(Exception):
    pass


def _validate(data: Any, schema_path: Path, what: str) -> None:
    """Validate data against a JSON schema file.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the data
            fails validation (missing required keys, wrong types, extra keys).
    """
    if not schema_path.exists():
        raise ConfigError(f"{what} schema not found: {schema_path}")
    try:
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"{what} validation failed: {e.message}") from e


def _read_yaml(path: Path, what: str) -> Any:
    if not path.exists():
        raise ConfigError(f"{what} file not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e


def default_config() -> ImportConfig:
    return ImportConfig()


def load_config(path: Path) -> ImportConfig:
    data = _read_yaml(path, "config") or {}
    _validate(data, SCHEMA_PATH, "config")

    sentinels = data.get("null_sentinels")
    return ImportConfig(
        delimiter=data.get("delimiter", DEFAULT_DELIMITER),
        fallback_encodings=tuple(data.get("fallback_encodings", DEFAULT_FALLBACK_ENCODINGS)),
        null_sentinels=(
            frozenset(s.strip().lower() for s in sentinels)
            if sentinels is not None
            else DEFAULT_NULL_SENTINELS
        ),
        default_role=data.get("default_role", DEFAULT_ROLE),
        error_log_dir=data.get("error_log_dir", "logs"),
        preview_rows=data.get("preview_rows", 50),
        log_level=data.get("log_level", DEFAULT_LOG_LEVEL).upper(),
    )


def load_reference_dataset(path: Path) -> ReferenceDataset:
    """Load a reference snapshot file (JSON is accepted as YAML)."""
    data = _read_yaml(path, "reference")
    if data is None:
        raise ConfigError(f"reference file is empty: {path}")
    _validate(data, REFERENCE_SCHEMA_PATH, "reference")
    return ReferenceDataset.from_dict(data)
