from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

import consultant_import.config as config_package
from consultant_import.logging.error_log import ErrorLogBuffer
from consultant_import.models.error_record import SEVERITY_WARNING, ErrorRecord

"""Diagnostic log JSON schema contract."""

SCHEMA_PATH = Path(config_package.__file__).parent / "error_log_schema.json"


@pytest.fixture(scope="module")
def schema():
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2026-01-05T10:12:33Z",
        "file": "consultores.csv",
        "row": 4,
        "severity": "ERROR",
        "message": 'Manager "Fulano" not found for organization "Acme"',
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_accepts_file_level_row(schema):
    record = {
        "timestamp": "2026-01-05T10:12:33Z",
        "file": "vazio.csv",
        "row": -1,
        "severity": "ERROR",
        "message": "File is empty or has no data rows",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2026-01-05T10:12:33Z",
        "file": "consultores.csv",
        "row": 2,
        "severity": "WARNING",
        "message": "x",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_written_lines_conform(schema, tmp_path: Path):
    buffer = ErrorLogBuffer(tmp_path)
    buffer.append(ErrorRecord.create("consultores.csv", 2, SEVERITY_WARNING, "approximate"))
    buffer.append(ErrorRecord.create("consultores.csv", -1, "ERROR", "empty"))
    path = buffer.flush()
    for line in path.read_text(encoding="utf-8").splitlines():
        jsonschema.validate(json.loads(line), schema)
