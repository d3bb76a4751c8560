from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from consultant_import.logging.error_log import ErrorLogBuffer
from consultant_import.models.outcome import Accepted, Rejected
from consultant_import.services.orchestrator import (
    ProcessingError,
    commit,
    preview,
    read_source_file,
    run,
)

TODAY = date(2026, 3, 15)


def _rows() -> list[list[str]]:
    return [
        ["Acme Tecnologia Ltda", "João", "", "", "", "", "Ana Silva", "", "", "", "1.000,00"],
        ["Zeta Seguros", "Maria", "", "", "", "", "Ana Silva", "", "", "", ""],
    ]


def test_preview_returns_outcomes_in_row_order(reference, build_csv):
    result = preview(build_csv(_rows()), reference, file_name="c.csv", today=TODAY)
    assert [o.row_number for o in result.outcomes] == [2, 3]
    assert isinstance(result.outcomes[0], Accepted)
    assert isinstance(result.outcomes[1], Rejected)
    assert result.summary.success_count == 1
    assert result.summary.errors == ('Row 3: Organization "Zeta Seguros" not found',)
    assert result.encoding == "utf-8"
    assert result.failed is False
    assert result.accepted_records[0].payment_amount == 1000.0


def test_preview_buffers_diagnostics(reference, build_csv):
    buffer = ErrorLogBuffer("unused")
    preview(build_csv(_rows()), reference, file_name="c.csv", error_log=buffer, today=TODAY)
    assert [(r.row, r.severity) for r in buffer.records] == [(3, "ERROR")]


def test_preview_of_header_only_file_is_a_file_failure(reference, build_csv):
    buffer = ErrorLogBuffer("unused")
    result = preview(build_csv([]), reference, file_name="empty.csv", error_log=buffer)
    assert result.failed is True
    assert result.outcomes == ()
    assert result.summary.errors == ("File is empty or has no data rows",)
    assert buffer.records[0].row == -1


def test_run_returns_summary_and_records(reference, build_csv):
    summary, records = run(build_csv(_rows()), reference)
    assert summary.total_rows == 2
    assert [r.name for r in records] == ["João"]


def test_commit_hands_records_to_sink_once(reference, build_csv):
    result = preview(build_csv(_rows()), reference, today=TODAY)
    sink = MagicMock()
    assert commit(result, sink) == 1
    sink.assert_called_once()
    (records,), _ = sink.call_args
    assert [r.name for r in records] == ["João"]


def test_commit_without_accepted_rows_skips_sink(reference, build_csv):
    result = preview(build_csv([_rows()[1]]), reference, today=TODAY)
    sink = MagicMock()
    assert commit(result, sink) == 0
    sink.assert_not_called()


def test_commit_propagates_sink_failures(reference, build_csv):
    result = preview(build_csv(_rows()), reference, today=TODAY)
    sink = MagicMock(side_effect=RuntimeError("db down"))
    with pytest.raises(RuntimeError, match="db down"):
        commit(result, sink)


def test_read_source_file_checks_path(tmp_path: Path):
    with pytest.raises(ProcessingError, match="not found"):
        read_source_file(tmp_path / "missing.csv")
    with pytest.raises(ProcessingError, match="not a file"):
        read_source_file(tmp_path)
    other = tmp_path / "data.xlsx"
    other.write_bytes(b"x")
    with pytest.raises(ProcessingError, match="not a CSV"):
        read_source_file(other)
    good = tmp_path / "data.CSV"
    good.write_bytes(b"a;b\r\n1;2\r\n")
    assert read_source_file(good) == b"a;b\r\n1;2\r\n"


def test_preview_survives_extreme_cell_values(reference, build_csv):
    header = ["razao_social_cliente", "nome_consultores", "gestor_imediato_id", "data_saida", "valor_pagamento"]
    rows = [["Acme Tecnologia Ltda", "João", "Ana Silva", "99999999", "NaN"]]
    result = preview(build_csv(rows, header=header), reference, today=TODAY)
    assert result.summary.success_count == 1
    record = result.accepted_records[0]
    assert record.exit_date is None
    assert record.payment_amount is None
