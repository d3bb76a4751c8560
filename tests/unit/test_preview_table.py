from __future__ import annotations

from datetime import date

from consultant_import.services.orchestrator import preview
from consultant_import.services.preview import PREVIEW_COLUMNS, build_preview_frame, render_preview_table

TODAY = date(2026, 3, 15)


def _result(reference, rows, build_csv):
    return preview(build_csv(rows), reference, today=TODAY)


def test_preview_frame_marks_each_row(reference, build_csv):
    rows = [
        ["Acme Tecnologia Ltda", "João", "", "", "", "", "Ana Silva", "", "", "", ""],
        ["Acme Tecnologia Ltda", "Paula", "", "", "", "", "Ana", "", "", "", ""],
        ["Zeta Seguros", "Maria", "", "", "", "", "Ana Silva", "", "", "", ""],
    ]
    frame = build_preview_frame(_result(reference, rows, build_csv), reference)
    assert list(frame.columns) == PREVIEW_COLUMNS
    assert list(frame["Row"]) == [2, 3, 4]
    assert list(frame["Status"]) == ["OK", "WARN", "ERROR"]
    assert frame.loc[0, "Organization"] == "Acme Tecnologia Ltda"
    assert frame.loc[0, "Manager"] == "Ana Silva"
    assert frame.loc[2, "Name"] == "-"
    assert "not found" in frame.loc[2, "Notes"]


def test_render_preview_table_truncates(reference, build_csv):
    rows = [["Acme Tecnologia Ltda", f"Pessoa {i}", "", "", "", "", "Ana Silva", "", "", "", ""] for i in range(5)]
    text = render_preview_table(_result(reference, rows, build_csv), reference, max_rows=2)
    assert "Pessoa 0" in text
    assert "Pessoa 4" not in text
    assert text.endswith("Showing 2 of 5 rows...")
