from __future__ import annotations

import re

import pytest

from consultant_import.models.outcome import ImportSummary
from consultant_import.services.summary import render_summary_line

"""SUMMARY line contract: one line, fixed key order, plain numbers."""

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+rows=([0-9]+)\s+accepted=([0-9]+)\s+rejected=([0-9]+)\s+"
    r"errors=([0-9]+)\s+warnings=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


@pytest.mark.parametrize("elapsed", [0.0, 0.004, 1.25, 12.0, 3600.5])
def test_summary_line_matches_contract(elapsed):
    summary = ImportSummary(
        success_count=3,
        errors=("Row 5: x",),
        warnings=("Row 2: y", "Row 3: z"),
        total_rows=4,
    )
    line = render_summary_line(summary, elapsed)
    match = SUMMARY_PATTERN.match(line)
    assert match, f"SUMMARY line should match regex: {line}"
    assert match.groups()[:5] == ("4", "3", "1", "1", "2")
    assert "e" not in match.group(6)
