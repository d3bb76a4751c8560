from __future__ import annotations

from ..models.outcome import ImportSummary

"""SUMMARY line rendering.

Format:
SUMMARY rows={total} accepted={accepted} rejected={rejected} errors={errors}
warnings={warnings} elapsed_sec={elapsed}
"""

__all__ = [
    "render_summary_line",
    "format_seconds",
]


def format_seconds(value: float) -> str:
    """Render seconds without scientific notation and without a trailing '.0'."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(summary: ImportSummary, elapsed_seconds: float = 0.0) -> str:
    """Render the SUMMARY line for one preview run.

    Examples:
        >>> s = ImportSummary(success_count=1, errors=("Row 3: x",), warnings=(), total_rows=2)
        >>> render_summary_line(s, 2.0)
        'SUMMARY rows=2 accepted=1 rejected=1 errors=1 warnings=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY rows={summary.total_rows} "
        f"accepted={summary.success_count} "
        f"rejected={summary.rejected_count} "
        f"errors={len(summary.errors)} "
        f"warnings={len(summary.warnings)} "
        f"elapsed_sec={format_seconds(elapsed_seconds)}"
    )
