from __future__ import annotations

import pandas as pd

from ..models.outcome import Accepted
from ..models.reference import ReferenceDataset
from .orchestrator import ImportPreview

"""Preview table for operator review before commit.

One line per data row: row number, status marker, consultant name, the
organization and manager the row resolved to, and its diagnostics.
"""

__all__ = [
    "PREVIEW_COLUMNS",
    "build_preview_frame",
    "render_preview_table",
]

PREVIEW_COLUMNS = ["Row", "Status", "Name", "Organization", "Manager", "Notes"]

STATUS_OK = "OK"
STATUS_WARN = "WARN"
STATUS_ERROR = "ERROR"


def build_preview_frame(result: ImportPreview, reference: ReferenceDataset) -> pd.DataFrame:
    """Build a DataFrame of row outcomes (input order)."""
    records = []
    for outcome in result.outcomes:
        name = organization = manager = "-"
        if isinstance(outcome, Accepted):
            status = STATUS_WARN if outcome.warnings else STATUS_OK
            name = outcome.record.name
            found_manager = reference.manager_by_id(outcome.record.manager_id)
            if found_manager is not None:
                manager = found_manager.name
                found_org = reference.organization_by_id(found_manager.organization_id)
                if found_org is not None:
                    organization = found_org.name
        else:
            status = STATUS_ERROR
        records.append(
            {
                "Row": outcome.row_number,
                "Status": status,
                "Name": name,
                "Organization": organization,
                "Manager": manager,
                "Notes": "; ".join([*outcome.errors, *outcome.warnings]),
            }
        )
    return pd.DataFrame.from_records(records, columns=PREVIEW_COLUMNS)


def render_preview_table(result: ImportPreview, reference: ReferenceDataset, max_rows: int = 50) -> str:
    """Text rendering of the first `max_rows` preview lines."""
    frame = build_preview_frame(result, reference)
    if frame.empty:
        return "(no rows)"
    text = frame.head(max_rows).to_string(index=False)
    if len(frame) > max_rows:
        text += f"\nShowing {max_rows} of {len(frame)} rows..."
    return text
