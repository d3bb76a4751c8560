"""Domain models for the consultant CSV import.

This package contains the frozen dataclasses shared by the reader, the validation
pipeline and the orchestrator: reference snapshot entities, the normalized record,
row outcomes and the import summary.
"""

from .config_models import ImportConfig
from .outcome import Accepted, ImportSummary, Rejected, RowOutcome
from .record import ConsultantStatus, NormalizedRecord, TerminationReason
from .reference import Account, Coordinator, Manager, Organization, ReferenceDataset

__all__ = [
    # Configuration models
    "ImportConfig",
    # Reference snapshot
    "Account",
    "Coordinator",
    "Manager",
    "Organization",
    "ReferenceDataset",
    # Processing models
    "ConsultantStatus",
    "NormalizedRecord",
    "TerminationReason",
    "Accepted",
    "Rejected",
    "RowOutcome",
    "ImportSummary",
]
