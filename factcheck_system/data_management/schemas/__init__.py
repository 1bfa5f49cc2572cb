"""Schema package for content analysis data structures.

Pydantic models for extracted entities and the fact-check result. All
models are frozen: each analysis creates fresh instances and nothing is
persisted.

Usage:
    from factcheck_system.data_management.schemas import EntityReference, EntityKind
    entity = EntityReference(name="Geneva", kind=EntityKind.LOCATION)
"""

from factcheck_system.data_management.schemas.entity_schema import (
    EntityKind,
    EntityReference,
    VerificationStatus,
)
from factcheck_system.data_management.schemas.result_schema import (
    Classification,
    FactCheckResult,
)
from factcheck_system.data_management.schemas.preview_schema import (
    SecurityStatus,
    UrlPreview,
)

__all__ = [
    # Entity
    "EntityKind",
    "EntityReference",
    "VerificationStatus",
    # Result
    "Classification",
    "FactCheckResult",
    # URL preview
    "SecurityStatus",
    "UrlPreview",
]
