"""Entity schemas for content analysis.

Entities are produced fresh for each analysis and belong solely to the
FactCheckResult they appear in. Models are frozen: an entity is never
mutated after extraction.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EntityKind(str, Enum):
    """Entity kind classification.

    Standard lexical kinds plus CLAIM for assertive sentences, which are
    tracked alongside named entities for cross verification.
    """

    PERSON = "person"
    ORGANIZATION = "organization"
    LOCATION = "location"
    DATE = "date"
    CLAIM = "claim"


class VerificationStatus(str, Enum):
    """Whether an entity could be corroborated."""

    VERIFIED = "verified"
    DISPUTED = "disputed"
    UNVERIFIED = "unverified"


class EntityReference(BaseModel):
    """Entity or claim extracted from submitted text.

    Attributes:
        name: Text span as it appears in the content (trimmed).
        kind: Entity kind.
        mention_count: Case-insensitive literal occurrence count in the text.
            Always 1 for claims.
        verification_status: Corroboration tag. Dates are always verified.
    """

    name: str = Field(..., description="Text span as it appears in the content")
    kind: EntityKind
    mention_count: int = Field(1, ge=1, description="Occurrences in the content")
    verification_status: Optional[VerificationStatus] = None

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "President Joe Biden",
                    "kind": "person",
                    "mention_count": 2,
                    "verification_status": "verified",
                },
                {
                    "name": "March 3rd, 2021",
                    "kind": "date",
                    "mention_count": 1,
                    "verification_status": "verified",
                },
            ]
        },
    }
