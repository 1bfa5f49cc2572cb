"""Result schema for fact-check analysis.

FactCheckResult is the sole output artifact of the pipeline. It is frozen
once constructed and carries every intermediate score so the verdict can be
explained and audited.

Design note: only confidence_score and source_credibility are bounded to
[0, 100]. content_consistency and cross_verification are stored exactly as
computed; they can drift outside that range before the weighted blend.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from factcheck_system.data_management.schemas.entity_schema import (
    EntityReference,
    VerificationStatus,
)


class Classification(str, Enum):
    """Three-way verdict for analyzed content."""

    LIKELY_REAL = "Likely Real"
    LIKELY_FAKE = "Likely Fake"
    UNVERIFIABLE = "Unverifiable"


class FactCheckResult(BaseModel):
    """Complete analysis result for a piece of content.

    Attributes:
        classification: Verdict derived from confidence_score.
        confidence_score: Clamped weighted aggregate (0-100).
        reasoning: Ordered natural-language justifications.
        entities: Extracted entities in extraction order (at most 10).
        source_credibility: Trust tier score of the source domain (0-100).
        content_consistency: Sensationalism vs. evidence balance (unclamped).
        cross_verification: Entity verification blended with claim score (unclamped).
        known_patterns: Advisory flags for known misinformation narratives.
    """

    classification: Classification
    confidence_score: int = Field(..., ge=0, le=100)
    reasoning: list[str] = Field(default_factory=list)
    entities: list[EntityReference] = Field(default_factory=list, max_length=10)
    source_credibility: int = Field(..., ge=0, le=100)
    content_consistency: int
    cross_verification: int
    known_patterns: list[str] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "classification": "Likely Real",
                    "confidence_score": 78,
                    "reasoning": [
                        "The information comes from a highly credible source with a strong track record of accuracy.",
                        "Based on our analysis, this content appears to be factually accurate.",
                    ],
                    "entities": [],
                    "source_credibility": 92,
                    "content_consistency": 130,
                    "cross_verification": 50,
                    "known_patterns": [],
                }
            ]
        },
    }

    def count_status(self, status: VerificationStatus) -> int:
        """Number of entities carrying the given verification status."""
        return sum(1 for e in self.entities if e.verification_status == status)

    def entities_of_kind(self, kind: str) -> list[EntityReference]:
        """Entities of a single kind, in extraction order."""
        return [e for e in self.entities if e.kind.value == kind]

    def summary(self, max_reasons: Optional[int] = None) -> str:
        """One-line human summary, e.g. ``Likely Real (78% confidence)``."""
        line = f"{self.classification.value} ({self.confidence_score}% confidence)"
        if max_reasons:
            line += ": " + " ".join(self.reasoning[:max_reasons])
        return line
