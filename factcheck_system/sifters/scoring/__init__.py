"""Score derivation, aggregation and classification.

Components:
    CrossVerificationScorer: entity verification rates + claim score (unclamped)
    ContentConsistencyCalculator: 100 - sensationalism + indicators (unclamped)
    OverallScoreAggregator: 0.3 / 0.4 / 0.3 weighted blend, clamped to 0-100
    ClassificationDecider: >= 70 Likely Real, <= 40 Likely Fake, else Unverifiable
"""

from factcheck_system.sifters.scoring.aggregator import (
    DEFAULT_WEIGHTS,
    AggregateScore,
    OverallScoreAggregator,
)
from factcheck_system.sifters.scoring.classifier import ClassificationDecider
from factcheck_system.sifters.scoring.content_consistency import ContentConsistencyCalculator
from factcheck_system.sifters.scoring.cross_verification import CrossVerificationScorer

__all__ = [
    "CrossVerificationScorer",
    "ContentConsistencyCalculator",
    "OverallScoreAggregator",
    "AggregateScore",
    "DEFAULT_WEIGHTS",
    "ClassificationDecider",
]
