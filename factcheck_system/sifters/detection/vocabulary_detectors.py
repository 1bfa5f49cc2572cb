"""Sensationalism and credibility-indicator detectors.

Both count distinct vocabulary hits by substring containment:
- SensationalismDetector: 15 points per hit, capped at 100
- CredibilityIndicatorDetector: 10 points per hit, capped at 100
"""

from typing import Optional, Sequence

from factcheck_system.config.vocabularies import CREDIBILITY_TERMS, SENSATIONALIST_TERMS
from factcheck_system.sifters.detection.base_detector import SubstringDetector


class SensationalismDetector(SubstringDetector):
    """Scores sensationalist vocabulary ("shocking", "cover-up", "hoax", ...)."""

    per_hit = 15

    def __init__(self, vocabulary: Optional[Sequence[str]] = None):
        super().__init__(vocabulary or SENSATIONALIST_TERMS)


class CredibilityIndicatorDetector(SubstringDetector):
    """Scores evidentiary vocabulary ("research", "data", "findings", ...)."""

    per_hit = 10

    def __init__(self, vocabulary: Optional[Sequence[str]] = None):
        super().__init__(vocabulary or CREDIBILITY_TERMS)


__all__ = ["SensationalismDetector", "CredibilityIndicatorDetector"]
