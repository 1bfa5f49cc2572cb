"""Text heuristic detectors.

Components:
    VocabularyDetector: Presence-counting base over an immutable vocabulary
    SensationalismDetector: Sensationalist vocabulary (15 per hit, max 100)
    CredibilityIndicatorDetector: Evidentiary vocabulary (10 per hit, max 100)
    ClaimAnalyzer: Extreme vs. credibility claim markers around a neutral 50
    KnownPatternMatcher: Well-known debunked narratives

Usage:
    from factcheck_system.sifters.detection import SensationalismDetector

    detector = SensationalismDetector()
    detector.score("SHOCKING secret exposed")  # 45
"""

from factcheck_system.sifters.detection.base_detector import (
    RegexDetector,
    SubstringDetector,
    VocabularyDetector,
)
from factcheck_system.sifters.detection.claim_analyzer import ClaimAnalysis, ClaimAnalyzer
from factcheck_system.sifters.detection.known_patterns import (
    KnownPatternMatcher,
    KnownPatternRule,
)
from factcheck_system.sifters.detection.vocabulary_detectors import (
    CredibilityIndicatorDetector,
    SensationalismDetector,
)

__all__ = [
    "VocabularyDetector",
    "SubstringDetector",
    "RegexDetector",
    "ClaimAnalyzer",
    "ClaimAnalysis",
    "KnownPatternMatcher",
    "KnownPatternRule",
    "SensationalismDetector",
    "CredibilityIndicatorDetector",
]
