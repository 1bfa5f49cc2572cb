"""Claim analysis from extreme vs. credibility phrase markers.

Score formula (presence counts, each marker at most once):

    clamp(50 + 10 * credibility_markers - 15 * extreme_markers, 0, 100)

Starts neutral at 50. Evidence language ("studies show", "peer-reviewed")
raises it; extraordinary-claim language ("scientists baffled", "secret")
lowers it faster than evidence raises it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from factcheck_system.config.vocabularies import (
    CREDIBILITY_CLAIM_PATTERNS,
    EXTREME_CLAIM_PATTERNS,
)
from factcheck_system.sifters.detection.base_detector import RegexDetector
from factcheck_system.utils.scoring import clamp


@dataclass
class ClaimAnalysis:
    """Result of claim analysis.

    Attributes:
        score: Clamped claim score (0-100)
        extreme_markers: Extreme patterns present
        credibility_markers: Credibility patterns present
    """

    score: int
    extreme_markers: List[str] = field(default_factory=list)
    credibility_markers: List[str] = field(default_factory=list)


class ClaimAnalyzer:
    """
    Scores claim language in content.

    Usage:
        analyzer = ClaimAnalyzer()
        score = analyzer.score("Studies show the effect is small.")  # 60

    Attributes:
        extreme: Detector over extreme-claim patterns
        credible: Detector over credibility-claim patterns
    """

    BASE_SCORE = 50
    CREDIBILITY_WEIGHT = 10
    EXTREME_WEIGHT = 15

    def __init__(
        self,
        extreme_patterns: Optional[Sequence[str]] = None,
        credibility_patterns: Optional[Sequence[str]] = None,
    ):
        self.extreme = RegexDetector(extreme_patterns or EXTREME_CLAIM_PATTERNS)
        self.credible = RegexDetector(credibility_patterns or CREDIBILITY_CLAIM_PATTERNS)
        self._logger = logger.bind(component="ClaimAnalyzer")

    def analyze(self, text: str) -> ClaimAnalysis:
        extreme_hits = self.extreme.hits(text)
        credible_hits = self.credible.hits(text)
        raw = (
            self.BASE_SCORE
            + self.CREDIBILITY_WEIGHT * len(credible_hits)
            - self.EXTREME_WEIGHT * len(extreme_hits)
        )
        result = ClaimAnalysis(
            score=clamp(raw, 0, 100),
            extreme_markers=extreme_hits,
            credibility_markers=credible_hits,
        )
        self._logger.debug(
            f"Claim score {result.score}",
            extreme=len(extreme_hits),
            credible=len(credible_hits),
        )
        return result

    def score(self, text: str) -> int:
        return self.analyze(text).score


__all__ = ["ClaimAnalyzer", "ClaimAnalysis"]
