"""Weighted aggregation of the three derived scores.

    confidence = clamp(round(0.3 * source + 0.4 * cross + 0.3 * consistency), 0, 100)

This is the single point where out-of-range intermediates (cross
verification, content consistency) are folded into a bounded number.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from loguru import logger

from factcheck_system.utils.scoring import clamp, round_half_up

DEFAULT_WEIGHTS: Dict[str, float] = {
    "source_credibility": 0.3,
    "cross_verification": 0.4,
    "content_consistency": 0.3,
}


@dataclass
class AggregateScore:
    """Aggregate with its pre-clamp value.

    Attributes:
        score: Clamped confidence score (0-100)
        raw: Rounded weighted sum before clamping
    """

    score: int
    raw: int

    @property
    def was_clamped(self) -> bool:
        return self.score != self.raw


class OverallScoreAggregator:
    """
    Blends source credibility, cross verification and content consistency.

    Attributes:
        weights: Component name -> weight
        lower: Lower clamp bound
        upper: Upper clamp bound
    """

    def __init__(
        self,
        weights: Optional[Dict[str, float]] = None,
        lower: int = 0,
        upper: int = 100,
    ):
        self.weights = weights or DEFAULT_WEIGHTS
        self.lower = lower
        self.upper = upper
        self._logger = logger.bind(component="OverallScoreAggregator")

    def aggregate(
        self,
        source_credibility: int,
        cross_verification: int,
        content_consistency: int,
    ) -> AggregateScore:
        raw = round_half_up(
            self.weights["source_credibility"] * source_credibility
            + self.weights["cross_verification"] * cross_verification
            + self.weights["content_consistency"] * content_consistency
        )
        result = AggregateScore(score=clamp(raw, self.lower, self.upper), raw=raw)
        if result.was_clamped:
            self._logger.debug(f"Aggregate {raw} clamped to {result.score}")
        return result

    def score(
        self,
        source_credibility: int,
        cross_verification: int,
        content_consistency: int,
    ) -> int:
        return self.aggregate(source_credibility, cross_verification, content_consistency).score


__all__ = ["OverallScoreAggregator", "AggregateScore", "DEFAULT_WEIGHTS"]
