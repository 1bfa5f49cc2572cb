"""Content consistency from the sensationalism / evidence balance.

    100 - sensationalism_score + credibility_indicator_score

Unclamped: ranges from 0 (all sensationalist, no evidence) to 200 (no
sensationalism, all evidence). The weighted aggregate absorbs the excess.
"""


class ContentConsistencyCalculator:
    """Combines detector scores into a consistency score."""

    BASELINE = 100

    def __init__(self, baseline: int = BASELINE):
        self.baseline = baseline

    def calculate(self, sensationalism_score: int, credibility_indicator_score: int) -> int:
        return self.baseline - sensationalism_score + credibility_indicator_score


__all__ = ["ContentConsistencyCalculator"]
