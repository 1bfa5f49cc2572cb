"""Classification of the aggregate score into a three-way verdict.

| Score          | Classification |
|----------------|----------------|
| >= 70          | Likely Real    |
| <= 40          | Likely Fake    |
| otherwise      | Unverifiable   |

A total, monotonic step function: raising the score never moves the
verdict from Real back toward Fake.
"""

from factcheck_system.data_management.schemas import Classification


class ClassificationDecider:
    """
    Maps an aggregate score to a Classification.

    Attributes:
        real_threshold: Scores at or above are Likely Real
        fake_threshold: Scores at or below are Likely Fake
    """

    REAL_THRESHOLD = 70
    FAKE_THRESHOLD = 40

    def __init__(
        self,
        real_threshold: int = REAL_THRESHOLD,
        fake_threshold: int = FAKE_THRESHOLD,
    ):
        if fake_threshold >= real_threshold:
            raise ValueError(
                f"fake_threshold ({fake_threshold}) must be below real_threshold ({real_threshold})"
            )
        self.real_threshold = real_threshold
        self.fake_threshold = fake_threshold

    def decide(self, score: int) -> Classification:
        if score >= self.real_threshold:
            return Classification.LIKELY_REAL
        if score <= self.fake_threshold:
            return Classification.LIKELY_FAKE
        return Classification.UNVERIFIABLE


__all__ = ["ClassificationDecider"]
