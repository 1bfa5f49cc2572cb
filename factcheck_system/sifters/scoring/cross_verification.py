"""Cross-verification scoring from entity verification rates and claim score.

Formula (rates in percent of all extracted entities):

    round(0.6 * verified_rate + 0.4 * claim_score - 0.4 * dispute_rate)

An empty entity list short-circuits to a neutral 50. The result is NOT
clamped: a text full of disputed claims with a low claim score can go
negative. Only the final aggregate is bounded.
"""

from typing import Sequence

from loguru import logger

from factcheck_system.data_management.schemas import EntityReference, VerificationStatus
from factcheck_system.utils.scoring import round_half_up


class CrossVerificationScorer:
    """
    Blends entity verification with the claim-analysis score.

    Attributes:
        verified_weight: Weight of the verified-entity rate
        claim_weight: Weight of the claim score
        dispute_weight: Penalty weight of the disputed-entity rate
        neutral_score: Result when there are no entities
    """

    NEUTRAL_SCORE = 50

    def __init__(
        self,
        verified_weight: float = 0.6,
        claim_weight: float = 0.4,
        dispute_weight: float = 0.4,
        neutral_score: int = NEUTRAL_SCORE,
    ):
        self.verified_weight = verified_weight
        self.claim_weight = claim_weight
        self.dispute_weight = dispute_weight
        self.neutral_score = neutral_score
        self._logger = logger.bind(component="CrossVerificationScorer")

    def score(self, entities: Sequence[EntityReference], claim_score: int) -> int:
        total = len(entities)
        if total == 0:
            return self.neutral_score

        verified = sum(1 for e in entities if e.verification_status == VerificationStatus.VERIFIED)
        disputed = sum(1 for e in entities if e.verification_status == VerificationStatus.DISPUTED)

        verification_rate = verified / total * 100
        dispute_rate = disputed / total * 100

        result = round_half_up(
            self.verified_weight * verification_rate
            + self.claim_weight * claim_score
            - self.dispute_weight * dispute_rate
        )
        self._logger.debug(
            f"Cross verification {result}",
            verified=verified,
            disputed=disputed,
            total=total,
            claim_score=claim_score,
        )
        return result


__all__ = ["CrossVerificationScorer"]
