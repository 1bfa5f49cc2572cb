"""Verification status assignment for extracted entities.

No external corroboration happens here. Status is drawn from per-kind rate
tables so that, across many entities, the mix of verified / disputed /
unverified follows the configured distribution:

| Kind         | Verified | Remainder                     |
|--------------|----------|-------------------------------|
| person       | 70%      | half disputed, half unverified|
| organization | 80%      | half disputed, half unverified|
| location     | 90%      | all unverified                |
| claim        | 50%      | half disputed, half unverified|
| date         | 100%     | -                             |
"""

from typing import Dict, Optional, Tuple

from factcheck_system.config.vocabularies import VERIFICATION_RATES
from factcheck_system.data_management.schemas import EntityKind, VerificationStatus
from factcheck_system.sifters.verification.draws import DrawSource, HashDrawSource


class VerificationStatusAssigner:
    """
    Assigns a VerificationStatus to an entity from its kind and name.

    Two draws are taken per entity, keyed on kind and name: the first
    decides verified vs. not, the second splits the remainder between
    disputed and unverified.

    Usage:
        assigner = VerificationStatusAssigner()
        status = assigner.assign(EntityKind.PERSON, "Dr. Jane Smith")

    Attributes:
        draws: Source of uniform draws
        rates: Kind name -> (verified rate, disputed share of remainder)
    """

    def __init__(
        self,
        draws: Optional[DrawSource] = None,
        rates: Optional[Dict[str, Tuple[float, float]]] = None,
    ):
        self.draws = draws or HashDrawSource()
        self.rates = rates or VERIFICATION_RATES

    def assign(self, kind: EntityKind, name: str) -> VerificationStatus:
        """
        Draw a verification status for an entity.

        Args:
            kind: Entity kind
            name: Entity text, used as the draw key

        Returns:
            VERIFIED for dates and kinds without a rate entry, otherwise a
            status drawn from the kind's rates.
        """
        if kind == EntityKind.DATE or kind.value not in self.rates:
            return VerificationStatus.VERIFIED

        verified_rate, disputed_share = self.rates[kind.value]
        if self.draws.uniform(f"{kind.value}:verified:{name}") < verified_rate:
            return VerificationStatus.VERIFIED
        if self.draws.uniform(f"{kind.value}:disputed:{name}") < disputed_share:
            return VerificationStatus.DISPUTED
        return VerificationStatus.UNVERIFIED


__all__ = ["VerificationStatusAssigner"]
