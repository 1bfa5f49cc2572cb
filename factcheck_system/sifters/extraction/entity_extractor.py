"""Lexical entity and claim extraction.

Pattern rules stand in for named-entity recognition. Extraction order is
fixed and significant, because the result is truncated in that order:

1. People: optional honorific + two or more capitalized words
2. Organizations: two to four capitalized words, minus names already
   found as people
3. Dates: D/M/Y or "Month D[st|nd|rd|th], YYYY" (always verified)
4. Locations: capitalized word (optionally ", Capitalized") right after
   in/at/from/to; month names excluded; deduplicated in first-seen order
5. Claims: assertive fragments ending in . ! or ? (at least 16 characters)
"""

import re
from typing import Collection, List, Optional

from loguru import logger

from factcheck_system.config.vocabularies import (
    ASSERTIVE_VERBS,
    LOCATION_PREPOSITIONS,
    MONTH_NAMES,
    PERSON_TITLES,
)
from factcheck_system.data_management.schemas import EntityKind, EntityReference
from factcheck_system.sifters.verification import VerificationStatusAssigner

_MONTHS = "|".join(MONTH_NAMES)

PERSON_PATTERN = re.compile(
    rf"(?:{'|'.join(PERSON_TITLES)})?\s[A-Z][a-z]+(?:\s[A-Z][a-z]+)+"
)
ORGANIZATION_PATTERN = re.compile(r"[A-Z][a-z]+(?:\s[A-Z][a-z]+){1,3}")
DATE_PATTERN = re.compile(
    rf"(?:\d{{1,2}}/\d{{1,2}}/\d{{2,4}})|(?:(?:{_MONTHS})\s\d{{1,2}}(?:st|nd|rd|th)?,\s\d{{4}})"
)
LOCATION_PATTERN = re.compile(
    rf"\b(?:{'|'.join(LOCATION_PREPOSITIONS)})\s([A-Z][a-z]+(?:,\s[A-Z][a-z]+)?)"
)
MONTH_PATTERN = re.compile(rf"(?:{_MONTHS})")
CLAIM_PATTERNS = (
    re.compile(rf"\b(?:{'|'.join(ASSERTIVE_VERBS)})(?:\sthat)?\s[^.!?]+[.!?]"),
    re.compile(r"\b[Aa]ccording\sto[^.!?]+[.!?]"),
    re.compile(r"\b(?:is|are)\s(?:not\s)?[^.!?]+[.!?]"),
)

MIN_CLAIM_LENGTH = 16


def count_occurrences(text: str, term: str) -> int:
    """Case-insensitive literal occurrence count of ``term`` in ``text``."""
    if not term:
        return 0
    return len(re.findall(re.escape(term), text, re.IGNORECASE))


class EntityExtractor:
    """
    Extracts people, organizations, dates, locations and claims from text.

    Usage:
        extractor = EntityExtractor()
        entities = extractor.extract("President Joe Biden spoke in Ohio.")

    Attributes:
        status_assigner: Draws verification status per entity
        max_entities: Cap on returned entities (truncated in extraction order)
    """

    DEFAULT_MAX_ENTITIES = 10

    def __init__(
        self,
        status_assigner: Optional[VerificationStatusAssigner] = None,
        max_entities: int = DEFAULT_MAX_ENTITIES,
    ):
        self.status_assigner = status_assigner or VerificationStatusAssigner()
        self.max_entities = max_entities
        self._logger = logger.bind(component="EntityExtractor")

    def extract(self, text: str) -> List[EntityReference]:
        """
        Extract entities from text in fixed kind order.

        Args:
            text: Raw content

        Returns:
            At most max_entities EntityReference objects
        """
        if not text:
            return []

        people = self._extract_people(text)
        person_names = {e.name for e in people}
        entities: List[EntityReference] = [
            *people,
            *self._extract_organizations(text, person_names),
            *self._extract_dates(text),
            *self._extract_locations(text),
            *self._extract_claims(text),
        ]

        kept = entities[: self.max_entities]
        self._logger.debug(
            f"Extracted {len(entities)} entities, kept {len(kept)}",
            kinds=[e.kind.value for e in kept],
        )
        return kept

    def _extract_people(self, text: str) -> List[EntityReference]:
        return [
            self._build(match.group(0).strip(), EntityKind.PERSON, text)
            for match in PERSON_PATTERN.finditer(text)
        ]

    def _extract_organizations(
        self,
        text: str,
        person_names: Collection[str],
    ) -> List[EntityReference]:
        """Capitalized runs not already counted as people."""
        return [
            self._build(name, EntityKind.ORGANIZATION, text)
            for name in (m.group(0).strip() for m in ORGANIZATION_PATTERN.finditer(text))
            if name not in person_names
        ]

    def _extract_dates(self, text: str) -> List[EntityReference]:
        return [
            self._build(match.group(0), EntityKind.DATE, text)
            for match in DATE_PATTERN.finditer(text)
        ]

    def _extract_locations(self, text: str) -> List[EntityReference]:
        """Preposition-led capitalized words, deduplicated, months excluded."""
        seen = {}
        for match in LOCATION_PATTERN.finditer(text):
            candidate = match.group(1)
            if MONTH_PATTERN.fullmatch(candidate):
                continue
            seen.setdefault(candidate, None)
        return [self._build(name, EntityKind.LOCATION, text) for name in seen]

    def _extract_claims(self, text: str) -> List[EntityReference]:
        claims = []
        for pattern in CLAIM_PATTERNS:
            for match in pattern.finditer(text):
                claim = match.group(0).strip()
                if len(claim) < MIN_CLAIM_LENGTH:
                    continue
                claims.append(
                    EntityReference(
                        name=claim,
                        kind=EntityKind.CLAIM,
                        mention_count=1,
                        verification_status=self.status_assigner.assign(EntityKind.CLAIM, claim),
                    )
                )
        return claims

    def _build(self, name: str, kind: EntityKind, text: str) -> EntityReference:
        return EntityReference(
            name=name,
            kind=kind,
            mention_count=max(1, count_occurrences(text, name)),
            verification_status=self.status_assigner.assign(kind, name),
        )


__all__ = ["EntityExtractor", "count_occurrences"]
