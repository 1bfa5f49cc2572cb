"""Known misinformation narrative matching.

Each rule is a list of term groups. A rule fires when every group has at
least one of its terms present (case-insensitive substring). Matches are
purely additive annotations, independent of the classification.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from factcheck_system.config.vocabularies import KNOWN_PATTERN_RULES


@dataclass(frozen=True)
class KnownPatternRule:
    """A named narrative with its required term groups and advisory text."""

    name: str
    groups: Tuple[Tuple[str, ...], ...]
    message: str

    def matches(self, lowered_text: str) -> bool:
        return all(
            any(term in lowered_text for term in group)
            for group in self.groups
        )


class KnownPatternMatcher:
    """
    Flags well-known debunked narratives and clickbait phrasing.

    Usage:
        matcher = KnownPatternMatcher()
        flags = matcher.match("The vaccine contains a microchip")

    Attributes:
        rules: Rules evaluated in order; output follows rule order
    """

    def __init__(self, rules: Optional[Sequence[KnownPatternRule]] = None):
        if rules is None:
            rules = [KnownPatternRule(name, groups, message) for name, groups, message in KNOWN_PATTERN_RULES]
        self.rules: Tuple[KnownPatternRule, ...] = tuple(rules)
        self._logger = logger.bind(component="KnownPatternMatcher")

    def matching_rules(self, text: str) -> List[KnownPatternRule]:
        if not text:
            return []
        lowered = text.lower()
        return [rule for rule in self.rules if rule.matches(lowered)]

    def match(self, text: str) -> List[str]:
        """Advisory messages for every rule that fires, in rule order."""
        fired = self.matching_rules(text)
        if fired:
            self._logger.debug(
                f"{len(fired)} known patterns matched",
                patterns=[rule.name for rule in fired],
            )
        return [rule.message for rule in fired]


__all__ = ["KnownPatternMatcher", "KnownPatternRule"]
