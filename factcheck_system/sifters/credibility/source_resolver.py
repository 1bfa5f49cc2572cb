"""Source credibility resolution from static domain tiers.

Priority order:
1. No URL -> neutral 50
2. Unparseable URL (no scheme/host, or a parse error) -> neutral 50
3. Hostname (lowercase, leading "www." stripped) contains a trusted domain
4. ... a moderate-trust domain
5. ... a low-trust domain
6. Unknown domain

Tiers 3-6 map to a score range; the offset inside the range comes from the
injected draw source keyed on the hostname, so a given host always lands on
the same score under the default hash draws.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple
from urllib.parse import urlparse

from loguru import logger

from factcheck_system.config.source_credibility import (
    LOW_TRUST_DOMAINS,
    MODERATE_TRUST_DOMAINS,
    NEUTRAL_SOURCE_SCORE,
    SOURCE_TIER_RANGES,
    TRUSTED_DOMAINS,
)
from factcheck_system.sifters.verification import DrawSource, HashDrawSource


@dataclass
class SourceResolution:
    """Resolved credibility for a source URL.

    Attributes:
        score: Credibility score (0-100)
        tier: trusted / moderate / low / unknown, or None when neutral default
        hostname: Normalized hostname, None when absent or unparseable
        matched_domain: Domain list entry that matched, if any
    """

    score: int
    tier: Optional[str] = None
    hostname: Optional[str] = None
    matched_domain: Optional[str] = None


def extract_hostname(url: str) -> Optional[str]:
    """
    Extract a normalized hostname from an absolute URL.

    Handles:
    - Full URLs (https://www.reuters.com/article/123) -> reuters.com
    - Strings without scheme or host -> None
    - Malformed authority sections (bad port, bad IPv6) -> None

    Args:
        url: Candidate URL string

    Returns:
        Lowercase hostname without leading "www.", or None
    """
    if not url:
        return None

    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
        # Accessing .port validates the authority section
        parsed.port
    except ValueError:
        return None

    if not parsed.scheme or not hostname:
        return None

    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


class SourceCredibilityResolver:
    """
    Maps a source URL to a credibility score via domain tiers.

    Usage:
        resolver = SourceCredibilityResolver()
        resolver.score("https://www.reuters.com/world/")  # 85-99

    Attributes:
        tiers: Ordered (tier name, domains) pairs checked by substring
        ranges: Tier name -> (base, span)
        draws: Source of the in-range offset
        neutral_score: Score for absent or unparseable URLs
    """

    def __init__(
        self,
        trusted: Optional[Sequence[str]] = None,
        moderate: Optional[Sequence[str]] = None,
        low: Optional[Sequence[str]] = None,
        ranges: Optional[Dict[str, Tuple[int, int]]] = None,
        draws: Optional[DrawSource] = None,
        neutral_score: int = NEUTRAL_SOURCE_SCORE,
    ):
        self.tiers: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
            ("trusted", tuple(trusted if trusted is not None else TRUSTED_DOMAINS)),
            ("moderate", tuple(moderate if moderate is not None else MODERATE_TRUST_DOMAINS)),
            ("low", tuple(low if low is not None else LOW_TRUST_DOMAINS)),
        )
        self.ranges = ranges or SOURCE_TIER_RANGES
        self.draws = draws or HashDrawSource()
        self.neutral_score = neutral_score
        self._logger = logger.bind(component="SourceCredibilityResolver")

    def resolve(self, source_url: Optional[str]) -> SourceResolution:
        """
        Resolve a source URL to a score and tier.

        Never raises for string or None input.

        Args:
            source_url: Optional source URL

        Returns:
            SourceResolution with score in [0, 100]
        """
        if not source_url:
            return SourceResolution(score=self.neutral_score)

        hostname = extract_hostname(source_url)
        if hostname is None:
            self._logger.debug("Unparseable source URL, using neutral score")
            return SourceResolution(score=self.neutral_score)

        tier, matched = self._match_tier(hostname)
        base, span = self.ranges[tier]
        score = self.draws.bounded(f"source:{hostname}", base, span)

        self._logger.debug(
            f"Source credibility {score}",
            hostname=hostname,
            tier=tier,
            matched=matched,
        )
        return SourceResolution(
            score=score,
            tier=tier,
            hostname=hostname,
            matched_domain=matched,
        )

    def score(self, source_url: Optional[str]) -> int:
        return self.resolve(source_url).score

    def _match_tier(self, hostname: str) -> Tuple[str, Optional[str]]:
        for tier, domains in self.tiers:
            for domain in domains:
                if domain in hostname:
                    return tier, domain
        return "unknown", None


__all__ = ["SourceCredibilityResolver", "SourceResolution", "extract_hostname"]
