"""URL-safety preview heuristics.

Standalone from the scoring pipeline: presentation code uses the preview
to warn before a user follows a link. No network access; the security
verdict comes from static lists and URL shape.

| Condition                       | Status     | Score  | Threats                            |
|---------------------------------|------------|--------|------------------------------------|
| URL contains a safe domain      | safe       | 90-99  | -                                  |
| URL contains a suspicious domain| suspicious | 40-69  | Unverified Content, Clickbait      |
| URL contains a malicious domain | dangerous  | 10-29  | Phishing, Malware, Data Collection |
| https, "blog"/"news" in URL     | suspicious | 50-69  | -                                  |
| https otherwise                 | unknown    | 50-69  | -                                  |
| not https                       | suspicious | 30-49  | Insecure Connection                |
| unparseable                     | unknown    | 0      | -                                  |
"""

from typing import Dict, Optional, Sequence, Tuple

from loguru import logger

from factcheck_system.config.source_credibility import (
    MALICIOUS_PREVIEW_DOMAINS,
    PREVIEW_METADATA,
    PREVIEW_SCORE_RANGES,
    SAFE_PREVIEW_DOMAINS,
    SUSPICIOUS_PREVIEW_DOMAINS,
)
from factcheck_system.data_management.schemas import SecurityStatus, UrlPreview
from factcheck_system.sifters.credibility.source_resolver import extract_hostname
from factcheck_system.sifters.verification import DrawSource, HashDrawSource


class UrlSafetyInspector:
    """
    Builds a UrlPreview for a URL.

    Usage:
        inspector = UrlSafetyInspector()
        preview = inspector.inspect("https://www.bbc.com/news")
        preview.security_status  # SecurityStatus.SAFE

    Attributes:
        safe_domains: Domains treated as safe (substring of the URL)
        suspicious_domains: Known clickbait / throwaway domains
        malicious_domains: Known phishing / malware domains
        metadata: Registrable domain -> (title, description)
        draws: Source of the in-range score offset
    """

    def __init__(
        self,
        safe_domains: Optional[Sequence[str]] = None,
        suspicious_domains: Optional[Sequence[str]] = None,
        malicious_domains: Optional[Sequence[str]] = None,
        metadata: Optional[Dict[str, Tuple[str, str]]] = None,
        draws: Optional[DrawSource] = None,
    ):
        self.safe_domains = tuple(safe_domains or SAFE_PREVIEW_DOMAINS)
        self.suspicious_domains = tuple(suspicious_domains or SUSPICIOUS_PREVIEW_DOMAINS)
        self.malicious_domains = tuple(malicious_domains or MALICIOUS_PREVIEW_DOMAINS)
        self.metadata = metadata or PREVIEW_METADATA
        self.draws = draws or HashDrawSource()
        self._logger = logger.bind(component="UrlSafetyInspector")

    def inspect(self, url: str) -> UrlPreview:
        hostname = extract_hostname(url)
        if hostname is None:
            self._logger.debug("Unparseable URL, preview unavailable")
            return UrlPreview(url=url, security_status=SecurityStatus.UNKNOWN, security_score=0)

        is_safe = any(d in url for d in self.safe_domains)
        threat_types: list[str] = []

        if is_safe:
            status, range_key = SecurityStatus.SAFE, "safe"
        elif any(d in url for d in self.suspicious_domains):
            status, range_key = SecurityStatus.SUSPICIOUS, "suspicious"
            threat_types = ["Unverified Content", "Clickbait"]
        elif any(d in url for d in self.malicious_domains):
            status, range_key = SecurityStatus.DANGEROUS, "dangerous"
            threat_types = ["Phishing", "Malware", "Data Collection"]
        elif url.startswith("https://"):
            status = (
                SecurityStatus.SUSPICIOUS
                if "blog" in url or "news" in url
                else SecurityStatus.UNKNOWN
            )
            range_key = "unknown_https"
        else:
            status, range_key = SecurityStatus.SUSPICIOUS, "insecure"
            threat_types = ["Insecure Connection"]

        base, span = PREVIEW_SCORE_RANGES[range_key]
        score = self.draws.bounded(f"preview:{hostname}", base, span)

        domain = registrable_domain(hostname)
        title, description = self.metadata.get(
            domain,
            (f"Website at {hostname}", "No description available"),
        )

        self._logger.debug(
            f"URL preview: {status.value}",
            hostname=hostname,
            score=score,
        )
        return UrlPreview(
            url=url,
            title=title,
            description=description,
            image_url=f"https://picsum.photos/seed/{domain}/600/400" if is_safe else None,
            security_status=status,
            security_score=score,
            threat_types=threat_types or None,
        )


def registrable_domain(hostname: str) -> str:
    """Last two labels of a hostname (``news.bbc.com`` -> ``bbc.com``)."""
    return ".".join(hostname.split(".")[-2:])


__all__ = ["UrlSafetyInspector", "registrable_domain"]
