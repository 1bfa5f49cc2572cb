"""Source credibility components.

- SourceCredibilityResolver: domain tiers -> 0-100 credibility score
- UrlSafetyInspector: URL-safety preview for presentation code (not read
  by the scoring pipeline)
"""

from factcheck_system.sifters.credibility.source_resolver import (
    SourceCredibilityResolver,
    SourceResolution,
    extract_hostname,
)
from factcheck_system.sifters.credibility.url_safety import (
    UrlSafetyInspector,
    registrable_domain,
)

__all__ = [
    "SourceCredibilityResolver",
    "SourceResolution",
    "extract_hostname",
    "UrlSafetyInspector",
    "registrable_domain",
]
