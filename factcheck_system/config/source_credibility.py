"""Source credibility configuration for content analysis.

Domain tiers are checked in priority order (trusted, moderate, low trust)
by substring containment against the source hostname. Each tier maps to a
score range realised as ``base + floor(draw * span)``:

1. Trusted (wire services, papers of record, journals): 85-99
2. Moderate (mainstream outlets with mixed record): 60-79
3. Low trust (satire, tabloids, hyper-partisan sites): 30-49
4. Unknown domain (neutral with slight skepticism): 40-59

Missing or unparseable URLs resolve to NEUTRAL_SOURCE_SCORE.
"""

from typing import Dict, Tuple

NEUTRAL_SOURCE_SCORE: int = 50

TRUSTED_DOMAINS: Tuple[str, ...] = (
    "reuters.com",
    "ap.org",
    "apnews.com",
    "bbc.com",
    "bbc.co.uk",
    "npr.org",
    "nytimes.com",
    "washingtonpost.com",
    "wsj.com",
    "bloomberg.com",
    "economist.com",
    "theguardian.com",
    "time.com",
    "nature.com",
    "science.org",
)

MODERATE_TRUST_DOMAINS: Tuple[str, ...] = (
    "cnn.com",
    "nbcnews.com",
    "abcnews.go.com",
    "cbsnews.com",
    "usatoday.com",
    "latimes.com",
    "chicagotribune.com",
    "newsweek.com",
    "forbes.com",
    "businessinsider.com",
)

LOW_TRUST_DOMAINS: Tuple[str, ...] = (
    "theonion.com",
    "dailywire.com",
    "breitbart.com",
    "infowars.com",
    "dailycaller.com",
    "nationalenquirer.com",
    "thesun.co.uk",
    "dailymail.co.uk",
    "nypost.com",
)

# Tier name -> (base score, span). Score = base + floor(draw * span)
SOURCE_TIER_RANGES: Dict[str, Tuple[int, int]] = {
    "trusted": (85, 15),
    "moderate": (60, 20),
    "low": (30, 20),
    "unknown": (40, 20),
}

# URL-safety preview lists (independent of the scoring tiers above)
SAFE_PREVIEW_DOMAINS: Tuple[str, ...] = (
    "reuters.com",
    "ap.org",
    "bbc.com",
    "nytimes.com",
    "washingtonpost.com",
    "wsj.com",
    "npr.org",
    "theguardian.com",
    "economist.com",
)

SUSPICIOUS_PREVIEW_DOMAINS: Tuple[str, ...] = (
    "example.org",
    "temp-site.net",
    "clickbait-news.com",
)

MALICIOUS_PREVIEW_DOMAINS: Tuple[str, ...] = (
    "malware-site.com",
    "phishing-example.net",
    "fake-login.com",
)

# Registrable domain -> (title, description) for preview metadata
PREVIEW_METADATA: Dict[str, Tuple[str, str]] = {
    "reuters.com": (
        "Reuters | Breaking International News & Views",
        "Reuters provides business, financial, national and international news to professionals.",
    ),
    "bbc.com": (
        "BBC - Homepage",
        "Breaking news, sport, TV, radio and a whole lot more. The BBC informs, educates and entertains.",
    ),
    "phishing-example.net": (
        "Login to Your Account - Security Verification",
        "Verify your account details to continue to our secure platform.",
    ),
}

# Preview status -> (base score, span)
PREVIEW_SCORE_RANGES: Dict[str, Tuple[int, int]] = {
    "safe": (90, 10),
    "suspicious": (40, 30),
    "dangerous": (10, 20),
    "unknown_https": (50, 20),
    "insecure": (30, 20),
}
