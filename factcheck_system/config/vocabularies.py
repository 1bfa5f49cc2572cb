"""Vocabulary and pattern tables for the text heuristics.

Kept as immutable tuples so detectors can be constructed with substituted
or localized lists without touching aggregation logic.

The claim markers are regular expressions (matched case-insensitively);
the sensationalist and credibility vocabularies are plain substrings.
"""

from typing import Dict, Tuple

# Markers of extraordinary claims. Each pattern counts at most once.
EXTREME_CLAIM_PATTERNS: Tuple[str, ...] = (
    r"never before",
    r"first time in history",
    r"unprecedented",
    r"shocking",
    r"unbelievable",
    r"scientists baffled",
    r"doctors hate",
    r"won't believe",
    r"secret",
    r"conspiracy",
)

# Markers of evidence-backed claims. Each pattern counts at most once.
CREDIBILITY_CLAIM_PATTERNS: Tuple[str, ...] = (
    r"according to research",
    r"studies show",
    r"evidence suggests",
    r"data indicates",
    r"experts agree",
    r"published in",
    r"peer-reviewed",
)

SENSATIONALIST_TERMS: Tuple[str, ...] = (
    "shocking",
    "secret",
    "conspiracy",
    "truth revealed",
    "cover-up",
    "hoax",
    "breakthrough",
    "miracle",
    "revolutionary",
    "they don't want you to know",
    "hidden",
    "exposed",
    "exclusive",
)

CREDIBILITY_TERMS: Tuple[str, ...] = (
    "research",
    "study",
    "according to",
    "expert",
    "evidence",
    "data",
    "analysis",
    "report",
    "published",
    "survey",
    "percent",
    "statistics",
    "findings",
    "results",
    "conclusion",
)

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PERSON_TITLES: Tuple[str, ...] = (
    r"Mr\.",
    r"Mrs\.",
    r"Dr\.",
    r"President",
    r"Senator",
    r"Governor",
    r"Prof\.",
    r"Professor",
)

ASSERTIVE_VERBS: Tuple[str, ...] = (
    "confirms",
    "proves",
    "shows",
    "reveals",
    "announces",
    "declares",
    "states",
    "affirms",
    "claims",
    "alleges",
    "says",
    "admits",
)

LOCATION_PREPOSITIONS: Tuple[str, ...] = ("in", "at", "from", "to")

# Entity kind -> (verified rate, disputed share of the remainder).
# Dates are not drawn; they are always verified.
VERIFICATION_RATES: Dict[str, Tuple[float, float]] = {
    "person": (0.7, 0.5),
    "organization": (0.8, 0.5),
    "location": (0.9, 0.0),
    "claim": (0.5, 0.5),
}

# Known misinformation narratives. Each rule is a tuple of term groups:
# every group must have at least one term present (lowercase substring).
KNOWN_PATTERN_RULES: Tuple[Tuple[str, Tuple[Tuple[str, ...], ...], str], ...] = (
    (
        "microchip_vaccine",
        (("microchip",), ("vaccine",)),
        "This content references the debunked conspiracy theory about microchips in vaccines.",
    ),
    (
        "5g_covid",
        (("5g",), ("covid", "coronavirus")),
        "This content references the debunked conspiracy theory linking 5G to COVID-19.",
    ),
    (
        "election_fraud_2020",
        (("election", "voting"), ("fraud",), ("2020",)),
        "This content references claims of widespread 2020 election fraud that have been "
        "repeatedly investigated and debunked.",
    ),
    (
        "clickbait_health",
        (("doctors hate", "one weird trick", "won't believe"),),
        "This content uses common clickbait phrases often associated with misleading health claims.",
    ),
)
