"""Entity extraction components.

EntityExtractor scans raw text for people, organizations, dates, locations
and assertive claim sentences using lexical pattern rules.
"""

from factcheck_system.sifters.extraction.entity_extractor import (
    EntityExtractor,
    count_occurrences,
)

__all__ = ["EntityExtractor", "count_occurrences"]
