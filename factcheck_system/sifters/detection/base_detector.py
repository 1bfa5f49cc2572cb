"""Base class for vocabulary-driven text detectors.

A detector owns an immutable vocabulary and reports which entries are
present in a text. Presence, not frequency: each entry counts at most once
however often it repeats. Subclasses choose how presence is tested
(substring containment or regex search) and how hits become a score.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from loguru import logger


class VocabularyDetector(ABC):
    """
    Abstract detector over a fixed vocabulary.

    Attributes:
        vocabulary: Entries checked against the text, in order
        per_hit: Score contributed by each distinct hit
        cap: Upper bound on the score
    """

    per_hit: int = 10
    cap: int = 100

    def __init__(self, vocabulary: Sequence[str]):
        self.vocabulary: Tuple[str, ...] = tuple(vocabulary)
        self._logger = logger.bind(component=type(self).__name__)

    @abstractmethod
    def contains(self, text: str, entry: str) -> bool:
        """Whether a single vocabulary entry is present in the text."""

    def hits(self, text: str) -> List[str]:
        """Vocabulary entries present in the text, in vocabulary order."""
        if not text:
            return []
        return [entry for entry in self.vocabulary if self.contains(text, entry)]

    def count(self, text: str) -> int:
        return len(self.hits(text))

    def score(self, text: str) -> int:
        """``min(cap, per_hit * hit_count)``."""
        found = self.hits(text)
        result = min(self.cap, self.per_hit * len(found))
        if found:
            self._logger.debug(f"{len(found)} hits, score {result}", hits=found)
        return result


class SubstringDetector(VocabularyDetector):
    """Case-insensitive substring containment."""

    def contains(self, text: str, entry: str) -> bool:
        return entry.lower() in text.lower()


class RegexDetector(VocabularyDetector):
    """Case-insensitive regex search; vocabulary entries are patterns."""

    def __init__(self, vocabulary: Sequence[str]):
        super().__init__(vocabulary)
        self._compiled = {p: re.compile(p, re.IGNORECASE) for p in self.vocabulary}

    def contains(self, text: str, entry: str) -> bool:
        return self._compiled[entry].search(text) is not None


__all__ = ["VocabularyDetector", "SubstringDetector", "RegexDetector"]
