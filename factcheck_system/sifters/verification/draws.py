"""Controllable draw sources for verification status and source jitter.

Every place the scoring rules need a pseudo-random value asks a DrawSource
for ``uniform(key)``. Two implementations:

- HashDrawSource (default): value derived from SHA-256 of the key, so the
  same entity always gets the same draw in any process.
- SeededDrawSource: a ``random.Random`` stream. ``reset()`` rewinds it to the
  seed; the pipeline resets at the start of every analysis so repeated
  calls on the same input are identical.

Both produce values uniform on [0, 1), which preserves the status and
score distributions of the rule tables.
"""

import hashlib
import random
from abc import ABC, abstractmethod
from typing import Optional

_TWO_POW_64 = float(2 ** 64)


class DrawSource(ABC):
    """Source of uniform draws on [0, 1)."""

    @abstractmethod
    def uniform(self, key: str) -> float:
        """Return a draw in [0, 1) for the given key."""

    def reset(self) -> None:
        """Rewind to the initial state. No-op for stateless sources."""

    def bounded(self, key: str, base: int, span: int) -> int:
        """Integer in ``[base, base + span)`` from a single draw."""
        if span <= 0:
            return base
        return base + int(self.uniform(key) * span)


class HashDrawSource(DrawSource):
    """Stateless draws from a SHA-256 digest of ``salt:key``.

    Attributes:
        salt: Mixed into every key; changing it reshuffles all draws.
    """

    def __init__(self, salt: str = ""):
        self.salt = salt

    def uniform(self, key: str) -> float:
        digest = hashlib.sha256(f"{self.salt}:{key}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big") / _TWO_POW_64


class SeededDrawSource(DrawSource):
    """Sequential draws from a seeded ``random.Random``.

    The key is ignored; values depend on call order only.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, key: str) -> float:
        return self._rng.random()

    def reset(self) -> None:
        self._rng.seed(self.seed)


def build_draw_source(seed: Optional[int] = None, salt: str = "") -> DrawSource:
    """Seeded source when a seed is given, hash source otherwise."""
    if seed is not None:
        return SeededDrawSource(seed)
    return HashDrawSource(salt=salt)


__all__ = ["DrawSource", "HashDrawSource", "SeededDrawSource", "build_draw_source"]
