"""Numeric helpers shared by the scoring components."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's built-in ``round`` uses banker's rounding (``round(0.5) == 0``);
    scores use half-up so 72.5 becomes 73 and -2.5 becomes -2.
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, lower: int, upper: int) -> int:
    """Bound ``value`` to ``[lower, upper]``."""
    return max(lower, min(upper, value))


__all__ = ["round_half_up", "clamp"]
