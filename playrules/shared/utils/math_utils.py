"""Small numeric helpers shared by the rules modules."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Python's ``round`` rounds halves to even (``round(2.5) == 2``); scores and
    levels need ``2.5 -> 3``.
    """
    if isinstance(value, int):
        return value
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(value, high))


__all__ = [
    "clamp",
    "round_half_up",
]
