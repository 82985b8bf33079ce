"""Half-up rounding helpers (Python's round() is banker's rounding)."""

import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_to_increment(value: float, increment: float) -> float:
    """Nearest multiple of ``increment``, halves rounding up."""
    return math.floor(value / increment + 0.5) * increment
