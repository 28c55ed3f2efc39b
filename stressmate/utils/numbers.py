"""Numeric helpers shared by the scorers.

All scores and money figures are whole numbers. Python's built-in round()
uses banker's rounding, so the scorers go through round_half_up() to keep
.5 cases moving towards positive infinity.
"""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, with halves rounded up.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def clamp(value: Number, lower: Number, upper: Number) -> Number:
    """Limit value to the closed range [lower, upper]."""
    return max(lower, min(upper, value))


def clamp_score(value: Number, lower: int = 0, upper: int = 100) -> int:
    """Clamp to a score range and round half up."""
    return round_half_up(clamp(value, lower, upper))
