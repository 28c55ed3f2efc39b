"""Utility functions for rounding, clamping and text matching."""

from .numbers import clamp, clamp_score, round_half_up
from .text import join_terms, normalize_for_matching

__all__ = [
    # Numbers
    "round_half_up",
    "clamp",
    "clamp_score",
    # Text
    "normalize_for_matching",
    "join_terms",
]
