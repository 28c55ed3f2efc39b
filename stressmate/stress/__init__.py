"""Stress scoring from journal text and factor tags.

This module provides:
- StressScorer: score, category and advice for an entry
- tips_for / guidance_for: display helpers keyed on the score
- build_feedback: payload for the feedback screen
"""

from .engine import StressScorer
from .feedback import build_feedback, guidance_for, tips_for

__all__ = [
    "StressScorer",
    "tips_for",
    "guidance_for",
    "build_feedback",
]
