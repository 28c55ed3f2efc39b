"""Job matching against a user profile and priorities.

This module provides:
- JobMatcher: score, explain and rank job listings
- JobMatch: a ranked listing with score and reasons
"""

from .matcher import JobMatcher
from .models import JobMatch

__all__ = [
    "JobMatcher",
    "JobMatch",
]
