"""Text helpers for keyword and intent matching."""

from typing import Iterable


def normalize_for_matching(text: str) -> str:
    """Trim and lower-case text before substring matching.

    Hangul has no case, so lower() only affects Latin characters.

    Args:
        text: Raw user text (None is treated as empty)

    Returns:
        Normalized text
    """
    if not text:
        return ""
    return text.strip().lower()


def join_terms(terms: Iterable[str], separator: str = ", ") -> str:
    """Join terms for display, skipping blanks."""
    return separator.join(term for term in terms if term)
