"""Additional validation utilities for rule tables."""

import warnings
from typing import Any, Dict, List

# Hourly wage (KRW) above which a wage floor is almost certainly a typo
PLAUSIBLE_WAGE_CEILING = 100_000


def _keywords(rules: Any) -> List[str]:
    """Extract normalized keywords from a raw keyword rule list."""
    if not isinstance(rules, list):
        return []
    keywords = []
    for rule in rules:
        if isinstance(rule, dict) and isinstance(rule.get("keyword"), str):
            keyword = rule["keyword"].strip().lower()
            if keyword:
                keywords.append(keyword)
    return keywords


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check raw rule tables for suspicious but valid settings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    stress = config_dict.get("stress", {})
    if isinstance(stress, dict):
        bonus = _keywords(stress.get("bonus_keywords", []))
        relief = _keywords(stress.get("relief_keywords", []))

        # Duplicates are applied once per occurrence
        for list_name, keywords in (("bonus_keywords", bonus), ("relief_keywords", relief)):
            duplicates = sorted({kw for kw in keywords if keywords.count(kw) > 1})
            if duplicates:
                warning_messages.append(
                    f"Duplicate keywords in {list_name} will be applied more than once: "
                    f"{', '.join(duplicates)}"
                )

        both = sorted(set(bonus) & set(relief))
        if both:
            warning_messages.append(
                f"Keywords listed as both bonus and relief will apply both deltas: {', '.join(both)}"
            )

    jobs = config_dict.get("jobs", {})
    if isinstance(jobs, dict):
        wage_floor = jobs.get("wage_floor")
        if isinstance(wage_floor, (int, float)) and wage_floor > PLAUSIBLE_WAGE_CEILING:
            warning_messages.append(
                f"jobs.wage_floor ({wage_floor}) is above any plausible hourly wage; "
                "every job will get a negative wage contribution"
            )

    chat = config_dict.get("chat", {})
    if isinstance(chat, dict):
        quick_replies = chat.get("quick_replies", [])
        if isinstance(quick_replies, list) and len(quick_replies) > 6:
            warning_messages.append(
                f"chat.quick_replies has {len(quick_replies)} entries; only a few fit on screen"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
