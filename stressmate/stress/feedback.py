"""Display helpers built on top of a stress result.

The result card and the feedback screen share the same tip lists but word
their one-line guidance differently.
"""

from typing import Any, Dict, List, Optional

from stressmate.config.loader import load_default_config
from stressmate.config.models import GuidanceRules, TipTiers
from stressmate.domain.models import StressResult

VIEWS = ("immediate", "feedback")


def tips_for(score: Optional[int], tips: Optional[TipTiers] = None) -> List[str]:
    """Pick the tip list for a score.

    >=high_min gives the high tips, >=medium_min the medium tips, and
    anything lower (or no score yet) the low tips.

    Args:
        score: Stress score, or None if nothing has been computed
        tips: Tip tiers (defaults to the packaged rules)

    Returns:
        A new list of tip strings
    """
    tips = tips or load_default_config().stress.tips
    if score is None:
        return list(tips.low)
    if score >= tips.high_min:
        return list(tips.high)
    if score >= tips.medium_min:
        return list(tips.medium)
    return list(tips.low)


def guidance_for(
    score: int, guidance: Optional[GuidanceRules] = None, view: str = "immediate"
) -> str:
    """Two-tier guidance line: rest above rest_min, keep pace below.

    Raises:
        ValueError: If view is not 'immediate' or 'feedback'
    """
    if view not in VIEWS:
        raise ValueError(f"Unknown guidance view: {view}. Must be one of {VIEWS}")
    guidance = guidance or load_default_config().stress.guidance
    lines = getattr(guidance, view)
    return lines.rest if score >= guidance.rest_min else lines.keep_pace


def build_feedback(
    result: Optional[StressResult],
    tips: Optional[TipTiers] = None,
    guidance: Optional[GuidanceRules] = None,
) -> Dict[str, Any]:
    """Build the feedback screen payload from the last result.

    Args:
        result: Last StressResult held by the UI, or None

    Returns:
        Dict with keys:
        - has_result: Whether a result exists
        - title / hint: Only before the first computation
        - score, category, label, message, guidance: Only with a result
        - tips: Tip list for the score (low tips without a result)
    """
    stress_rules = None
    if tips is None or guidance is None:
        stress_rules = load_default_config().stress
    tips = tips or stress_rules.tips
    guidance = guidance or stress_rules.guidance

    if result is None:
        return {
            "has_result": False,
            "title": guidance.empty_title,
            "hint": guidance.empty_hint,
            "tips": tips_for(None, tips),
        }

    return {
        "has_result": True,
        "score": result.score,
        "category": result.category.value,
        "label": result.label,
        "message": result.message,
        "guidance": guidance_for(result.score, guidance, view="feedback"),
        "tips": tips_for(result.score, tips),
    }
