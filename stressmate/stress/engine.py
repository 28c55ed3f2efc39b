"""Stress scoring engine.

Turns a free-text journal entry plus the selected factor tags into a 0..100
score:

1. Start from the configured baseline
2. Add the weight of each selected negative and positive factor
3. Add the delta of each bonus and relief keyword found in the text
4. Add a length bonus for longer reflective entries
5. Clamp, round and classify into a category
"""

import logging
from typing import Iterable, List, Optional

from stressmate.config.loader import load_default_config
from stressmate.config.models import CategoryRule, KeywordRule, StressFactor, StressRules
from stressmate.domain.models import StressResult
from stressmate.logging import get_logger
from stressmate.utils.numbers import clamp_score
from stressmate.utils.text import normalize_for_matching

from .feedback import guidance_for, tips_for

logger = get_logger(__name__, component="stress")


def matching_keyword_rules(lowered_text: str, rules: List[KeywordRule]) -> List[KeywordRule]:
    """Every rule whose keyword is a substring of the text.

    Rules are independent: overlapping keywords and repeated rules each
    count once per rule.
    """
    return [rule for rule in rules if rule.keyword in lowered_text]


class StressScorer:
    """Computes stress results from journal text and factor selections.

    Every call is a pure function of its arguments and the rule tables the
    scorer was built with. The scorer keeps no state between calls.
    """

    def __init__(self, rules: Optional[StressRules] = None, logger_instance: logging.Logger = None):
        """Initialize StressScorer.

        Args:
            rules: Stress rule tables (defaults to the packaged rules)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.rules = rules or load_default_config().stress
        self.logger = logger_instance or logger

    @property
    def negative_keys(self) -> List[str]:
        """Selectable negative factor tags, in catalog order."""
        return [factor.key for factor in self.rules.negative_factors]

    @property
    def positive_keys(self) -> List[str]:
        """Selectable positive factor tags, in catalog order."""
        return [factor.key for factor in self.rules.positive_factors]

    def compute_stress(
        self,
        text: Optional[str] = "",
        selected_negatives: Optional[Iterable[str]] = None,
        selected_positives: Optional[Iterable[str]] = None,
    ) -> StressResult:
        """Score a journal entry.

        Unknown factor keys are ignored. Empty text and empty selections
        contribute nothing, so the default call returns the baseline.

        Args:
            text: Free-text entry
            selected_negatives: Keys of selected negative factors
            selected_positives: Keys of selected positive factors

        Returns:
            StressResult with score, category, label and advice message
        """
        text = text or ""
        negatives = set(selected_negatives or ())
        positives = set(selected_positives or ())

        score = self.rules.baseline
        score += self._factor_total(self.rules.negative_factors, negatives)
        score += self._factor_total(self.rules.positive_factors, positives)

        lowered = normalize_for_matching(text)
        bonus_hits = matching_keyword_rules(lowered, self.rules.bonus_keywords)
        relief_hits = matching_keyword_rules(lowered, self.rules.relief_keywords)
        score += sum(rule.delta for rule in bonus_hits)
        score += sum(rule.delta for rule in relief_hits)

        length_bonus = self.length_bonus(text)
        score += length_bonus

        final_score = clamp_score(score)
        category_rule = self.classify(final_score)

        self.logger.debug(
            "Stress computed",
            extra={
                "event": "stress.computed",
                "score": final_score,
                "raw_score": score,
                "category": category_rule.category.value,
                "negative_count": len(negatives),
                "positive_count": len(positives),
                "bonus_hits": len(bonus_hits),
                "relief_hits": len(relief_hits),
                "length_bonus": length_bonus,
            },
        )

        return StressResult(
            score=final_score,
            category=category_rule.category,
            label=category_rule.label,
            message=category_rule.message,
        )

    def length_bonus(self, text: Optional[str]) -> int:
        """One point per length_bonus_step trimmed characters, capped."""
        trimmed_length = len((text or "").strip())
        return min(self.rules.length_bonus_cap, trimmed_length // self.rules.length_bonus_step)

    def classify(self, score: int) -> CategoryRule:
        """Pick the category whose lower-closed threshold the score reaches.

        Categories are held highest threshold first and the lowest starts
        at 0, so every score in range has exactly one category.
        """
        for rule in self.rules.categories:
            if score >= rule.min_score:
                return rule
        return self.rules.categories[-1]

    def tips_for(self, score: Optional[int]) -> List[str]:
        """Tip list for a score (None before any computation)."""
        return tips_for(score, self.rules.tips)

    def guidance_for(self, score: int, view: str = "immediate") -> str:
        """Short-term guidance line for a score."""
        return guidance_for(score, self.rules.guidance, view=view)

    @staticmethod
    def _factor_total(factors: List[StressFactor], selected: set) -> int:
        return sum(factor.weight for factor in factors if factor.key in selected)
