"""Rule table schema models using Pydantic."""

import re
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from stressmate.domain.models import (
    PaymentMethod,
    Shift,
    StressCategory,
    TransactionCategory,
)


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


# --------------------------------------------------------------------------
# Stress
# --------------------------------------------------------------------------


class StressFactor(BaseModel):
    """A user-selectable tag with a fixed score contribution."""

    key: str = Field(..., min_length=1, description="Tag shown to the user")
    weight: int = Field(..., description="Score contribution when selected")

    @field_validator("key")
    @classmethod
    def strip_key(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Factor key cannot be empty or whitespace-only")
        return stripped


class KeywordRule(BaseModel):
    """A substring-triggered score adjustment."""

    keyword: str = Field(..., min_length=1)
    delta: int

    @field_validator("keyword")
    @classmethod
    def normalize_keyword(cls, v: str) -> str:
        """Keywords are matched against lower-cased text."""
        normalized = v.strip().lower()
        if not normalized:
            raise ValueError("Keyword cannot be empty or whitespace-only")
        return normalized


class CategoryRule(BaseModel):
    """Lower-closed score threshold for one stress category."""

    category: StressCategory
    min_score: int = Field(..., ge=0, le=100)
    label: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class TipTiers(BaseModel):
    """Fixed tip lists picked by score."""

    high_min: int = Field(75, ge=0, le=100)
    medium_min: int = Field(60, ge=0, le=100)
    high: List[str] = Field(..., min_length=1)
    medium: List[str] = Field(..., min_length=1)
    low: List[str] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_order(self):
        if self.medium_min > self.high_min:
            raise ValueError(
                f"tips.medium_min ({self.medium_min}) must not exceed tips.high_min ({self.high_min})"
            )
        return self


class GuidanceLines(BaseModel):
    """Two-tier guidance wording for one view."""

    rest: str = Field(..., min_length=1)
    keep_pace: str = Field(..., min_length=1)


class GuidanceRules(BaseModel):
    """Short-term guidance shown under a stress result."""

    rest_min: int = Field(60, ge=0, le=100)
    immediate: GuidanceLines
    feedback: GuidanceLines
    empty_title: str = Field(..., min_length=1, description="Feedback title before any result")
    empty_hint: str = Field(..., min_length=1, description="Feedback hint before any result")


class StressRules(BaseModel):
    """Factor catalogs, keyword rules and category thresholds."""

    baseline: int = Field(50, ge=0, le=100)
    negative_factors: List[StressFactor] = Field(default_factory=list)
    positive_factors: List[StressFactor] = Field(default_factory=list)
    bonus_keywords: List[KeywordRule] = Field(default_factory=list)
    relief_keywords: List[KeywordRule] = Field(default_factory=list)
    length_bonus_step: int = Field(80, ge=1, description="Characters per bonus point")
    length_bonus_cap: int = Field(10, ge=0, description="Maximum length bonus")
    categories: List[CategoryRule] = Field(..., min_length=1)
    tips: TipTiers
    guidance: GuidanceRules

    @field_validator("categories")
    @classmethod
    def sort_categories(cls, v: List[CategoryRule]) -> List[CategoryRule]:
        """Order categories by threshold, highest first."""
        seen = set()
        for rule in v:
            if rule.category in seen:
                raise ValueError(f"Category defined more than once: {rule.category.value}")
            seen.add(rule.category)
        ordered = sorted(v, key=lambda rule: rule.min_score, reverse=True)
        if ordered[-1].min_score != 0:
            raise ValueError("The lowest category must start at min_score 0")
        thresholds = [rule.min_score for rule in ordered]
        if len(set(thresholds)) != len(thresholds):
            raise ValueError("Category thresholds must be distinct")
        return ordered

    @model_validator(mode="after")
    def validate_factors(self):
        """Check factor signs and that the two catalogs are disjoint."""
        for factor in self.negative_factors:
            if factor.weight <= 0:
                raise ValueError(
                    f"Negative factor '{factor.key}' must have a positive weight, got {factor.weight}"
                )
        for factor in self.positive_factors:
            if factor.weight >= 0:
                raise ValueError(
                    f"Positive factor '{factor.key}' must have a negative weight, got {factor.weight}"
                )

        negative_keys = {factor.key for factor in self.negative_factors}
        positive_keys = {factor.key for factor in self.positive_factors}
        overlap = negative_keys & positive_keys
        if overlap:
            raise ValueError(
                f"Factors cannot be both negative and positive: {', '.join(sorted(overlap))}"
            )

        for rule in self.bonus_keywords:
            if rule.delta <= 0:
                raise ValueError(f"Bonus keyword '{rule.keyword}' must have a positive delta")
        for rule in self.relief_keywords:
            if rule.delta >= 0:
                raise ValueError(f"Relief keyword '{rule.keyword}' must have a negative delta")

        return self


# --------------------------------------------------------------------------
# Finance
# --------------------------------------------------------------------------

TipRuleKind = Literal["category_total_above", "savings_rate_below", "uses_method"]


class FinanceTipRule(BaseModel):
    """One rule of the finance tip list.

    Kinds:
    - category_total_above: category total > threshold
    - savings_rate_below: savings rate < threshold
    - uses_method: any transaction paid with method
    """

    kind: TipRuleKind
    message: str = Field(..., min_length=1)
    category: Optional[TransactionCategory] = None
    threshold: Optional[float] = None
    method: Optional[PaymentMethod] = None

    @model_validator(mode="after")
    def validate_kind_fields(self):
        if self.kind == "category_total_above":
            if self.category is None or self.threshold is None:
                raise ValueError("category_total_above rules need both category and threshold")
        elif self.kind == "savings_rate_below":
            if self.threshold is None:
                raise ValueError("savings_rate_below rules need a threshold")
        elif self.kind == "uses_method":
            if self.method is None:
                raise ValueError("uses_method rules need a method")
        return self


class FinanceRules(BaseModel):
    """Ledger rollup constants and tip rules."""

    tax_rate: float = Field(0.033, ge=0, le=1, description="Withholding rate on income")
    monthly_budget: int = Field(1_500_000, gt=0, description="Monthly spending budget (KRW)")
    top_category_count: int = Field(4, ge=1)
    income_categories: List[TransactionCategory] = Field(
        default_factory=lambda: [TransactionCategory.SALARY, TransactionCategory.ALLOWANCE]
    )
    tip_rules: List[FinanceTipRule] = Field(default_factory=list)
    positive_message: str = Field(..., min_length=1, description="Shown when no tip fires")


# --------------------------------------------------------------------------
# Jobs
# --------------------------------------------------------------------------


class DistanceTier(BaseModel):
    """Bonus for jobs within max_km of home."""

    max_km: float = Field(..., gt=0)
    bonus: int


class ExplainRules(BaseModel):
    """Thresholds and wording for job match reasons."""

    very_close_km: float = Field(1.0, ge=0)
    high_wage_min: int = Field(12_000, ge=0)
    very_close: str = Field(..., min_length=1)
    shift_match: str = Field(..., min_length=1)
    skill_match: str = Field(..., min_length=1)
    high_wage: str = Field(..., min_length=1)
    fallback: str = Field(..., min_length=1)


class JobRules(BaseModel):
    """Job match scoring weights."""

    base_score: int = Field(50, ge=0, le=100)
    distance_tiers: List[DistanceTier] = Field(..., min_length=1)
    far_penalty: int = Field(-5, le=0)
    skill_match_bonus: int = Field(10, ge=0)
    shift_match_bonus: int = Field(8, ge=0)
    wage_floor: int = Field(10_000, ge=0)
    wage_step: int = Field(200, gt=0, description="KRW per wage bonus point")
    wage_bonus_cap: int = Field(20, ge=0)
    close_distance_km: float = Field(1.0, ge=0)
    close_distance_bonus: int = Field(10, ge=0)
    shift_priority_bonus: int = Field(6, ge=0)
    shift_labels: Dict[Shift, str] = Field(default_factory=dict)
    explain: ExplainRules

    @field_validator("distance_tiers")
    @classmethod
    def sort_tiers(cls, v: List[DistanceTier]) -> List[DistanceTier]:
        """Tiers are evaluated nearest first."""
        ordered = sorted(v, key=lambda tier: tier.max_km)
        limits = [tier.max_km for tier in ordered]
        if len(set(limits)) != len(limits):
            raise ValueError("Distance tiers must have distinct max_km values")
        return ordered

    def shift_label(self, shift: Shift) -> str:
        return self.shift_labels.get(shift, shift.value)


# --------------------------------------------------------------------------
# Chat
# --------------------------------------------------------------------------


class IntentRule(BaseModel):
    """A chat intent: regex pattern plus reply templates.

    Templates may reference {score} and {category}. When a last stress
    result exists, by_category overrides reply for matching categories.
    Without a result, no_result is used if set.
    """

    name: str = Field(..., min_length=1)
    pattern: str = Field(..., min_length=1)
    reply: str = Field(..., min_length=1)
    no_result: Optional[str] = None
    by_category: Dict[StressCategory, str] = Field(default_factory=dict)

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid intent pattern '{v}': {e}") from e
        return v


class ChatRules(BaseModel):
    """Ordered intent list for the canned-response bot."""

    intents: List[IntentRule] = Field(..., min_length=1)
    fallback: str = Field(..., min_length=1)
    greeting: str = Field(..., min_length=1)
    quick_replies: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self):
        names = [intent.name for intent in self.intents]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate intent names: {', '.join(duplicates)}")
        return self


# --------------------------------------------------------------------------
# Root
# --------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object holding every rule table."""

    stress: StressRules = Field(..., description="Stress scoring rules")
    finance: FinanceRules = Field(..., description="Finance rollup and tip rules")
    jobs: JobRules = Field(..., description="Job matching weights")
    chat: ChatRules = Field(..., description="Chat intents")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
