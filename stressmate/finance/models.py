"""Data models for the finance advisor."""

from typing import Dict, List

from pydantic import BaseModel, Field

from stressmate.domain.models import TransactionCategory


class CategoryTotal(BaseModel):
    """Spending total for one category."""

    category: TransactionCategory
    total: int = Field(..., ge=0)


class FinanceSummary(BaseModel):
    """Monthly rollup of a transaction ledger.

    Attributes:
        income: Sum of positive amounts
        expense: Sum of absolute negative amounts
        net: income - expense
        tax_estimate: Withholding estimate on income
        savings_rate: Percent of income kept (0 when there is no income; may be negative)
        category_totals: Absolute total per category, every category present, enum order
        top_categories: Largest spending categories, income categories excluded
        budget_usage_pct: Expense as a percent of the monthly budget, clamped to 0..100
    """

    income: int = Field(..., ge=0)
    expense: int = Field(..., ge=0)
    net: int
    tax_estimate: int = Field(..., ge=0)
    savings_rate: int
    category_totals: Dict[TransactionCategory, int]
    top_categories: List[CategoryTotal] = Field(default_factory=list)
    budget_usage_pct: int = Field(..., ge=0, le=100)
