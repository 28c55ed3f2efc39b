"""Ledger rollups and saving tips."""

from .advisor import FinanceAdvisor
from .models import CategoryTotal, FinanceSummary

__all__ = [
    "FinanceAdvisor",
    "FinanceSummary",
    "CategoryTotal",
]
