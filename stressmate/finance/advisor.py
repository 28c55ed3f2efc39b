"""Finance rollups and rule-based saving tips.

The advisor works on a static one-month ledger:
1. summarize() aggregates income, expense, taxes, savings rate and budget use
2. advise_tips() walks the configured tip rules in order and collects the
   messages of every rule that holds
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from stressmate.config.loader import load_default_config
from stressmate.config.models import FinanceRules, FinanceTipRule
from stressmate.domain.models import Transaction, TransactionCategory
from stressmate.logging import get_logger
from stressmate.utils.numbers import clamp, round_half_up

from .models import CategoryTotal, FinanceSummary

logger = get_logger(__name__, component="finance")


class FinanceAdvisor:
    """Summarizes a ledger and produces improvement tips."""

    def __init__(self, rules: Optional[FinanceRules] = None, logger_instance: logging.Logger = None):
        """Initialize FinanceAdvisor.

        Args:
            rules: Finance rule tables (defaults to the packaged rules)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.rules = rules or load_default_config().finance
        self.logger = logger_instance or logger

    def summarize(self, transactions: Iterable[Transaction]) -> FinanceSummary:
        """Aggregate a ledger into a FinanceSummary.

        Args:
            transactions: Ledger entries (positive = income, negative = expense)

        Returns:
            FinanceSummary
        """
        transactions = list(transactions)

        income = sum(t.amount for t in transactions if t.is_income)
        expense = sum(-t.amount for t in transactions if t.is_expense)

        category_totals = self.category_totals(transactions)

        summary = FinanceSummary(
            income=income,
            expense=expense,
            net=income - expense,
            tax_estimate=round_half_up(income * self.rules.tax_rate),
            savings_rate=self.savings_rate(income, expense),
            category_totals=category_totals,
            top_categories=self.top_categories(category_totals),
            budget_usage_pct=int(
                clamp(round_half_up(expense / self.rules.monthly_budget * 100), 0, 100)
            ),
        )

        self.logger.debug(
            "Ledger summarized",
            extra={
                "event": "finance.summarized",
                "transaction_count": len(transactions),
                "income": summary.income,
                "expense": summary.expense,
                "savings_rate": summary.savings_rate,
                "budget_usage_pct": summary.budget_usage_pct,
            },
        )

        return summary

    @staticmethod
    def category_totals(transactions: Iterable[Transaction]) -> Dict[TransactionCategory, int]:
        """Absolute amount per category. Every category is present, in enum order."""
        totals = {category: 0 for category in TransactionCategory}
        for transaction in transactions:
            totals[transaction.category] += abs(transaction.amount)
        return totals

    @staticmethod
    def savings_rate(income: int, expense: int) -> int:
        """Percent of income left after expenses. Zero income gives 0."""
        if income == 0:
            return 0
        return round_half_up((income - expense) / income * 100)

    def top_categories(self, category_totals: Mapping[TransactionCategory, int]) -> List[CategoryTotal]:
        """Largest spending categories, income categories excluded.

        sorted() is stable and the candidates are walked in enum order, so
        equal totals keep enumeration order.
        """
        candidates = [
            CategoryTotal(category=category, total=category_totals.get(category, 0))
            for category in TransactionCategory
            if category not in self.rules.income_categories
        ]
        ranked = sorted(candidates, key=lambda item: item.total, reverse=True)
        return ranked[: self.rules.top_category_count]

    def advise_tips(
        self,
        transactions: Iterable[Transaction],
        category_totals: Mapping[TransactionCategory, int],
        savings_rate: int,
    ) -> List[str]:
        """Evaluate the tip rules in configured order.

        Args:
            transactions: Ledger entries (used by payment method rules)
            category_totals: Output of category_totals()
            savings_rate: Output of savings_rate()

        Returns:
            Messages of every rule that held, or the single positive message
            when none did. Never empty.
        """
        transactions = list(transactions)
        tips = []
        fired = []

        for rule in self.rules.tip_rules:
            if self._rule_holds(rule, transactions, category_totals, savings_rate):
                tips.append(rule.message)
                fired.append(rule.kind)

        if not tips:
            tips.append(self.rules.positive_message)

        self.logger.debug(
            "Finance tips evaluated",
            extra={
                "event": "finance.tips_evaluated",
                "rules_total": len(self.rules.tip_rules),
                "rules_fired": len(fired),
            },
        )

        return tips

    def advise(self, transactions: Iterable[Transaction]) -> Tuple[FinanceSummary, List[str]]:
        """Summarize and advise in one call."""
        transactions = list(transactions)
        summary = self.summarize(transactions)
        tips = self.advise_tips(transactions, summary.category_totals, summary.savings_rate)
        return summary, tips

    @staticmethod
    def _rule_holds(
        rule: FinanceTipRule,
        transactions: List[Transaction],
        category_totals: Mapping[TransactionCategory, int],
        savings_rate: int,
    ) -> bool:
        if rule.kind == "category_total_above":
            return category_totals.get(rule.category, 0) > rule.threshold
        if rule.kind == "savings_rate_below":
            return savings_rate < rule.threshold
        if rule.kind == "uses_method":
            return any(t.method == rule.method for t in transactions)
        return False
