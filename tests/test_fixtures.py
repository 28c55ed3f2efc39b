"""Tests for the bundled demo data."""

import pytest

from stressmate.domain.models import PaymentMethod, Priority, Shift, TransactionCategory
from stressmate.fixtures import (
    DEFAULT_LEDGER,
    ledger_names,
    load_jobs,
    load_profile,
    load_transactions,
)


def test_ledger_names():
    assert DEFAULT_LEDGER in ledger_names()


def test_default_ledger():
    transactions = load_transactions()

    assert len(transactions) == 19
    assert transactions[0].id == "t01"
    assert transactions[0].category == TransactionCategory.SALARY
    assert all(t.date.year == 2025 and t.date.month == 8 for t in transactions)


def test_ledger_has_cash_expenses():
    cash = [t.id for t in load_transactions() if t.method == PaymentMethod.CASH]

    assert cash == ["t07", "t14"]


def test_unknown_ledger():
    with pytest.raises(KeyError, match="Unknown ledger"):
        load_transactions("december_1999")


def test_jobs():
    jobs = load_jobs()

    assert [job.id for job in jobs] == ["j1", "j2", "j3", "j4", "j5", "j6"]
    assert jobs[3].shifts == [Shift.AFTERNOON, Shift.NIGHT]
    assert jobs[0].required_skills == ["바리스타", "고객응대"]


def test_profile():
    profile = load_profile()

    assert profile.age == 24
    assert profile.available_shifts == [Shift.MORNING, Shift.AFTERNOON]
    assert profile.priorities == [Priority.WAGE, Priority.DISTANCE]


def test_loads_return_fresh_tuples():
    """Callers get immutable sequences of frozen records."""
    first = load_jobs()

    assert isinstance(first, tuple)
    assert first == load_jobs()
