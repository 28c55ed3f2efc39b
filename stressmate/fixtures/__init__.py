"""Static demo data for the finance and job screens.

The records are loaded once from fixtures.yaml and handed out as tuples so
callers cannot mutate the shared copies.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from stressmate.domain.models import JobListing, JobProfile, Transaction

FIXTURES_PATH = Path(__file__).parent / "fixtures.yaml"

DEFAULT_LEDGER = "august"


@lru_cache(maxsize=1)
def _load() -> Dict[str, Any]:
    with open(FIXTURES_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def ledger_names() -> Tuple[str, ...]:
    """Names of the bundled ledgers."""
    return tuple(_load()["transactions"])


def load_transactions(name: str = DEFAULT_LEDGER) -> Tuple[Transaction, ...]:
    """A bundled one-month ledger.

    Raises:
        KeyError: If no ledger has that name
    """
    ledgers = _load()["transactions"]
    if name not in ledgers:
        raise KeyError(f"Unknown ledger '{name}'. Available: {', '.join(ledgers)}")
    return tuple(Transaction.model_validate(entry) for entry in ledgers[name])


def load_jobs() -> Tuple[JobListing, ...]:
    """The bundled job list, in display order."""
    return tuple(JobListing.model_validate(entry) for entry in _load()["jobs"])


def load_profile() -> JobProfile:
    """The bundled sample job profile."""
    return JobProfile.model_validate(_load()["profile"])


__all__ = [
    "DEFAULT_LEDGER",
    "FIXTURES_PATH",
    "ledger_names",
    "load_transactions",
    "load_jobs",
    "load_profile",
]
