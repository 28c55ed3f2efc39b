"""StressMate core: deterministic scoring behind the self-care app screens."""

from stressmate.chat import ChatIntentResolver
from stressmate.finance import FinanceAdvisor
from stressmate.jobs import JobMatcher
from stressmate.stress import StressScorer

__version__ = "1.0.0"

__all__ = [
    "StressScorer",
    "FinanceAdvisor",
    "JobMatcher",
    "ChatIntentResolver",
    "__version__",
]
