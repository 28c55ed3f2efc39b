"""Domain models for stress results, ledgers, jobs and chat."""

from .models import (
    ChatMessage,
    JobListing,
    JobProfile,
    PaymentMethod,
    Priority,
    Sender,
    Shift,
    StressCategory,
    StressResult,
    Transaction,
    TransactionCategory,
)

__all__ = [
    "StressCategory",
    "StressResult",
    "TransactionCategory",
    "PaymentMethod",
    "Transaction",
    "Shift",
    "Priority",
    "JobListing",
    "JobProfile",
    "Sender",
    "ChatMessage",
]
