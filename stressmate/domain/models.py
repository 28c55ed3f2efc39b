"""Core domain models shared by the scorers.

This module defines the records passed between the UI and the core:
- StressCategory / StressResult: output of the stress scorer
- Transaction and its enums: ledger entries for the finance advisor
- JobProfile / JobListing and their enums: inputs to the job matcher
- ChatMessage: transcript entries owned by the chat screen
"""

import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class StressCategory(str, Enum):
    """Ordinal stress severity levels, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class TransactionCategory(str, Enum):
    """Ledger categories. Declaration order is the tie-break order."""

    SALARY = "salary"
    ALLOWANCE = "allowance"
    FOOD = "food"
    CAFE = "cafe"
    TRANSPORT = "transport"
    SHOPPING = "shopping"
    SUBSCRIPTION = "subscription"
    HOUSING = "housing"
    HEALTH = "health"
    LEISURE = "leisure"


class PaymentMethod(str, Enum):
    """How a transaction was paid."""

    CARD = "card"
    CASH = "cash"
    TRANSFER = "transfer"


class Shift(str, Enum):
    """Working time slots."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"


class Priority(str, Enum):
    """User-toggleable job ranking preferences."""

    WAGE = "wage"
    DISTANCE = "distance"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"

    @property
    def shift(self) -> Optional[Shift]:
        """The shift this priority asks for, if it is a shift priority."""
        try:
            return Shift(self.value)
        except ValueError:
            return None


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class StressResult(BaseModel):
    """Outcome of one stress computation.

    Derived on demand from (text, negatives, positives); never stored by the
    core. The UI keeps the latest one and passes it back where needed.
    """

    score: int = Field(..., ge=0, le=100, description="Stress score 0..100")
    category: StressCategory = Field(..., description="Severity category")
    label: str = Field(..., description="Display label for the category")
    message: str = Field(..., description="Advice message for the category")

    model_config = {"frozen": True}


class Transaction(BaseModel):
    """A single ledger entry. Positive amounts are income, negative are expense."""

    id: str = Field(..., min_length=1)
    date: datetime.date
    description: str
    amount: int = Field(..., description="Signed amount in KRW")
    category: TransactionCategory
    method: PaymentMethod

    model_config = {"frozen": True}

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0


class JobListing(BaseModel):
    """A part-time job posting from the static job list."""

    id: str = Field(..., min_length=1)
    title: str
    company: str
    hourly_wage: int = Field(..., ge=0, description="Hourly wage in KRW")
    distance_km: float = Field(..., ge=0, description="Distance from the user's home")
    shifts: List[Shift] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)
    location: str = ""

    model_config = {"frozen": True}

    @field_validator("required_skills")
    @classmethod
    def strip_skills(cls, v: List[str]) -> List[str]:
        """Strip whitespace and drop empty skills, keeping order."""
        return [skill.strip() for skill in v if skill and skill.strip()]


class JobProfile(BaseModel):
    """The user's side of job matching."""

    age: Optional[int] = Field(None, ge=0)
    home_location: str = ""
    skills: List[str] = Field(default_factory=list)
    available_shifts: List[Shift] = Field(default_factory=list)
    priorities: List[Priority] = Field(default_factory=list)

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: List[str]) -> List[str]:
        """Strip whitespace and drop empty skills."""
        return [skill.strip() for skill in v if skill and skill.strip()]

    @field_validator("priorities")
    @classmethod
    def dedupe_priorities(cls, v: List[Priority]) -> List[Priority]:
        """Priorities are an ordered set: keep the first occurrence of each."""
        return list(dict.fromkeys(v))

    def with_priorities(self, priorities: List[Priority]) -> "JobProfile":
        """Return a copy with the priority toggles replaced."""
        priorities = list(dict.fromkeys(Priority(p) for p in priorities))
        return self.model_copy(update={"priorities": priorities})


class ChatMessage(BaseModel):
    """One entry of the chat transcript."""

    id: str
    sender: Sender
    text: str
    timestamp: datetime.datetime

    model_config = {"frozen": True}
