"""Data models for the job matcher."""

from typing import List

from pydantic import BaseModel, Field

from stressmate.domain.models import JobListing


class JobMatch(BaseModel):
    """A job listing with its match score and human-readable reasons.

    Attributes:
        job: The ranked listing
        score: Match score 0..100
        reasons: Ordered, never-empty explanation lines
    """

    job: JobListing
    score: int = Field(..., ge=0, le=100)
    reasons: List[str] = Field(..., min_length=1)
