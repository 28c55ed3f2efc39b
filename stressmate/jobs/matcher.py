"""Job matching engine for ranking listings against a user profile.

This module implements the scoring that:
1. Rewards proximity with exclusive distance tiers
2. Counts overlapping skills and shifts
3. Applies the user's priority toggles (wage, distance, shift slots)
4. Explains each match with ordered, rule-based reasons
"""

import logging
from typing import Iterable, List, Optional

from stressmate.config.loader import load_default_config
from stressmate.config.models import JobRules
from stressmate.domain.models import JobListing, JobProfile, Priority, Shift
from stressmate.logging import get_logger
from stressmate.utils.numbers import clamp_score
from stressmate.utils.text import join_terms

from .models import JobMatch

logger = get_logger(__name__, component="jobs")


class JobMatcher:
    """Scores, explains and ranks job listings.

    Responsibilities:
    - Score a listing for a profile and a set of priorities
    - Explain why a listing suits the profile
    - Rank a list of listings, keeping input order for ties
    """

    def __init__(self, rules: Optional[JobRules] = None, logger_instance: logging.Logger = None):
        """Initialize JobMatcher.

        Args:
            rules: Job rule tables (defaults to the packaged rules)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.rules = rules or load_default_config().jobs
        self.logger = logger_instance or logger

    def score(
        self,
        job: JobListing,
        profile: JobProfile,
        priorities: Optional[Iterable[Priority]] = None,
    ) -> int:
        """Score a listing for a profile.

        Algorithm:
        1. Start at base_score
        2. Add the first matching distance tier bonus, or far_penalty
        3. Add skill_match_bonus per shared skill, shift_match_bonus per shared shift
        4. Apply selected priorities (wage, close distance, shift slots)
        5. Clamp to 0..100

        Args:
            job: Listing to score
            profile: User profile
            priorities: Priority toggles (defaults to profile.priorities)

        Returns:
            Integer score 0..100
        """
        selected = self._resolve_priorities(profile, priorities)
        rules = self.rules

        score = rules.base_score
        score += self.distance_bonus(job.distance_km)
        score += rules.skill_match_bonus * len(self.matched_skills(job, profile))
        score += rules.shift_match_bonus * len(self.matched_shifts(job, profile))

        if Priority.WAGE in selected:
            score += self.wage_bonus(job.hourly_wage)

        if Priority.DISTANCE in selected and job.distance_km <= rules.close_distance_km:
            score += rules.close_distance_bonus

        for priority in selected:
            if priority.shift is not None and priority.shift in job.shifts:
                score += rules.shift_priority_bonus

        return clamp_score(score)

    def distance_bonus(self, distance_km: float) -> int:
        """First tier whose max_km covers the distance; far_penalty otherwise."""
        for tier in self.rules.distance_tiers:
            if distance_km <= tier.max_km:
                return tier.bonus
        return self.rules.far_penalty

    def wage_bonus(self, hourly_wage: int) -> int:
        """min(cap, floor((wage - floor) / step)).

        Below the wage floor the result is negative and is left that way;
        only the final score clamp bounds it.
        """
        steps = (hourly_wage - self.rules.wage_floor) // self.rules.wage_step
        return min(self.rules.wage_bonus_cap, steps)

    @staticmethod
    def matched_skills(job: JobListing, profile: JobProfile) -> List[str]:
        """Required skills the profile has, in the job's skill order."""
        owned = set(profile.skills)
        return [skill for skill in dict.fromkeys(job.required_skills) if skill in owned]

    @staticmethod
    def matched_shifts(job: JobListing, profile: JobProfile) -> List[Shift]:
        """Job shifts the profile is available for, in the job's shift order."""
        available = set(profile.available_shifts)
        return [shift for shift in dict.fromkeys(job.shifts) if shift in available]

    def explain(self, job: JobListing, profile: JobProfile) -> List[str]:
        """Ordered reasons why a listing suits the profile.

        Returns:
            Reasons for proximity, shift overlap, skill overlap and high wage,
            in that order; the fallback reason alone if none apply. Never empty.
        """
        explain = self.rules.explain
        reasons = []

        if job.distance_km <= explain.very_close_km:
            reasons.append(explain.very_close.format(distance_km=job.distance_km))

        shifts = self.matched_shifts(job, profile)
        if shifts:
            labels = join_terms(self.rules.shift_label(shift) for shift in shifts)
            reasons.append(explain.shift_match.format(shifts=labels))

        skills = self.matched_skills(job, profile)
        if skills:
            reasons.append(explain.skill_match.format(skills=join_terms(skills)))

        if job.hourly_wage >= explain.high_wage_min:
            reasons.append(explain.high_wage.format(wage=job.hourly_wage))

        if not reasons:
            reasons.append(explain.fallback)

        return reasons

    def rank(
        self,
        jobs: Iterable[JobListing],
        profile: JobProfile,
        priorities: Optional[Iterable[Priority]] = None,
    ) -> List[JobMatch]:
        """Rank listings by score, highest first.

        sorted() is stable, so listings with equal scores keep their input
        order and repeated calls return the same order.

        Args:
            jobs: Listings to rank
            profile: User profile
            priorities: Priority toggles (defaults to profile.priorities)

        Returns:
            List of JobMatch
        """
        selected = self._resolve_priorities(profile, priorities)
        matches = [
            JobMatch(job=job, score=self.score(job, profile, selected), reasons=self.explain(job, profile))
            for job in jobs
        ]
        ranked = sorted(matches, key=lambda match: match.score, reverse=True)

        self.logger.debug(
            "Jobs ranked",
            extra={
                "event": "jobs.ranked",
                "job_count": len(ranked),
                "priorities": [priority.value for priority in selected],
                "top_job": ranked[0].job.id if ranked else None,
                "top_score": ranked[0].score if ranked else None,
            },
        )

        return ranked

    @staticmethod
    def _resolve_priorities(
        profile: JobProfile, priorities: Optional[Iterable[Priority]]
    ) -> List[Priority]:
        """Explicit priorities win over the profile's toggles. Duplicates collapse."""
        source = profile.priorities if priorities is None else priorities
        return list(dict.fromkeys(Priority(priority) for priority in source))
