"""Soft constraint scoring for the schedule search.

Soft constraints are preferences. They never reject a schedule; they decide
which schedules survive the beam and in which order proposals are returned.

Score axes (each 0-100):
- schedule: time-of-day quality (morning load, afternoon load, distance
  from the preferred afternoon time, afternoon cap overflow)
- subjects: closeness to the desired number of subjects
- credits: closeness to the desired weekly credit load
"""

from dataclasses import dataclass

from ..constants import MAX_SCORE, SCHEDULE_SCORE_FACTOR, SUBJECTS_SCORE_FACTOR
from ..models import SearchState
from ..slots import closest_afternoon_distance
from .base import ConstraintBase


@dataclass(frozen=True)
class StateScore:
    """Score of a search state under one tier."""

    schedule_penalty: float
    schedule_score: float
    subjects_score: float
    credits_score: float
    total: float
    preferred_distance: int | None


class SoftConstraints(ConstraintBase):
    """Weighted scoring of schedule states."""

    @property
    def target_credits(self) -> float:
        target = self.profile.target_credits_per_period
        if target is None:
            target = self.config.default_target_credits
        return max(1, target)

    def preferred_distance(self, state: SearchState) -> int | None:
        """Closest afternoon slot distance to the preferred time, if in effect."""
        if self.preferred_ordinal is None:
            return None
        return closest_afternoon_distance(state.iter_slots(), self.preferred_ordinal)

    def schedule_penalty(self, state: SearchState, distance: int | None) -> float:
        """Time-of-day penalty of a state."""
        weight = self.config.weight
        penalty = state.morning_slot_count * weight("morning_load")
        penalty += state.afternoon_section_count * weight("afternoon_load")

        if self.preferred_ordinal is not None:
            if distance is None:
                penalty += weight("preferred_missing")
            else:
                penalty += distance * weight("preferred_distance")

        # Caps are cleared from the effective profile once a tier relaxes them
        max_days = self.profile.max_afternoon_days
        if max_days is not None:
            excess_days = max(0, len(state.afternoon_days) - max_days)
            penalty += excess_days * weight("afternoon_cap_overflow")

        max_sections = self.profile.max_afternoon_sections
        if max_sections is not None:
            excess_sections = max(0, state.afternoon_section_count - max_sections)
            penalty += excess_sections * weight("afternoon_cap_overflow")

        return penalty

    def subjects_score(self, state: SearchState) -> float:
        target = self.profile.target_subject_count
        if target is not None:
            gap = abs(state.subject_count - target)
            return max(0, MAX_SCORE - gap * self.config.weight("subject_gap"))
        return min(MAX_SCORE, state.subject_count * self.config.weight("subject_each"))

    def credits_score(self, state: SearchState) -> float:
        gap = abs(state.total_credits - self.target_credits)
        return max(0, MAX_SCORE - gap * self.config.weight("credit_gap"))

    def evaluate(self, state: SearchState) -> StateScore:
        """Score a state under the tier's effective profile."""
        distance = self.preferred_distance(state)
        penalty = self.schedule_penalty(state, distance)
        schedule_score = max(0, MAX_SCORE - penalty)
        subjects_score = self.subjects_score(state)
        credits_score = self.credits_score(state)

        return StateScore(
            schedule_penalty=penalty,
            schedule_score=schedule_score,
            subjects_score=subjects_score,
            credits_score=credits_score,
            total=(
                schedule_score * SCHEDULE_SCORE_FACTOR
                + subjects_score * SUBJECTS_SCORE_FACTOR
                + credits_score
            ),
            preferred_distance=distance,
        )

    def subject_gap(self, state: SearchState) -> tuple[int, int]:
        """(underfill, overflow) against the subject target, zeros without one."""
        target = self.profile.target_subject_count
        if target is None:
            return 0, 0
        return max(0, target - state.subject_count), max(0, state.subject_count - target)

    def ranking_key(self, state: SearchState, score: StateScore | None = None) -> tuple:
        """Ascending sort key, best state first.

        Order: subject underfill, subject overflow, then schedule, subjects
        and credits scores, composite total, more sections, more credits.
        """
        if score is None:
            score = self.evaluate(state)
        underfill, overflow = self.subject_gap(state)
        return (
            underfill,
            overflow,
            -score.schedule_score,
            -score.subjects_score,
            -score.credits_score,
            -score.total,
            -state.subject_count,
            -state.total_credits,
        )
