"""Conversion of terminal search states into proposals."""

from ..models import ConstraintProfile
from .config import SearchConfig
from .constants import PREFERRED_DISTANCE_TOLERANCE
from .constraints import StateScore
from .models import ConstraintReport, PlanPatch, Proposal, ScoreBreakdown, SearchState
from .slots import closest_afternoon_distance, preferred_slot_ordinal
from .tiers import RelaxationTier


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


class ProposalAssembler:
    """Builds proposals and their constraint reports.

    The report always compares the student's original profile with what the
    schedule achieves, whichever tier produced it, so relaxed preferences
    show up as violations.
    """

    def __init__(
        self,
        profile: ConstraintProfile,
        period_index: int,
        config: SearchConfig,
    ):
        self.profile = profile
        self.period_index = period_index
        self.config = config
        self.preferred_ordinal = preferred_slot_ordinal(
            profile.preferred_afternoon_time, config.afternoon_start_times
        )

    @property
    def target_credits(self) -> float:
        target = self.profile.target_credits_per_period
        if target is None:
            target = self.config.default_target_credits
        return max(1, target)

    def assemble(
        self,
        state: SearchState,
        tier: RelaxationTier,
        score: StateScore,
        position: int,
    ) -> Proposal:
        """
        Build the proposal for a terminal state.

        Args:
            state: Terminal search state
            tier: Tier that produced the state
            score: Score of the state under that tier
            position: 1-based position of the proposal in the result

        Returns:
            Proposal with sorted classes, report and score breakdown
        """
        classes = sorted(state.chosen, key=lambda c: (c.course_code, c.section_id))
        return Proposal(
            id=f"{tier.id}-{self.period_index}-{position}",
            period_index=self.period_index,
            tier=tier.id,
            achieved_credits=state.total_credits,
            subject_count=state.subject_count,
            classes=classes,
            constraint_report=self.build_report(state, tier),
            score_breakdown=ScoreBreakdown(
                schedule_score=score.schedule_score,
                subjects_score=score.subjects_score,
                credits_score=score.credits_score,
                total=score.total,
            ),
            patch=PlanPatch(
                period_index=self.period_index,
                target_credits=self.target_credits,
                achieved_credits=state.total_credits,
                constraints_applied=tier.effective_profile(self.profile),
                classes=classes,
            ),
        )

    def build_report(self, state: SearchState, tier: RelaxationTier) -> ConstraintReport:
        """Compare the original profile against the achieved schedule."""
        profile = self.profile
        met = ["No schedule conflicts."]
        violated: list[str] = []

        if profile.allowed_shifts:
            met.append(f"Allowed shifts respected: {_shift_names(profile.allowed_shifts)}.")
        if profile.blocked_shifts:
            met.append(f"Blocked shifts respected: {_shift_names(profile.blocked_shifts)}.")

        if profile.max_afternoon_days is not None:
            days = len(state.afternoon_days)
            ratio = f"({days}/{profile.max_afternoon_days})"
            if days <= profile.max_afternoon_days:
                met.append(f"Afternoon-day limit respected {ratio}.")
            else:
                violated.append(f"Afternoon-day limit exceeded {ratio}.")

        if profile.max_afternoon_sections is not None:
            sections = state.afternoon_section_count
            ratio = f"({sections}/{profile.max_afternoon_sections})"
            if sections <= profile.max_afternoon_sections:
                met.append(f"Afternoon-class limit respected {ratio}.")
            else:
                violated.append(f"Afternoon-class limit exceeded {ratio}.")

        if profile.target_subject_count is not None:
            count = state.subject_count
            if count == profile.target_subject_count:
                met.append(f"Subject-count target met ({count}).")
            else:
                violated.append(f"Subject-count target missed ({count}/{profile.target_subject_count}).")

        if profile.target_credits_per_period is not None:
            credits = _format_number(state.total_credits)
            target = _format_number(profile.target_credits_per_period)
            if state.total_credits == profile.target_credits_per_period:
                met.append(f"Credit target met ({credits}).")
            else:
                violated.append(f"Credit target missed ({credits}/{target}).")

        preferred = profile.preferred_afternoon_time
        if preferred:
            distance = None
            if self.preferred_ordinal is not None:
                distance = closest_afternoon_distance(state.iter_slots(), self.preferred_ordinal)
            if distance is not None and distance <= PREFERRED_DISTANCE_TOLERANCE:
                met.append(f"Classes close to the preferred time {preferred}.")
            elif distance is not None:
                violated.append(f"Classes are not close to the preferred time {preferred}.")
            else:
                violated.append(f"No class near the preferred time {preferred}.")

        return ConstraintReport(met=met, relaxed=list(tier.relaxed_messages), violated=violated)


def _shift_names(shifts) -> str:
    order = ["M", "T", "N"]
    return ", ".join(s.label for s in sorted(shifts, key=lambda s: order.index(s.value)))
