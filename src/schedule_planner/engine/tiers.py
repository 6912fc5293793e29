"""Relaxation tiers.

The search runs once per tier, from strict to loosest, until enough distinct
proposals exist. Each tier is a small immutable record saying which soft
preferences it stops enforcing and what it tells the student about that.
Shift rules and slot conflicts belong to no tier: they are never relaxed.
"""

from dataclasses import dataclass, replace

from ..models import ConstraintProfile

RELAX_SUBJECTS_MESSAGE = "Subject-count target relaxed to widen the set of feasible options."
RELAX_AFTERNOON_MESSAGE = "Afternoon limits relaxed to fit more classes."
RELAX_PREFERENCE_MESSAGE = "Preferred afternoon time relaxed to increase coverage."


@dataclass(frozen=True)
class RelaxationTier:
    """One constraint configuration of the relaxation sequence.

    Attributes:
        id: Tier identifier used in proposal ids and diagnostics
        require_exact_subjects: Keep only schedules hitting the subject target
        ignore_afternoon_limits: Stop enforcing afternoon day/section caps
        ignore_preferred_time: Stop scoring closeness to the preferred time
        relaxed_messages: What this tier relaxed relative to the request
    """

    id: str
    require_exact_subjects: bool = False
    ignore_afternoon_limits: bool = False
    ignore_preferred_time: bool = False
    relaxed_messages: tuple[str, ...] = ()

    def effective_profile(self, profile: ConstraintProfile) -> ConstraintProfile:
        """Profile with the preferences this tier ignores removed."""
        changes = {}
        if self.ignore_afternoon_limits:
            changes["max_afternoon_days"] = None
            changes["max_afternoon_sections"] = None
        if self.ignore_preferred_time:
            changes["preferred_afternoon_time"] = None
        return replace(profile, **changes) if changes else profile

    def requires_exact_count(self, profile: ConstraintProfile) -> bool:
        """Whether terminal states must hit the subject target exactly."""
        return self.require_exact_subjects and profile.target_subject_count is not None


STRICT = RelaxationTier(id="strict", require_exact_subjects=True)

RELAX_SUBJECTS = RelaxationTier(
    id="relax_subjects",
    relaxed_messages=(RELAX_SUBJECTS_MESSAGE,),
)

RELAX_AFTERNOON = RelaxationTier(
    id="relax_afternoon",
    ignore_afternoon_limits=True,
    relaxed_messages=(RELAX_SUBJECTS_MESSAGE, RELAX_AFTERNOON_MESSAGE),
)

RELAX_PREFERENCE = RelaxationTier(
    id="relax_preference",
    ignore_afternoon_limits=True,
    ignore_preferred_time=True,
    relaxed_messages=(RELAX_SUBJECTS_MESSAGE, RELAX_AFTERNOON_MESSAGE, RELAX_PREFERENCE_MESSAGE),
)

DEFAULT_TIERS: tuple[RelaxationTier, ...] = (STRICT, RELAX_SUBJECTS, RELAX_AFTERNOON, RELAX_PREFERENCE)
