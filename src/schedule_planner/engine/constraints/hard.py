"""Hard constraint implementations for the schedule search.

Hard constraints reject a branch outright. A schedule violating any of them
is never proposed.

Hard Constraints:
- Slot conflict: no two chosen sections share a slot code (never relaxed)
- Shift eligibility: blocked shifts and shifts outside the allowed set
  are never occupied (never relaxed)
- Afternoon caps: afternoon section count and distinct afternoon days stay
  within the profile's maxima (only while the tier enforces them)
"""

from ...models import Shift
from ..models import ChosenSection, SearchState
from .base import ConstraintBase

SLOT_CONFLICT = "slot_conflict"
SHIFT_NOT_ALLOWED = "shift_not_allowed"
AFTERNOON_SECTIONS_EXCEEDED = "afternoon_sections_exceeded"
AFTERNOON_DAYS_EXCEEDED = "afternoon_days_exceeded"


class HardConstraints(ConstraintBase):
    """Branch filters applied while expanding the search frontier."""

    def has_slot_conflict(self, state: SearchState, candidate: ChosenSection) -> bool:
        """True if any slot of the candidate is already occupied."""
        return any(slot in state.occupied_slots for slot in candidate.time_slots)

    def violates_shift_rules(self, candidate: ChosenSection) -> bool:
        """True if the candidate occupies a blocked or non-allowed shift.

        Slots with an unknown shift never trigger this rule. Allowed and
        blocked shifts are read from the original profile since no tier
        relaxes them.
        """
        blocked = self.base_profile.blocked_shifts or frozenset()
        allowed = self.base_profile.allowed_shifts

        for slot in candidate.decoded_slots:
            if slot.shift == Shift.UNKNOWN:
                continue
            if slot.shift in blocked:
                return True
            if allowed is not None and slot.shift not in allowed:
                return True
        return False

    def violates_afternoon_caps(self, state: SearchState) -> bool:
        """True if the state breaks an afternoon cap the tier still enforces."""
        if self.tier.ignore_afternoon_limits:
            return False
        max_sections = self.profile.max_afternoon_sections
        if max_sections is not None and state.afternoon_section_count > max_sections:
            return True
        max_days = self.profile.max_afternoon_days
        if max_days is not None and len(state.afternoon_days) > max_days:
            return True
        return False

    def allows(self, state: SearchState, candidate: ChosenSection) -> bool:
        """Section-level check done before building the branch."""
        return not self.has_slot_conflict(state, candidate) and not self.violates_shift_rules(candidate)

    def evaluate(self, state: SearchState) -> list[str]:
        """List the hard rules a complete state violates.

        The engine runs this on every terminal state before proposing it.

        Returns:
            Violation identifiers, empty for a valid schedule
        """
        violations: list[str] = []

        seen: set[str] = set()
        for section in state.chosen:
            if any(slot in seen for slot in section.time_slots):
                violations.append(SLOT_CONFLICT)
                break
            seen.update(section.time_slots)

        if any(self.violates_shift_rules(section) for section in state.chosen):
            violations.append(SHIFT_NOT_ALLOWED)

        if not self.tier.ignore_afternoon_limits:
            max_sections = self.profile.max_afternoon_sections
            if max_sections is not None and state.afternoon_section_count > max_sections:
                violations.append(AFTERNOON_SECTIONS_EXCEEDED)
            max_days = self.profile.max_afternoon_days
            if max_days is not None and len(state.afternoon_days) > max_days:
                violations.append(AFTERNOON_DAYS_EXCEEDED)

        return violations
