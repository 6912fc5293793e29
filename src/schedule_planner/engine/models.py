"""Data models for the schedule proposal engine."""

from dataclasses import dataclass, field
from typing import Any

from ..models import ConstraintProfile, Shift
from .slots import DecodedSlot


@dataclass(frozen=True)
class ChosenSection:
    """A section picked for a schedule, with the course data it needs."""

    course_code: str
    course_name: str
    section_id: str
    time_slots: tuple[str, ...]
    decoded_slots: tuple[DecodedSlot, ...]
    credits: float
    instructors: tuple[str, ...] = ()
    rooms: tuple[str, ...] = ()

    @property
    def morning_slots(self) -> int:
        return sum(1 for slot in self.decoded_slots if slot.shift == Shift.MORNING)

    @property
    def afternoon_slots(self) -> int:
        return sum(1 for slot in self.decoded_slots if slot.shift == Shift.AFTERNOON)

    @property
    def afternoon_days(self) -> frozenset[int]:
        return frozenset(
            slot.day
            for slot in self.decoded_slots
            if slot.shift == Shift.AFTERNOON and slot.day is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "course_code": self.course_code,
            "course_name": self.course_name,
            "section_id": self.section_id,
            "time_slots": list(self.time_slots),
            "credits": self.credits,
            "instructors": list(self.instructors),
            "rooms": list(self.rooms),
        }


@dataclass(frozen=True)
class SearchState:
    """A partial schedule in the beam.

    Only immutable containers are used, so a branch can never disturb its
    siblings. occupied_slots is always the union of the chosen sections'
    slots and no two chosen sections share a slot.
    """

    chosen: tuple[ChosenSection, ...] = ()
    occupied_slots: frozenset[str] = frozenset()
    afternoon_days: frozenset[int] = frozenset()
    afternoon_section_count: int = 0
    morning_slot_count: int = 0
    total_credits: float = 0

    @property
    def subject_count(self) -> int:
        return len(self.chosen)

    @property
    def selection_key(self) -> tuple[tuple[str, str], ...]:
        """Identity of the schedule: its sorted (course, section) pairs."""
        return tuple(sorted((c.course_code, c.section_id) for c in self.chosen))

    def with_section(self, section: ChosenSection) -> "SearchState":
        """Return a new state with the section added."""
        has_afternoon = section.afternoon_slots > 0
        return SearchState(
            chosen=self.chosen + (section,),
            occupied_slots=self.occupied_slots | frozenset(section.time_slots),
            afternoon_days=self.afternoon_days | section.afternoon_days,
            afternoon_section_count=self.afternoon_section_count + (1 if has_afternoon else 0),
            morning_slot_count=self.morning_slot_count + section.morning_slots,
            total_credits=self.total_credits + section.credits,
        )

    def iter_slots(self):
        """Iterate decoded slots of every chosen section."""
        for section in self.chosen:
            yield from section.decoded_slots


@dataclass
class ConstraintReport:
    """Which preferences a proposal met, relaxed or violated."""

    met: list[str] = field(default_factory=list)
    relaxed: list[str] = field(default_factory=list)
    violated: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"met": self.met, "relaxed": self.relaxed, "violated": self.violated}


@dataclass
class ScoreBreakdown:
    """Score components of a proposal."""

    schedule_score: float
    subjects_score: float
    credits_score: float
    total: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "schedule_score": self.schedule_score,
            "subjects_score": self.subjects_score,
            "credits_score": self.credits_score,
            "total": self.total,
        }


@dataclass
class PlanPatch:
    """Payload a downstream planner applies to adopt a proposal."""

    period_index: int
    target_credits: float
    achieved_credits: float
    constraints_applied: ConstraintProfile
    classes: list[ChosenSection]

    @property
    def disciplines(self) -> list[str]:
        return [c.course_code for c in self.classes]

    def to_dict(self) -> dict[str, Any]:
        return {
            "period_index": self.period_index,
            "target_credits": self.target_credits,
            "achieved_credits": self.achieved_credits,
            "constraints_applied": self.constraints_applied.to_dict(),
            "disciplines": self.disciplines,
            "classes": [
                {
                    "code": c.course_code,
                    "section_id": c.section_id,
                    "time_slots": list(c.time_slots),
                    "credits": c.credits,
                }
                for c in self.classes
            ],
        }


@dataclass
class Proposal:
    """A ranked schedule proposal."""

    id: str
    period_index: int
    tier: str
    achieved_credits: float
    subject_count: int
    classes: list[ChosenSection]
    constraint_report: ConstraintReport
    score_breakdown: ScoreBreakdown
    patch: PlanPatch

    @property
    def selection_key(self) -> tuple[tuple[str, str], ...]:
        return tuple(sorted((c.course_code, c.section_id) for c in self.classes))

    def to_dict(self) -> dict[str, Any]:
        """Convert proposal to dictionary."""
        return {
            "id": self.id,
            "period_index": self.period_index,
            "tier": self.tier,
            "achieved_credits": self.achieved_credits,
            "subject_count": self.subject_count,
            "classes": [c.to_dict() for c in self.classes],
            "constraint_report": self.constraint_report.to_dict(),
            "score_breakdown": self.score_breakdown.to_dict(),
            "patch": self.patch.to_dict(),
        }


@dataclass
class SearchDiagnostics:
    """Summary of the search, explaining short or empty results."""

    proposal_count: int = 0
    total_candidates_examined: int = 0
    highest_relaxation_tier_used: str = "none"
    highest_relaxation_tier_attempted: str = "none"
    tiers_attempted: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "proposal_count": self.proposal_count,
            "total_candidates_examined": self.total_candidates_examined,
            "highest_relaxation_tier_used": self.highest_relaxation_tier_used,
            "highest_relaxation_tier_attempted": self.highest_relaxation_tier_attempted,
            "tiers_attempted": self.tiers_attempted,
        }


@dataclass
class ProposalResult:
    """Result of one engine invocation."""

    proposals: list[Proposal] = field(default_factory=list)
    diagnostics: SearchDiagnostics = field(default_factory=SearchDiagnostics)

    @property
    def is_empty(self) -> bool:
        return not self.proposals

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "proposals": [p.to_dict() for p in self.proposals],
            "diagnostics": self.diagnostics.to_dict(),
        }
