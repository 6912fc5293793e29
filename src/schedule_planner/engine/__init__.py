"""Schedule proposal engine using tiered beam search.

This package searches section combinations of a course catalog for
conflict-free weekly schedules, scores them against a student's constraint
profile and relaxes soft preferences tier by tier when nothing satisfies
them all.

Main classes:
- ScheduleProposalEngine: Runs the relaxation tiers and assembles proposals
- BeamSearch: Searches one tier
- SearchConfig: Search bounds and scoring weights

Usage:
    from schedule_planner.engine import build_schedule_proposals

    result = build_schedule_proposals(catalog, constraints, period_index=3)
    for proposal in result.proposals:
        print(proposal.id, proposal.subject_count, proposal.achieved_credits)
"""

from .config import SearchConfig
from .constants import (
    AFTERNOON_START_TIMES,
    DEFAULT_BEAM_WIDTH,
    DEFAULT_MAX_SECTIONS_PER_COURSE,
    DEFAULT_PROPOSAL_COUNT,
    DEFAULT_TARGET_CREDITS,
    SOFT_CONSTRAINT_WEIGHTS,
)
from .engine import ScheduleProposalEngine, build_schedule_proposals
from .models import (
    ChosenSection,
    ConstraintReport,
    PlanPatch,
    Proposal,
    ProposalResult,
    ScoreBreakdown,
    SearchDiagnostics,
    SearchState,
)
from .search import BeamSearch, order_courses
from .slots import DecodedSlot, decode_slot, preferred_slot_ordinal
from .tiers import DEFAULT_TIERS, RelaxationTier

__all__ = [
    # Entry points
    "ScheduleProposalEngine",
    "build_schedule_proposals",
    "BeamSearch",
    "order_courses",
    # Configuration
    "SearchConfig",
    "RelaxationTier",
    "DEFAULT_TIERS",
    # Models
    "ChosenSection",
    "ConstraintReport",
    "PlanPatch",
    "Proposal",
    "ProposalResult",
    "ScoreBreakdown",
    "SearchDiagnostics",
    "SearchState",
    # Slot codec
    "DecodedSlot",
    "decode_slot",
    "preferred_slot_ordinal",
    # Constants
    "AFTERNOON_START_TIMES",
    "DEFAULT_BEAM_WIDTH",
    "DEFAULT_MAX_SECTIONS_PER_COURSE",
    "DEFAULT_PROPOSAL_COUNT",
    "DEFAULT_TARGET_CREDITS",
    "SOFT_CONSTRAINT_WEIGHTS",
]
