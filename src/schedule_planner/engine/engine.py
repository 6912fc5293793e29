"""Schedule proposal engine using tiered beam search."""

import logging
from typing import Any, Iterable

from ..models import ConstraintProfile, CourseOffering
from .assembler import ProposalAssembler
from .config import SearchConfig
from .models import Proposal, ProposalResult, SearchDiagnostics
from .search import BeamSearch
from .tiers import DEFAULT_TIERS, RelaxationTier

logger = logging.getLogger(__name__)


class ScheduleProposalEngine:
    """
    Builds ranked, conflict-free schedule proposals.

    The search runs once per relaxation tier, strict first. Each tier only
    fills the proposals still missing; earlier proposals are never replaced
    and a schedule already proposed is never proposed twice.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        tiers: Iterable[RelaxationTier] = DEFAULT_TIERS,
    ):
        """
        Initialize the engine.

        Args:
            config: Search bounds and scoring weights. Defaults to SearchConfig().
            tiers: Relaxation tiers in the order they are tried.
        """
        self.config = config or SearchConfig()
        self.tiers = tuple(tiers)

    def propose(
        self,
        catalog: list[CourseOffering],
        constraints: ConstraintProfile,
        period_index: int,
        desired_proposal_count: int | None = None,
    ) -> ProposalResult:
        """
        Build schedule proposals for a period.

        Args:
            catalog: Courses still needed, with their offered sections.
            constraints: The student's constraint profile.
            period_index: Target planning period.
            desired_proposal_count: How many proposals to return at most.

        Returns:
            ProposalResult with proposals (possibly empty) and diagnostics.
        """
        if desired_proposal_count is None:
            desired_proposal_count = self.config.proposal_count
        wanted = max(1, desired_proposal_count)

        assembler = ProposalAssembler(constraints, period_index, self.config)
        proposals: list[Proposal] = []
        seen: set[tuple] = set()
        diagnostics = SearchDiagnostics()

        logger.info(
            f"Searching {len(catalog)} courses for {wanted} proposal(s), "
            f"period {period_index}, beam width {self.config.beam_width}"
        )

        for tier in self.tiers:
            if len(proposals) >= wanted:
                break

            beam = BeamSearch(constraints, tier, self.config)
            search = beam.run(catalog)
            diagnostics.total_candidates_examined += search.candidates_examined
            diagnostics.tiers_attempted.append(tier.id)
            diagnostics.highest_relaxation_tier_attempted = tier.id

            ranked = search.states
            if tier.requires_exact_count(constraints):
                target = constraints.target_subject_count
                ranked = [state for state in ranked if state.subject_count == target]

            added = 0
            for state in ranked:
                if len(proposals) >= wanted:
                    break
                key = state.selection_key
                if key in seen:
                    continue
                violations = beam.hard.evaluate(state)
                if violations:
                    logger.error(f"Tier {tier.id}: dropping {key}, violates {', '.join(violations)}")
                    continue
                seen.add(key)
                proposals.append(
                    assembler.assemble(state, tier, search.scores[key], len(proposals) + 1)
                )
                diagnostics.highest_relaxation_tier_used = tier.id
                added += 1

            logger.info(
                f"Tier {tier.id}: {len(search.states)} terminal states, "
                f"{added} new proposal(s), {search.candidates_examined} candidates examined"
            )

        diagnostics.proposal_count = len(proposals)
        if not proposals:
            logger.warning("No feasible schedule found under the given constraints")

        return ProposalResult(proposals=proposals, diagnostics=diagnostics)


def build_schedule_proposals(
    catalog: list[CourseOffering | dict[str, Any]],
    constraints: ConstraintProfile | dict[str, Any] | None,
    period_index: int,
    desired_proposal_count: int = 3,
    config: SearchConfig | None = None,
) -> ProposalResult:
    """
    Build ranked schedule proposals.

    Catalog entries and constraints may be given as records or as plain
    dictionaries.

    Args:
        catalog: Offered courses with their sections and slot codes.
        constraints: Constraint profile (None means no preferences).
        period_index: Target planning period.
        desired_proposal_count: Maximum number of proposals to return.
        config: Optional search configuration.

    Returns:
        ProposalResult with ranked proposals and search diagnostics.
    """
    courses = [c if isinstance(c, CourseOffering) else CourseOffering.from_dict(c) for c in catalog]
    if not isinstance(constraints, ConstraintProfile):
        constraints = ConstraintProfile.from_dict(constraints)
    return ScheduleProposalEngine(config).propose(
        courses, constraints, period_index, desired_proposal_count
    )
