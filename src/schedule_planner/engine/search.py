"""Beam search over section combinations for one relaxation tier."""

import logging
from dataclasses import dataclass, field

from ..models import ConstraintProfile, CourseOffering
from .config import SearchConfig
from .constraints import HardConstraints, SoftConstraints, StateScore
from .models import SearchState
from .ranking import rank_sections
from .tiers import RelaxationTier

logger = logging.getLogger(__name__)


@dataclass
class TierSearchResult:
    """Terminal states of one tier, best first, with their scores."""

    states: list[SearchState] = field(default_factory=list)
    scores: dict[tuple, StateScore] = field(default_factory=dict)
    candidates_examined: int = 0


def order_courses(catalog: list[CourseOffering]) -> list[CourseOffering]:
    """Courses to search, fewest sections first, then by code.

    Courses without sections are dropped.
    """
    courses = [course for course in catalog if course.sections]
    return sorted(courses, key=lambda c: (len(c.sections), c.code))


class BeamSearch:
    """
    Incremental schedule builder.

    Courses are processed one at a time. Every state in the frontier either
    skips the course or takes one of its ranked sections; branches that break
    a hard constraint are dropped. After each course the frontier is
    deduplicated by chosen sections, ranked and cut to the beam width.
    """

    def __init__(
        self,
        profile: ConstraintProfile,
        tier: RelaxationTier,
        config: SearchConfig,
    ):
        self.tier = tier
        self.config = config
        self.hard = HardConstraints(profile, tier, config)
        self.soft = SoftConstraints(profile, tier, config)

    def run(self, catalog: list[CourseOffering]) -> TierSearchResult:
        """Search the catalog and return non-empty terminal states."""
        courses = order_courses(catalog)
        frontier = [SearchState()]
        scores: dict[tuple, StateScore] = {}
        examined = 0

        for course in courses:
            candidates = rank_sections(course, self.soft.preferred_ordinal, self.config)
            expanded: list[SearchState] = []

            for state in frontier:
                # Skipping the course is a branch of its own
                expanded.append(state)

                for candidate in candidates:
                    examined += 1
                    if not self.hard.allows(state, candidate):
                        continue
                    next_state = state.with_section(candidate)
                    if self.hard.violates_afternoon_caps(next_state):
                        continue
                    expanded.append(next_state)

            frontier, scores = self._prune(expanded)
            logger.debug(
                f"[{self.tier.id}] {course.code}: {len(expanded)} branches, "
                f"{len(frontier)} kept"
            )

        states = [state for state in frontier if state.chosen]
        return TierSearchResult(
            states=states,
            scores={state.selection_key: scores[state.selection_key] for state in states},
            candidates_examined=examined,
        )

    def _prune(
        self, states: list[SearchState]
    ) -> tuple[list[SearchState], dict[tuple, StateScore]]:
        """Deduplicate, rank and truncate a frontier."""
        best: dict[tuple, tuple[SearchState, StateScore]] = {}
        for state in states:
            key = state.selection_key
            score = self.soft.evaluate(state)
            current = best.get(key)
            if current is None or score.total > current[1].total:
                best[key] = (state, score)

        ranked = sorted(best.values(), key=lambda item: self.soft.ranking_key(item[0], item[1]))
        kept = ranked[: self.config.beam_width]
        return [state for state, _ in kept], {state.selection_key: score for state, score in kept}
