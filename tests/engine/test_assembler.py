"""Tests for proposal assembly and constraint reports."""

import pytest

from schedule_planner.engine.assembler import ProposalAssembler
from schedule_planner.engine.config import SearchConfig
from schedule_planner.engine.constraints import SoftConstraints
from schedule_planner.engine.models import SearchState
from schedule_planner.engine.ranking import build_candidate
from schedule_planner.engine.tiers import (
    RELAX_AFTERNOON,
    RELAX_AFTERNOON_MESSAGE,
    RELAX_PREFERENCE,
    RELAX_SUBJECTS_MESSAGE,
    STRICT,
)
from schedule_planner.models import ConstraintProfile, Shift


@pytest.fixture
def build_state(course):
    """Factory: state from (code, slots, credits) triples."""

    def _make(*entries):
        state = SearchState()
        for code, slots, credits in entries:
            offering = course(code, ("S1", slots), credits=credits)
            state = state.with_section(build_candidate(offering, offering.sections[0]))
        return state

    return _make


def assemble(profile, state, tier=STRICT, position=1, period=2):
    assembler = ProposalAssembler(profile, period, SearchConfig())
    score = SoftConstraints(profile, tier, SearchConfig()).evaluate(state)
    return assembler.assemble(state, tier, score, position)


class TestAssemble:
    """Tests for ProposalAssembler.assemble method."""

    def test_proposal_fields(self, build_state):
        state = build_state(("ZOO1", ["3N1"], 4), ("ALG1", ["2N1"], 3))
        proposal = assemble(ConstraintProfile(target_credits_per_period=7), state, position=3)

        assert proposal.id == "strict-2-3"
        assert proposal.tier == "strict"
        assert proposal.period_index == 2
        assert proposal.achieved_credits == 7
        assert proposal.subject_count == 2
        assert [c.course_code for c in proposal.classes] == ["ALG1", "ZOO1"]
        assert proposal.score_breakdown.credits_score == 100

    def test_patch(self, build_state):
        profile = ConstraintProfile(max_afternoon_days=1, target_credits_per_period=10)
        state = build_state(("ALG1", ["2T4"], 3))
        proposal = assemble(profile, state, tier=RELAX_AFTERNOON)

        assert proposal.patch.period_index == 2
        assert proposal.patch.target_credits == 10
        assert proposal.patch.achieved_credits == 3
        assert proposal.patch.disciplines == ["ALG1"]
        assert proposal.patch.constraints_applied.max_afternoon_days is None

    def test_patch_target_defaults(self, build_state):
        proposal = assemble(ConstraintProfile(), build_state(("ALG1", ["2N1"], 3)))
        assert proposal.patch.target_credits == 18

    def test_to_dict(self, build_state):
        proposal = assemble(ConstraintProfile(), build_state(("ALG1", ["2N1"], 3)))
        data = proposal.to_dict()

        assert data["id"] == "strict-2-1"
        assert data["classes"][0]["time_slots"] == ["2N1"]
        assert data["patch"]["classes"] == [
            {"code": "ALG1", "section_id": "S1", "time_slots": ["2N1"], "credits": 3}
        ]
        assert set(data["constraint_report"]) == {"met", "relaxed", "violated"}


class TestBuildReport:
    """Tests for ProposalAssembler.build_report method."""

    def report(self, profile, state, tier=STRICT):
        return ProposalAssembler(profile, 1, SearchConfig()).build_report(state, tier)

    def test_no_preferences(self, build_state):
        report = self.report(ConstraintProfile(), build_state(("A", ["2N1"], 3)))
        assert report.met == ["No schedule conflicts."]
        assert report.relaxed == []
        assert report.violated == []

    def test_shift_rules_met(self, build_state):
        profile = ConstraintProfile(
            allowed_shifts=frozenset({Shift.EVENING, Shift.AFTERNOON}),
            blocked_shifts=frozenset({Shift.MORNING}),
        )
        report = self.report(profile, build_state(("A", ["2N1"], 3)))
        assert "Allowed shifts respected: Afternoon, Evening." in report.met
        assert "Blocked shifts respected: Morning." in report.met

    def test_targets_met(self, build_state):
        profile = ConstraintProfile(target_subject_count=2, target_credits_per_period=6)
        report = self.report(profile, build_state(("A", ["2N1"], 3), ("B", ["3N1"], 3)))
        assert "Subject-count target met (2)." in report.met
        assert "Credit target met (6)." in report.met

    def test_targets_missed(self, build_state):
        profile = ConstraintProfile(target_subject_count=3, target_credits_per_period=8.5)
        report = self.report(profile, build_state(("A", ["2N1"], 3)))
        assert "Subject-count target missed (1/3)." in report.violated
        assert "Credit target missed (3/8.5)." in report.violated

    def test_afternoon_limits(self, build_state):
        profile = ConstraintProfile(max_afternoon_days=1, max_afternoon_sections=2)
        state = build_state(("A", ["2T4"], 3), ("B", ["3T4"], 3))
        report = self.report(profile, state, tier=RELAX_AFTERNOON)

        assert "Afternoon-day limit exceeded (2/1)." in report.violated
        assert "Afternoon-class limit respected (2/2)." in report.met
        assert report.relaxed == [RELAX_SUBJECTS_MESSAGE, RELAX_AFTERNOON_MESSAGE]

    def test_preferred_time_close(self, build_state):
        profile = ConstraintProfile(preferred_afternoon_time="15:50")
        report = self.report(profile, build_state(("A", ["2T5"], 3)))
        assert "Classes close to the preferred time 15:50." in report.met

    def test_preferred_time_far(self, build_state):
        profile = ConstraintProfile(preferred_afternoon_time="16:40")
        report = self.report(profile, build_state(("A", ["2T4"], 3)))
        assert "Classes are not close to the preferred time 16:40." in report.violated

    def test_preferred_time_without_afternoon(self, build_state):
        profile = ConstraintProfile(preferred_afternoon_time="15:50")
        report = self.report(profile, build_state(("A", ["2N1"], 3)))
        assert "No class near the preferred time 15:50." in report.violated

    def test_preferred_time_reported_when_relaxed(self, build_state):
        profile = ConstraintProfile(preferred_afternoon_time="15:50")
        report = self.report(profile, build_state(("A", ["2N1"], 3)), tier=RELAX_PREFERENCE)
        assert "No class near the preferred time 15:50." in report.violated
        assert len(report.relaxed) == 3
