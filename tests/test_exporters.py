"""Tests for proposal result exporters."""

import json

import pandas as pd
import pytest

from schedule_planner.engine import build_schedule_proposals
from schedule_planner.engine.models import ProposalResult
from schedule_planner.exporters import export_result_csv, export_result_json, proposals_to_dataframe


@pytest.fixture
def result(catalog_records):
    return build_schedule_proposals(catalog_records, {"target_subject_count": 2}, period_index=3)


class TestExportResultJson:
    """Tests for export_result_json function."""

    def test_writes_proposals_and_diagnostics(self, tmp_path, result):
        path = tmp_path / "out" / "proposals.json"
        export_result_json(result, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["proposals"][0]["id"] == "strict-3-1"
        assert data["proposals"][0]["patch"]["disciplines"] == ["ICSA31", "ICSA48"]
        assert data["diagnostics"]["proposal_count"] == len(result.proposals)

    def test_empty_result(self, tmp_path):
        path = tmp_path / "empty.json"
        export_result_json(ProposalResult(), path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["proposals"] == []
        assert data["diagnostics"]["highest_relaxation_tier_used"] == "none"


class TestProposalsToDataframe:
    """Tests for proposals_to_dataframe function."""

    def test_one_row_per_section(self, result):
        df = proposals_to_dataframe(result)

        first = df[df["rank"] == 1]
        assert list(first["code"]) == ["ICSA31", "ICSA48"]
        assert list(first["slots"]) == ["5T4 5T5 5T6", "5N1 5N2 5N3 5N4"]
        assert len(df) == sum(p.subject_count for p in result.proposals)

    def test_empty_result_keeps_columns(self):
        df = proposals_to_dataframe(ProposalResult())
        assert df.empty
        assert list(df.columns) == ["rank", "proposal_id", "tier", "code", "name", "section", "slots", "credits"]


class TestExportResultCsv:
    """Tests for export_result_csv function."""

    def test_writes_csv(self, tmp_path, result):
        path = tmp_path / "proposals.csv"
        export_result_csv(result, path)

        df = pd.read_csv(path)
        assert df.loc[0, "proposal_id"] == "strict-3-1"
        assert df.loc[0, "section"] == "S71"
