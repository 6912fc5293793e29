"""Export functions for proposal results."""

import json
from pathlib import Path

import pandas as pd

from .engine.models import ProposalResult


def export_result_json(result: ProposalResult, output_path: Path | str) -> None:
    """Export proposal result to JSON file.

    Args:
        result: ProposalResult to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)


def proposals_to_dataframe(result: ProposalResult) -> pd.DataFrame:
    """Flatten proposals to one row per chosen section.

    Args:
        result: ProposalResult to flatten

    Returns:
        DataFrame with proposal, course, section and slot columns
    """
    rows = []
    for rank, proposal in enumerate(result.proposals, start=1):
        for item in proposal.classes:
            rows.append(
                {
                    "rank": rank,
                    "proposal_id": proposal.id,
                    "tier": proposal.tier,
                    "code": item.course_code,
                    "name": item.course_name,
                    "section": item.section_id,
                    "slots": " ".join(item.time_slots),
                    "credits": item.credits,
                }
            )
    columns = ["rank", "proposal_id", "tier", "code", "name", "section", "slots", "credits"]
    return pd.DataFrame(rows, columns=columns)


def export_result_csv(result: ProposalResult, output_path: Path | str) -> None:
    """Export proposals as a flat CSV, one row per chosen section.

    Args:
        result: ProposalResult to export
        output_path: Path to output CSV file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    proposals_to_dataframe(result).to_csv(output, index=False, encoding="utf-8")
