"""Schedule Planner - conflict-free weekly class schedule proposals.

Given the sections a student can still take in a period, each with fixed
weekly time slots, and a constraint profile (shifts, subject and credit
targets, afternoon limits, a preferred afternoon time), this package builds
a small ranked set of distinct schedule proposals and reports which
preferences each one met, relaxed or violated.

Example usage:
    from schedule_planner import build_schedule_proposals, load_catalog

    catalog = load_catalog("catalog.json")
    result = build_schedule_proposals(
        catalog,
        {"target_subject_count": 4, "blocked_shifts": ["Morning"]},
        period_index=3,
    )

    for proposal in result.proposals:
        print(f"{proposal.id} | {proposal.subject_count} subjects | {proposal.achieved_credits} credits")

    # Export to JSON
    from schedule_planner.exporters import export_result_json
    export_result_json(result, "proposals.json")
"""

from .engine import (
    Proposal,
    ProposalResult,
    ScheduleProposalEngine,
    SearchConfig,
    SearchDiagnostics,
    build_schedule_proposals,
)
from .exceptions import (
    CatalogError,
    CatalogFileNotFoundError,
    InvalidDataError,
    MissingColumnError,
    UnsupportedFormatError,
)
from .exporters import export_result_csv, export_result_json
from .loader import load_catalog, load_constraints
from .models import ConstraintProfile, CourseOffering, Section, Shift

__version__ = "0.1.0"

__all__ = [
    # Engine
    "build_schedule_proposals",
    "ScheduleProposalEngine",
    "SearchConfig",
    # Models
    "CourseOffering",
    "Section",
    "ConstraintProfile",
    "Shift",
    "Proposal",
    "ProposalResult",
    "SearchDiagnostics",
    # Loading and export
    "load_catalog",
    "load_constraints",
    "export_result_json",
    "export_result_csv",
    # Exceptions
    "CatalogError",
    "CatalogFileNotFoundError",
    "UnsupportedFormatError",
    "MissingColumnError",
    "InvalidDataError",
]
