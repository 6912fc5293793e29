"""CLI entry point for the schedule planner."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .engine import SearchConfig, build_schedule_proposals
from .engine.models import Proposal, ProposalResult
from .exceptions import CatalogError
from .exporters import export_result_csv, export_result_json
from .loader import load_catalog, load_constraints
from .models import ConstraintProfile
from .validators import validate_catalog, validate_profile

app = typer.Typer(
    name="schedule-planner",
    help="Build conflict-free weekly class schedule proposals",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(1)


@app.command()
def propose(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Course catalog (.json, .csv or .xlsx)"),
    ],
    constraints_file: Annotated[
        Optional[Path],
        typer.Option("-c", "--constraints", help="Constraint profile JSON file"),
    ] = None,
    target_subjects: Annotated[
        Optional[int],
        typer.Option("--target-subjects", help="Desired number of subjects"),
    ] = None,
    target_credits: Annotated[
        Optional[float],
        typer.Option("--target-credits", help="Desired weekly credit load"),
    ] = None,
    max_afternoon_days: Annotated[
        Optional[int],
        typer.Option("--max-afternoon-days", help="Maximum weekdays with afternoon classes"),
    ] = None,
    max_afternoon_sections: Annotated[
        Optional[int],
        typer.Option("--max-afternoon-sections", help="Maximum classes with afternoon slots"),
    ] = None,
    allow_shift: Annotated[
        Optional[list[str]],
        typer.Option("--allow-shift", help="Allowed shift (M/T/N or name), repeatable"),
    ] = None,
    block_shift: Annotated[
        Optional[list[str]],
        typer.Option("--block-shift", help="Blocked shift (M/T/N or name), repeatable"),
    ] = None,
    preferred_time: Annotated[
        Optional[str],
        typer.Option("--preferred-time", help="Preferred afternoon time, HH:MM"),
    ] = None,
    period: Annotated[
        int,
        typer.Option("-p", "--period", help="Target planning period"),
    ] = 1,
    count: Annotated[
        Optional[int],
        typer.Option("-n", "--count", help="Number of proposals"),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="Search configuration JSON file"),
    ] = None,
    beam_width: Annotated[
        Optional[int],
        typer.Option("--beam-width", help="States kept after each course"),
    ] = None,
    max_sections: Annotated[
        Optional[int],
        typer.Option("--max-sections", help="Sections tried per course"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file (.json or .csv)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Propose ranked weekly schedules for a catalog."""
    _configure_logging(verbose)

    try:
        with console.status("[bold green]Loading catalog..."):
            catalog = load_catalog(catalog_file)
            base = load_constraints(constraints_file) if constraints_file else ConstraintProfile()
            config = SearchConfig.from_file(config_file) if config_file else SearchConfig()
    except CatalogError as e:
        _fail(str(e))
    except (OSError, ValueError, KeyError, TypeError) as e:
        _fail(f"Could not read configuration: {e}")

    overrides = {
        "target_subject_count": target_subjects,
        "target_credits_per_period": target_credits,
        "max_afternoon_days": max_afternoon_days,
        "max_afternoon_sections": max_afternoon_sections,
        "allowed_shifts": allow_shift or None,
        "blocked_shifts": block_shift or None,
        "preferred_afternoon_time": preferred_time,
    }
    profile_data = base.to_dict()
    profile_data.update({key: value for key, value in overrides.items() if value is not None})
    profile = ConstraintProfile.from_dict(profile_data)
    # to_dict keeps only recognised names, so carry the file's leftovers over
    profile = replace(profile, unrecognized_shifts=base.unrecognized_shifts + profile.unrecognized_shifts)

    if beam_width is not None:
        config = replace(config, beam_width=beam_width)
    if max_sections is not None:
        config = replace(config, max_sections_per_course=max_sections)

    for warning in validate_profile(profile):
        console.print(f"[yellow]• {warning}[/yellow]")

    console.print(f"\n[bold]Schedule proposals for:[/bold] {catalog_file.name}")
    console.print(f"  Courses in catalog: {len(catalog)}")
    console.print(f"  Target period: {period}")

    with console.status("[bold green]Searching schedules..."):
        result = build_schedule_proposals(
            catalog,
            profile,
            period_index=period,
            desired_proposal_count=count or config.proposal_count,
            config=config,
        )

    if result.is_empty:
        console.print(
            "\n[bold yellow]No schedule found under these constraints.[/bold yellow] "
            "Try allowing more shifts or offering more courses."
        )
    for rank, proposal in enumerate(result.proposals, start=1):
        _show_proposal(rank, proposal, verbose)

    _show_diagnostics(result)

    if output:
        with console.status(f"[bold green]Exporting to {output}..."):
            if output.suffix.lower() == ".csv":
                export_result_csv(result, output)
            else:
                output = output if output.suffix == ".json" else output.with_suffix(".json")
                export_result_json(result, output)
        console.print(f"\n[bold green]✓[/bold green] Proposals exported to: {output}")


@app.command()
def validate(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Course catalog (.json, .csv or .xlsx)"),
    ],
) -> None:
    """Validate a catalog file without searching."""
    try:
        catalog = load_catalog(catalog_file)
    except CatalogError as e:
        _fail(str(e))

    validation = validate_catalog(catalog)

    console.print(f"\n[bold]Validation Results for:[/bold] {catalog_file.name}")

    if validation["valid"]:
        console.print("[bold green]✓ Catalog is valid[/bold green]")
    else:
        console.print("[bold red]✗ Catalog has issues[/bold red]")

    console.print(f"\n  Courses: {validation['courses']}")
    console.print(f"  Sections: {validation['sections']}")

    if validation["errors"]:
        console.print(f"\n[bold red]Errors ({len(validation['errors'])}):[/bold red]")
        for error in validation["errors"]:
            console.print(f"  [red]• {error}[/red]")

    if validation["warnings"]:
        console.print(f"\n[bold yellow]Warnings ({len(validation['warnings'])}):[/bold yellow]")
        for warning in validation["warnings"]:
            console.print(f"  [yellow]• {warning}[/yellow]")

    if not validation["valid"]:
        raise typer.Exit(1)


def _show_proposal(rank: int, proposal: Proposal, verbose: bool) -> None:
    """Show one proposal as a table with its constraint report."""
    table = Table(
        title=(
            f"#{rank} {proposal.id} - {proposal.subject_count} subjects, "
            f"{proposal.achieved_credits:g} credits"
        )
    )
    table.add_column("Code", style="cyan")
    table.add_column("Course", max_width=40)
    table.add_column("Section", style="magenta")
    table.add_column("Slots", style="green")
    table.add_column("Credits", style="yellow")

    for item in proposal.classes:
        table.add_row(
            item.course_code,
            item.course_name[:40],
            item.section_id,
            " ".join(item.time_slots),
            f"{item.credits:g}",
        )
    console.print()
    console.print(table)

    report = proposal.constraint_report
    for message in report.met:
        console.print(f"  [green]✓ {message}[/green]")
    for message in report.relaxed:
        console.print(f"  [yellow]~ {message}[/yellow]")
    for message in report.violated:
        console.print(f"  [red]✗ {message}[/red]")

    if verbose:
        score = proposal.score_breakdown
        console.print(
            f"  Scores: schedule {score.schedule_score:g}, subjects {score.subjects_score:g}, "
            f"credits {score.credits_score:g}"
        )


def _show_diagnostics(result: ProposalResult) -> None:
    diagnostics = result.diagnostics
    table = Table(title="Search diagnostics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Proposals", str(diagnostics.proposal_count))
    table.add_row("Candidates examined", str(diagnostics.total_candidates_examined))
    table.add_row("Tier used", diagnostics.highest_relaxation_tier_used)
    table.add_row("Tiers attempted", ", ".join(diagnostics.tiers_attempted) or "-")
    console.print()
    console.print(table)


if __name__ == "__main__":
    app()
