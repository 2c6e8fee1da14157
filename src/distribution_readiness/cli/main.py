"""CLI entry point for distribution-readiness.

Invoked as::

    distribution-readiness [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m distribution_readiness.cli.main

Available commands
------------------
* ``assess``    — score an intake file and print the readiness report
* ``template``  — write an all-defaults intake file to fill in
* ``platforms`` — list the platforms an intake can target
* ``version``   — show detailed version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from distribution_readiness.readiness.report import ReadinessReport

console = Console()
logger = logging.getLogger(__name__)

_STATE_STYLES = {
    "met": "[green]met[/green]",
    "partial": "[yellow]partial[/yellow]",
    "unmet": "[red]unmet[/red]",
}

_BAND_STYLES = {
    "Not Ready": "red",
    "Developing": "yellow",
    "Ready-ish": "blue",
    "Delivery Ready": "green",
}


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="distribution-readiness")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set the log level.",
    show_default=True,
)
def cli(log_level: str) -> None:
    """Score film and TV projects for distribution readiness."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s — %(message)s",
    )


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from distribution_readiness import __version__

    console.print(f"[bold]distribution-readiness[/bold] v{__version__}")
    console.print(f"Python {sys.version}")


# ---------------------------------------------------------------------------
# platforms
# ---------------------------------------------------------------------------


@cli.command(name="platforms")
def platforms_command() -> None:
    """List the platform ids accepted in ``targetPlatforms``."""
    from distribution_readiness.platforms.catalog import PLATFORM_CATALOG

    table = Table(title="Distribution platforms", show_header=True)
    table.add_column("Id", style="bold")
    table.add_column("Platform")
    for platform in PLATFORM_CATALOG:
        table.add_row(platform.platform_id, platform.label)
    console.print(table)


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------


@cli.command(name="template")
@click.argument("output_path", type=click.Path())
def template_command(output_path: str) -> None:
    """Write an all-defaults intake document to OUTPUT_PATH (.yaml or .json)."""
    from distribution_readiness.intake.loader import save_intake
    from distribution_readiness.intake.model import ProjectIntake

    try:
        path = save_intake(ProjectIntake(), output_path)
    except OSError as exc:
        console.print(f"[red]Error writing template:[/red] {exc}")
        raise SystemExit(1) from exc
    console.print(f"Intake template written to: [bold]{path}[/bold]")


# ---------------------------------------------------------------------------
# assess
# ---------------------------------------------------------------------------


@cli.command(name="assess")
@click.argument("intake_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    default="table",
    show_default=True,
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Print the report as rich tables or as JSON.",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(),
    help="Also save the report as JSON to this path.",
)
def assess_command(intake_path: str, output_format: str, output: str | None) -> None:
    """Assess the project described by INTAKE_PATH (.yaml, .yml or .json).

    Example intake::

        projectTitle: Night Harbor
        runtimeMinutes: 94
        budgetTier: small
        targetPlatforms: [tubi, pluto]
        legal:
          chainOfTitleStatus: complete
        technical:
          captionsAvailable: yes
    """
    import pathlib

    from distribution_readiness.intake.builder import IntakeValidationError
    from distribution_readiness.intake.loader import load_intake
    from distribution_readiness.readiness.assessor import assess

    try:
        intake = load_intake(intake_path)
    except IntakeValidationError as exc:
        console.print(f"[red]Invalid intake file:[/red] {intake_path}")
        for problem in exc.errors:
            console.print(f"  - {problem}", markup=False)
        raise SystemExit(1) from exc
    except OSError as exc:
        console.print(f"[red]Error reading intake file:[/red] {exc}")
        raise SystemExit(1) from exc

    report = assess(intake)

    if output_format.lower() == "json":
        click.echo(report.to_json())
    else:
        _print_report(intake.project_title, report)

    if output:
        try:
            pathlib.Path(output).write_text(report.to_json(), encoding="utf-8")
        except OSError as exc:
            console.print(f"[red]Error writing report:[/red] {exc}")
            raise SystemExit(1) from exc
        logger.info("Saved report to %s", output)
        if output_format.lower() != "json":
            console.print(f"\nReport saved to: [bold]{output}[/bold]")


def _print_report(title: str, report: ReadinessReport) -> None:
    from distribution_readiness.platforms.catalog import platform_label

    style = _BAND_STYLES.get(report.band.value, "white")
    console.print(
        f"[bold cyan]{title or 'Untitled project'}[/bold cyan] — "
        f"[bold {style}]{report.overall_score_final}[/bold {style}] "
        f"[{style}]{report.band.label}[/{style}]"
    )
    console.print(report.band_action)

    scores = Table(title="Pillar scores", show_header=True)
    scores.add_column("Pillar", style="bold")
    scores.add_column("Score")
    scores.add_column("Weight")
    scores.add_row("Business", str(report.business_score), f"{report.weights.business}%")
    scores.add_row("Legal", str(report.legal_score), f"{report.weights.legal}%")
    scores.add_row("Technical", str(report.technical_score), f"{report.weights.technical}%")
    scores.add_row("Overall (raw)", str(report.overall_score_raw), "")
    scores.add_row("Overall (final)", str(report.overall_score_final), "")
    console.print(scores)

    if report.hard_stops:
        console.print("\n[bold red]Deal-killers[/bold red]")
        for stop in report.hard_stops:
            console.print(f"  - {stop}", markup=False)

    for platform_id, items in report.platform_checklists.items():
        checklist = Table(title=platform_label(platform_id), show_header=False, box=None)
        for item in items:
            checklist.add_row(item.label, _STATE_STYLES[item.state.value])
        console.print(checklist)

    console.print("\n[bold]Recommended next steps[/bold]")
    for index, action in enumerate(report.recommended_actions, start=1):
        console.print(f"  {index}. {action}", markup=False)


if __name__ == "__main__":
    cli()
