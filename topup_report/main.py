from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from topup_report.config import get_settings
from topup_report.domain.schema import ORGANIZATION_SCHEMA, PERSON_SCHEMA
from topup_report.pipeline import load_verified, run_pipeline
from topup_report.utils.logging import configure_logging

app = typer.Typer(help="Organization token top-up report CLI.")


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"people={settings.resolve(settings.people_source)} | "
        f"organizations={settings.resolve(settings.organizations_source)} | "
        f"output={settings.resolve(settings.output_path)} | "
        f"legacy_balance_label={settings.legacy_balance_label} log_level={settings.log_level}"
    )


@app.command()
def run(
    people: Optional[Path] = typer.Option(
        None,
        "--people",
        "-p",
        help="People JSON source (default from settings).",
    ),
    organizations: Optional[Path] = typer.Option(
        None,
        "--organizations",
        "-o",
        help="Organizations JSON source (default from settings).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Report destination (default from settings).",
    ),
    no_persist: bool = typer.Option(
        False,
        "--no-persist",
        help="Only display the report; do not write it.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not print the report to the console.",
    ),
) -> None:
    """
    Validate both collections, build the top-up report, display and persist it.
    """
    _setup_logging()
    outcome = run_pipeline(
        people_source=people,
        organizations_source=organizations,
        output_path=output,
        persist=not no_persist,
        display=not quiet,
    )
    if not outcome.result.ok:
        typer.echo(f"Error: {outcome.result.error}", err=True)
        raise typer.Exit(code=1)
    if outcome.output_path is not None:
        typer.echo(f"Report written to {outcome.output_path}")


@app.command()
def validate(
    people: Optional[Path] = typer.Option(None, "--people", "-p", help="People JSON source."),
    organizations: Optional[Path] = typer.Option(
        None, "--organizations", "-o", help="Organizations JSON source."
    ),
) -> None:
    """
    Report how many records in each collection satisfy their schema.
    """
    _setup_logging()
    settings = get_settings()
    checks = [
        ("people", people or settings.people_source, PERSON_SCHEMA),
        ("organizations", organizations or settings.organizations_source, ORGANIZATION_SCHEMA),
    ]
    for name, source, schema in checks:
        _, stats = load_verified(name, settings.resolve(str(source)), schema)
        typer.echo(
            f"{stats.name}: {stats.valid} valid / {stats.total} total "
            f"({stats.rejected} rejected) from {stats.source}"
        )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
