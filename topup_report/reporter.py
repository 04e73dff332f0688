from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

from topup_report.domain.models import PersonSummary, ReportEntry
from topup_report.utils.logging import get_logger

log = get_logger(__name__)


def _person_items(summaries: Sequence[PersonSummary]) -> List[Dict[str, List[str]]]:
    return [{summary.label: list(summary.balances)} for summary in summaries]


def report_data(entries: Sequence[ReportEntry]) -> List[Dict[str, Any]]:
    """
    Shape report entries into plain mappings with the report's display keys.
    """
    return [
        {
            "Company Id": entry.organization_id,
            "Company Name": entry.organization_name,
            "Users Emailed": _person_items(entry.emailed),
            "Users Not Emailed": _person_items(entry.not_emailed),
            f"Total amount of top ups for {entry.organization_name}": entry.total_top_ups,
        }
        for entry in entries
    ]


def render_report(entries: Sequence[ReportEntry]) -> str:
    """Render entries as a YAML document, keeping key order."""
    return yaml.safe_dump(
        report_data(entries),
        sort_keys=False,
        explicit_start=True,
        allow_unicode=True,
        default_flow_style=False,
    )


def write_report(text: str, path: Path | str) -> Path:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as f:
        f.write(text)
    log.info("Report persisted", extra={"output": str(destination)})
    return destination


def print_report(
    entries: Sequence[ReportEntry],
    rendered: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Display a per-organization summary table followed by the rendered report.
    """
    console = console or Console()

    if not entries:
        console.print("[yellow]No report entries to display.[/yellow]")
        return

    table = Table(
        title="Organization Token Top-Ups",
        box=box.ROUNDED,
        caption="In organization input order",
    )
    table.add_column("Company Id", justify="right", style="cyan", no_wrap=True)
    table.add_column("Company Name", style="magenta")
    table.add_column("Emailed", justify="right", style="green")
    table.add_column("Not Emailed", justify="right", style="yellow")
    table.add_column("Total Top-Ups", justify="right", style="bold green")

    for entry in entries:
        table.add_row(
            str(entry.organization_id),
            entry.organization_name,
            str(len(entry.emailed)),
            str(len(entry.not_emailed)),
            f"{entry.total_top_ups:,}",
        )

    text = rendered if rendered is not None else render_report(entries)
    console.print(text, markup=False, highlight=False)
    console.print(table)


__all__ = ["print_report", "render_report", "report_data", "write_report"]
