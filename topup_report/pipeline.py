"""
Pipeline wiring: load, verify, build, render, display and persist.

Usage (example from CLI):
    from topup_report.pipeline import run_pipeline

    outcome = run_pipeline(persist=False)
    if not outcome.result.ok:
        print(outcome.result.error)

Sources default to `users.json` and `companies.json` under `DATA_DIR`; the
rendered report is written to `REPORT_OUTPUT` (default `output.txt`).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from topup_report.config import Settings, get_settings
from topup_report.domain.models import ReportResult
from topup_report.domain.schema import ORGANIZATION_SCHEMA, PERSON_SCHEMA, Schema
from topup_report.loader import load_collection
from topup_report.report_builder import build
from topup_report.reporter import print_report, render_report, write_report
from topup_report.utils.logging import get_logger
from topup_report.verifier import verify

log = get_logger(__name__)


@dataclass(frozen=True)
class CollectionStats:
    """Counts for one loaded and verified collection."""

    name: str
    source: Path
    total: int
    valid: int

    @property
    def rejected(self) -> int:
        return self.total - self.valid


@dataclass(frozen=True)
class PipelineOutcome:
    result: ReportResult
    people: CollectionStats
    organizations: CollectionStats
    rendered: Optional[str] = None
    output_path: Optional[Path] = None


def load_verified(name: str, source: Path, schema: Schema) -> tuple[List[Any], CollectionStats]:
    """Load one collection and keep only the records satisfying `schema`."""
    log.info(f"[LOAD] {name}", extra={"collection": name, "source": str(source)})
    raw = load_collection(source)
    valid = verify(raw, schema)
    stats = CollectionStats(name=name, source=source, total=len(raw), valid=len(valid))
    log.info(
        f"[VERIFY] {name}",
        extra={
            "collection": name,
            "records": stats.total,
            "valid": stats.valid,
            "rejected": stats.rejected,
        },
    )
    return valid, stats


def run_pipeline(
    people_source: Optional[Path | str] = None,
    organizations_source: Optional[Path | str] = None,
    output_path: Optional[Path | str] = None,
    persist: bool = True,
    display: bool = True,
    settings: Optional[Settings] = None,
) -> PipelineOutcome:
    """
    Run the full report pipeline.

    Parameters
    ----------
    people_source, organizations_source : Path | str | None
        Source overrides. Relative names resolve against `settings.data_dir`.
    output_path : Path | str | None
        Destination override for the rendered report.
    persist : bool
        Whether to write the rendered report to disk.
    display : bool
        Whether to print the report to the console.
    settings : Settings | None
        Explicit settings; defaults to `get_settings()`.

    Returns
    -------
    PipelineOutcome
        The build result plus per-collection counts. `rendered` and
        `output_path` stay None when the build fails with a DomainError.
    """
    settings = settings or get_settings()

    people, people_stats = load_verified(
        "people",
        settings.resolve(str(people_source or settings.people_source)),
        PERSON_SCHEMA,
    )
    organizations, organization_stats = load_verified(
        "organizations",
        settings.resolve(str(organizations_source or settings.organizations_source)),
        ORGANIZATION_SCHEMA,
    )

    result = build(people, organizations, legacy_label=settings.legacy_balance_label)
    if not result.ok:
        log.error(f"[PIPELINE HALTED] {result.error}")
        return PipelineOutcome(
            result=result, people=people_stats, organizations=organization_stats
        )

    rendered = render_report(result.entries)
    if display:
        print_report(result.entries, rendered=rendered)

    written: Optional[Path] = None
    if persist:
        written = write_report(
            rendered, settings.resolve(str(output_path or settings.output_path))
        )

    log.info(
        "[PIPELINE COMPLETE]",
        extra={"entries": len(result.entries), "persisted": written is not None},
    )
    return PipelineOutcome(
        result=result,
        people=people_stats,
        organizations=organization_stats,
        rendered=rendered,
        output_path=written,
    )


__all__ = ["CollectionStats", "PipelineOutcome", "load_verified", "run_pipeline"]
