"""
Join validated people to organizations and aggregate top-ups per organization.

Usage:
    from topup_report.report_builder import build

    result = build(valid_people, valid_organizations)
    if result.ok:
        for entry in result.entries:
            print(entry.organization_name, entry.total_top_ups)
"""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from topup_report.domain.models import (
    DomainError,
    Organization,
    Person,
    PersonSummary,
    ReportEntry,
    ReportResult,
)
from topup_report.utils.logging import get_logger

log = get_logger(__name__)

PREVIOUS_BALANCE_LABEL = "Previous Token Balance, "
# Matches the historical report output byte for byte, stray quote included.
LEGACY_NEW_BALANCE_LABEL = "New Token Balance', "
NEW_BALANCE_LABEL = "New Token Balance, "


def format_person(person: Person, new_tokens: int, legacy_label: bool = True) -> PersonSummary:
    new_label = LEGACY_NEW_BALANCE_LABEL if legacy_label else NEW_BALANCE_LABEL
    return PersonSummary(
        person_id=person.id,
        last_name=person.last_name,
        label=f"{person.last_name}, {person.first_name}, {person.email}",
        tokens=person.tokens,
        new_tokens=new_tokens,
        balances=(
            f"{PREVIOUS_BALANCE_LABEL}{person.tokens}",
            f"{new_label}{new_tokens}",
        ),
    )


def _sorted_by_last_name(summaries: List[PersonSummary]) -> Tuple[PersonSummary, ...]:
    # sorted() is stable, so equal last names keep their selection order
    return tuple(sorted(summaries, key=lambda summary: summary.last_name))


def build_entry(
    organization: Organization,
    people: Sequence[Person],
    legacy_label: bool = True,
) -> ReportEntry:
    """
    Aggregate one organization: select its active people, derive their new
    balances, partition by email status and total the top-ups.
    """
    emailed: List[PersonSummary] = []
    not_emailed: List[PersonSummary] = []
    total_top_ups = 0

    for person in people:
        if person.company_id != organization.id or person.active_status is not True:
            continue
        summary = format_person(person, person.tokens + organization.top_up, legacy_label)
        if person.email_status:
            emailed.append(summary)
        else:
            not_emailed.append(summary)
        total_top_ups += organization.top_up

    return ReportEntry(
        organization_id=organization.id,
        organization_name=organization.name,
        emailed=_sorted_by_last_name(emailed),
        not_emailed=_sorted_by_last_name(not_emailed),
        total_top_ups=total_top_ups,
    )


def build(
    people: Sequence[Mapping[str, Any]],
    organizations: Sequence[Mapping[str, Any]],
    legacy_label: bool = True,
) -> ReportResult:
    """
    Build one `ReportEntry` per organization, in organization input order.

    Parameters
    ----------
    people : sequence of mappings
        Records already verified against `PERSON_SCHEMA`.
    organizations : sequence of mappings
        Records already verified against `ORGANIZATION_SCHEMA`.
    legacy_label : bool
        Keep the historical "New Token Balance'," wording of the second
        balance line. False renders "New Token Balance,".

    Returns
    -------
    ReportResult
        Entries on success, or a `DomainError` when either collection is empty.
    """
    if not people or not organizations:
        log.warning(
            "No valid data available",
            extra={"people": len(people), "organizations": len(organizations)},
        )
        return ReportResult(error=DomainError())

    typed_people = [Person.from_record(record) for record in people]
    entries = [
        build_entry(Organization.from_record(record), typed_people, legacy_label)
        for record in organizations
    ]
    log.info(
        "Report entries built",
        extra={"entries": len(entries), "people": len(typed_people)},
    )
    return ReportResult(entries=entries)


__all__ = [
    "LEGACY_NEW_BALANCE_LABEL",
    "NEW_BALANCE_LABEL",
    "PREVIOUS_BALANCE_LABEL",
    "build",
    "build_entry",
    "format_person",
]
