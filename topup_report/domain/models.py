"""
Domain models for the organization top-up report.

`Person` and `Organization` are typed, read-only views over records that have
already passed schema verification. `PersonSummary` and `ReportEntry` are the
derived report values; `DomainError` and `ReportResult` carry the outcome of a
report build.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

NO_VALID_DATA = "no valid data available"

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "extra": "ignore",
}


class Person(BaseModel):
    """
    A person record that satisfies `PERSON_SCHEMA`.
    """

    id: int = Field(..., strict=True)
    first_name: str
    last_name: str
    email: str
    company_id: int = Field(..., strict=True)
    email_status: bool = Field(..., strict=True)
    active_status: bool = Field(..., strict=True)
    tokens: int = Field(..., strict=True)

    model_config = _FROZEN

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Person":
        return cls.model_validate(dict(record))


class Organization(BaseModel):
    """
    An organization record that satisfies `ORGANIZATION_SCHEMA`.
    """

    id: int = Field(..., strict=True)
    name: str
    top_up: int = Field(..., strict=True)
    email_status: bool = Field(..., strict=True)

    model_config = _FROZEN

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Organization":
        return cls.model_validate(dict(record))


class PersonSummary(BaseModel):
    """
    Formatted line item for one person inside an organization partition.

    `label` is "<last_name>, <first_name>, <email>" and `balances` holds the two
    rendered balance lines (previous, new).
    """

    person_id: int
    last_name: str
    label: str
    tokens: int
    new_tokens: int
    balances: Tuple[str, str]

    model_config = _FROZEN


class ReportEntry(BaseModel):
    """Aggregated report values for a single organization."""

    organization_id: int
    organization_name: str
    emailed: Tuple[PersonSummary, ...] = ()
    not_emailed: Tuple[PersonSummary, ...] = ()
    total_top_ups: int = 0

    model_config = _FROZEN


class DomainError(BaseModel):
    """The single failure a report build surfaces to its caller."""

    message: str = NO_VALID_DATA

    model_config = _FROZEN

    def __str__(self) -> str:
        return self.message


class ReportResult(BaseModel):
    """
    Outcome of a report build: either entries or a `DomainError`, never both.
    """

    entries: List[ReportEntry] = Field(default_factory=list)
    error: Optional[DomainError] = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "NO_VALID_DATA",
    "DomainError",
    "Organization",
    "Person",
    "PersonSummary",
    "ReportEntry",
    "ReportResult",
]
