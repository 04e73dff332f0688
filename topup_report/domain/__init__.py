"""
Domain package for the organization top-up report.

Exports the schemas and models shared by the verifier, report builder and
renderer. Keep this package focused on data definitions.
"""

from topup_report.domain.models import (
    NO_VALID_DATA,
    DomainError,
    Organization,
    Person,
    PersonSummary,
    ReportEntry,
    ReportResult,
)
from topup_report.domain.schema import (
    EMAIL_PATTERN,
    ORGANIZATION_SCHEMA,
    PERSON_SCHEMA,
    Schema,
    TypeTag,
)

__all__ = [
    "NO_VALID_DATA",
    "DomainError",
    "EMAIL_PATTERN",
    "ORGANIZATION_SCHEMA",
    "Organization",
    "PERSON_SCHEMA",
    "Person",
    "PersonSummary",
    "ReportEntry",
    "ReportResult",
    "Schema",
    "TypeTag",
]
