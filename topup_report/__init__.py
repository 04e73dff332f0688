"""
Organization token top-up report.

Validates untrusted people and organization collections against fixed field
schemas, joins valid people to their organizations, and reports per
organization:

- Active people split by whether they were emailed, sorted by last name
- Previous and new token balances for each person
- The total amount of top-ups granted

The report is rendered as YAML, shown on the console and written to disk.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from topup_report.config import Settings, get_settings
from topup_report.domain.models import DomainError, PersonSummary, ReportEntry, ReportResult
from topup_report.domain.schema import ORGANIZATION_SCHEMA, PERSON_SCHEMA, TypeTag
from topup_report.loader import LoadError, load_collection
from topup_report.pipeline import run_pipeline
from topup_report.report_builder import build
from topup_report.reporter import render_report
from topup_report.utils.logging import configure_logging, get_logger
from topup_report.verifier import satisfies_schema, verify

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Schemas and verification
    "ORGANIZATION_SCHEMA",
    "PERSON_SCHEMA",
    "TypeTag",
    "satisfies_schema",
    "verify",
    # Loading
    "LoadError",
    "load_collection",
    # Report
    "DomainError",
    "PersonSummary",
    "ReportEntry",
    "ReportResult",
    "build",
    "render_report",
    "run_pipeline",
    # Logging
    "configure_logging",
    "get_logger",
]
