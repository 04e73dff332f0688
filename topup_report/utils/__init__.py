"""
Utilities package for the top-up report.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from topup_report.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
