"""
Logging setup for the top-up report CLI.

`configure_logging` installs a single stderr handler on the root logger, either
as `asctime | level | name | message` lines or as one JSON object per record
(`LOG_JSON=true`). Modules log pipeline stages with counts passed through
`extra=`, which the JSON formatter lifts into top-level keys:

- `topup_report.loader`: `source`, `records`; a warning when a collection
  cannot be read or parsed and is treated as empty
- `topup_report.verifier`: `records`, `valid`, `rejected` at DEBUG
- `topup_report.pipeline`: `collection`, `records`, `valid`, `rejected`,
  `entries`, `persisted`
- `topup_report.reporter`: `output` once the report is written

Usage:
    from topup_report.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_logs=True)
    log = get_logger(__name__)
    log.info("[VERIFY] people", extra={"collection": "people", "valid": 6, "rejected": 3})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "extra"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in vars(record).items():
        if key not in _RESERVED_ATTRS:
            payload[key] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    if hasattr(record, "extra") and isinstance(record.extra, dict):
        payload.update(record.extra)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with pipeline counts as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """
    Route all report logging to stderr, keeping stdout for the rendered report.

    Parameters
    ----------
    level : str
        Level name from `LOG_LEVEL`; DEBUG adds the verifier rejection counts.
    json_logs : bool
        `LOG_JSON`: emit JSON objects instead of pipe-separated lines.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": formatter_name,
                    "level": level.upper(),
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level.upper(),
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
