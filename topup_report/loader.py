"""
Collection loading: read a named JSON source and parse it into a list.

`read_collection` raises `LoadError` on I/O or parse failure. `load_collection`
is the pipeline boundary that logs the failure and degrades it to an empty
collection, which downstream reports as "no valid data available".
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from topup_report.utils.logging import get_logger

log = get_logger(__name__)


class LoadError(Exception):
    """Raised when a source cannot be read or parsed into a record array."""

    def __init__(self, source: Path | str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = str(source)
        self.reason = reason


def load_raw(path: Path | str) -> str:
    """Read the source text, wrapping I/O failures in `LoadError`."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(path, f"could not read file ({exc})") from exc


def parse_structured(text: str, source: Path | str = "<string>") -> List[Any]:
    """Parse JSON text that must hold a top-level array."""
    try:
        data = json.loads(text)
    # JSONDecodeError is a ValueError; oversized integer literals raise a plain
    # ValueError and very deep nesting raises RecursionError.
    except (ValueError, RecursionError) as exc:
        raise LoadError(source, f"invalid JSON format ({exc})") from exc
    if not isinstance(data, list):
        raise LoadError(source, f"expected a JSON array, got {type(data).__name__}")
    return data


def read_collection(path: Path | str) -> List[Any]:
    return parse_structured(load_raw(path), source=path)


def load_collection(path: Path | str) -> List[Any]:
    """
    Load a collection, collapsing any `LoadError` to an empty list.
    """
    try:
        records = read_collection(path)
    except LoadError as exc:
        log.warning(
            f"Could not load collection, treating it as empty: {exc.reason}",
            extra={"source": exc.source},
        )
        return []
    log.info("Collection loaded", extra={"source": str(path), "records": len(records)})
    return records


__all__ = ["LoadError", "load_collection", "load_raw", "parse_structured", "read_collection"]
