from __future__ import annotations

import json
import logging

import pytest

from topup_report.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_RECORDS = 10
EXPECTED_REJECTED = 3


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.records = EXPECTED_RECORDS
    record.collection = "people"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["records"] == EXPECTED_RECORDS
    assert payload["collection"] == "people"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"rejected": EXPECTED_REJECTED}

    payload = json.loads(_json_formatter(record))

    assert payload["rejected"] == EXPECTED_REJECTED


def test_json_formatter_stringifies_non_json_values() -> None:
    record = _record()
    record.source = object()

    payload = json.loads(_json_formatter(record))

    assert payload["source"].startswith("<object object")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_json_mode_uses_json_formatter(restore_root_logger) -> None:
    configure_logging(level="debug", json_logs=True)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
