"""Structured logging — JSON formatter output and setup idempotence."""

import json
import logging

from founders_club.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "founders_club.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "founders_club.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(
        _record(request_id="abc", error_code="CONFLICT", ignored="x"),
    ))
    assert out["request_id"] == "abc"
    assert out["error_code"] == "CONFLICT"
    assert "ignored" not in out


def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO", "json")
    before = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == before
    assert logging.root.level == logging.INFO


def test_json_formatter_drops_invite_code():
    out = json.loads(JSONFormatter().format(
        _record(request_id="abc", code="FC-ABCD2345"),
    ))
    assert "code" not in out
    assert "FC-ABCD2345" not in json.dumps(out)
