"""Structured logging tests."""

from __future__ import annotations

import json
import logging

from onecall_forecast.log_setup import JsonConsoleFormatter, setup_logger


def _record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(
        name="onecall_forecast",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_json_formatter_emits_redacted_record() -> None:
    record = _record("request failed for appid=%s", "topsecret")
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["level"] == "WARNING"
    assert event["logger"] == "onecall_forecast"
    assert event["message"] == "request failed for appid=[REDACTED]"
    assert "payload_path" not in event
    assert "section" not in event


def test_json_formatter_includes_payload_context() -> None:
    record = _record("Skipping hourly entry %d of type %s", 1, "str")
    record.payload_path = "/tmp/onecall.json?appid=topsecret"
    record.section = "hourly"
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["payload_path"] == "/tmp/onecall.json?appid=[REDACTED]"
    assert event["section"] == "hourly"


def test_setup_logger_is_idempotent() -> None:
    logger = setup_logger("onecall_forecast.test_setup")
    again = setup_logger("onecall_forecast.test_setup")
    assert logger is again
    assert len(again.handlers) == 1
    assert logger.propagate is False
