"""Logging setup for forecast normalization runs."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import redact_secrets

# Record attributes passed through `extra=` that end up in the JSON line.
_CONTEXT_FIELDS = ("payload_path", "section")


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record, with the payload file and section when known."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_secrets(record.getMessage()),
        }
        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                event[field] = redact_secrets(str(value))
        if record.exc_info:
            event["exception"] = redact_secrets(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def setup_logger(name: str = "onecall_forecast", level: int = logging.INFO) -> logging.Logger:
    """Create and configure a process-wide logger."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
