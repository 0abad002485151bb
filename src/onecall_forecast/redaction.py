"""Masking of One Call API keys in log text."""

from __future__ import annotations

import re

REDACTED = "[REDACTED]"

# One Call request URLs carry the API key as the `appid` query parameter.
_KEY_VALUE_SECRET_RE = re.compile(
    r"""(?ix)
    \b
    (
      appid|
      api[_-]?key|
      token
    )
    \s*[:=]\s*
    ([^\s,;&]+)
    """
)


def redact_secrets(text: str) -> str:
    """Mask API keys embedded in plain text."""
    return _KEY_VALUE_SECRET_RE.sub(lambda m: f"{m.group(1)}={REDACTED}", text)
