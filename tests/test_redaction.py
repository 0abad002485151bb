"""API key redaction tests."""

from __future__ import annotations

from onecall_forecast.redaction import REDACTED, redact_secrets


def test_redact_secrets_masks_api_keys() -> None:
    url = "https://api.openweathermap.org/data/3.0/onecall?lat=1&lon=2&appid=abc123&units=metric"
    redacted = redact_secrets(url)
    assert "abc123" not in redacted
    assert f"appid={REDACTED}&units=metric" in redacted
    assert redact_secrets("apikey: s3cret") == "apikey=[REDACTED]"


def test_redact_secrets_leaves_plain_text_alone() -> None:
    text = "Skipping hourly entry 2 of type str"
    assert redact_secrets(text) == text
