"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherPayloadError(Exception):
    """Raised when a raw One Call payload is structurally invalid."""
