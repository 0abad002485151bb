"""Render-time derivations for normalized forecast records.

Nothing here is stored on the normalized model; renderers call these
helpers while drawing.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo
from typing import Literal

from ..config import Settings
from .conditions import mph_to_beaufort
from .models import NormalizedAlert, NormalizedCurrent, NormalizedDay
from .snow import day_snow_depth
from .units import celsius_to_fahrenheit, is_imperial, round_half_up, speed_to_mph


def current_wind_display(current: NormalizedCurrent, settings: Settings) -> str:
    """Return the current wind speed label, as Beaufort force when configured."""
    if settings.use_beaufort_in_current:
        mph = speed_to_mph(current.wind_speed, settings.units, settings.wind_units)
        return f"F{mph_to_beaufort(mph)}"
    return str(current.wind_speed)


def display_temperature(value: float, temp_units: str) -> float:
    """Convert a Celsius value to whole Fahrenheit degrees when `temp_units` is 'f'."""
    if temp_units == "f":
        return round_half_up(celsius_to_fahrenheit(value))
    return value


def temperature_label(units: str, scale: bool) -> str:
    if not scale:
        return "°"
    if units == "metric":
        return "°C"
    if is_imperial(units):
        return "°F"
    return "K"


def format_decimal(value: float, places: int, decimal_symbol: str = ".") -> str:
    text = f"{round_half_up(value, places):.{places}f}"
    return text.replace(".", decimal_symbol)


def format_precipitation(amount: float, settings: Settings) -> tuple[str, str]:
    """Format a water-equivalent amount as (value, unit)."""
    if is_imperial(settings.units):
        return format_decimal(amount, 2, settings.decimal_symbol), "in"
    return format_decimal(amount, 1, settings.decimal_symbol), "mm"


def format_day_snow(day: NormalizedDay, settings: Settings) -> tuple[str, str]:
    """Format a day's snow, converted to depth when enabled, as (value, unit)."""
    snow = day_snow_depth(
        day,
        units=settings.units,
        density_factor=settings.snow_density_factor,
        enabled=settings.convert_snow_to_depth,
    )
    places = 2 if is_imperial(settings.units) else 1
    return format_decimal(snow.value, places, settings.decimal_symbol), snow.unit


def has_any(
    days: Sequence[NormalizedDay],
    field: Literal["rain", "snow"],
    limit: int,
) -> bool:
    """Return True when one of the first `limit` days has a positive amount."""
    return any(getattr(day, field) > 0 for day in days[:limit])


_ALERT_TIME_FORMAT = "%H:%M"
_ALERT_DATETIME_FORMAT = "%b %d, %Y %H:%M"


def _format_alert_instant(timestamp: float | None, tz: tzinfo | None, pattern: str) -> str:
    if not timestamp:
        return "--"
    try:
        instant = datetime.fromtimestamp(timestamp, tz or UTC)
    except (OverflowError, OSError, ValueError):
        return "--"
    return instant.strftime(pattern)


def format_alert_time(timestamp: float | None, tz: tzinfo | None = None) -> str:
    """Return HH:MM for an alert boundary, or '--' when it is unset."""
    return _format_alert_instant(timestamp, tz, _ALERT_TIME_FORMAT)


def format_alert_datetime(timestamp: float | None, tz: tzinfo | None = None) -> str:
    """Return a medium date with short time for an alert boundary, or '--'."""
    return _format_alert_instant(timestamp, tz, _ALERT_DATETIME_FORMAT)


def alert_summary(alert: NormalizedAlert, tz: tzinfo | None = None) -> str:
    """One-line alert label: 'event (start - end)'."""
    start = format_alert_time(alert.start, tz)
    end = format_alert_time(alert.end, tz)
    return f"{alert.event} ({start} - {end})"


def alert_detail_lines(alert: NormalizedAlert, tz: tzinfo | None = None) -> list[str]:
    """Description lines followed by source and validity lines."""
    if alert.description:
        lines = alert.description.split("\n")
    else:
        lines = ["No additional details provided."]
    lines.append(f"Source: {alert.sender or 'NWS'}")
    lines.append(
        f"Valid: {format_alert_datetime(alert.start, tz)} – "
        f"{format_alert_datetime(alert.end, tz)}"
    )
    return lines
