"""Weather-condition categories and wind descriptors."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import StrEnum

from .units import KMH_PER_MPH


class WeatherType(StrEnum):
    """Display categories for provider icon codes."""

    DAY_SUNNY = "day-sunny"
    DAY_CLOUDY = "day-cloudy"
    CLOUDY = "cloudy"
    CLOUDY_WINDY = "cloudy-windy"
    SHOWERS = "showers"
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    FOG = "fog"
    NIGHT_CLEAR = "night-clear"
    NIGHT_CLOUDY = "night-cloudy"
    NIGHT_SHOWERS = "night-showers"
    NIGHT_RAIN = "night-rain"
    NIGHT_THUNDERSTORM = "night-thunderstorm"
    NIGHT_SNOW = "night-snow"
    NIGHT_ALT_CLOUDY_WINDY = "night-alt-cloudy-windy"
    NA = "na"


ICON_WEATHER_TYPES: dict[str, WeatherType] = {
    "01d": WeatherType.DAY_SUNNY,
    "02d": WeatherType.DAY_CLOUDY,
    "03d": WeatherType.CLOUDY,
    "04d": WeatherType.CLOUDY_WINDY,
    "09d": WeatherType.SHOWERS,
    "10d": WeatherType.RAIN,
    "11d": WeatherType.THUNDERSTORM,
    "13d": WeatherType.SNOW,
    "50d": WeatherType.FOG,
    "01n": WeatherType.NIGHT_CLEAR,
    "02n": WeatherType.NIGHT_CLOUDY,
    "03n": WeatherType.NIGHT_CLOUDY,
    "04n": WeatherType.NIGHT_CLOUDY,
    "09n": WeatherType.NIGHT_SHOWERS,
    "10n": WeatherType.NIGHT_RAIN,
    "11n": WeatherType.NIGHT_THUNDERSTORM,
    "13n": WeatherType.NIGHT_SNOW,
    "50n": WeatherType.NIGHT_ALT_CLOUDY_WINDY,
}

# Upper bounds (km/h, exclusive) of Beaufort forces 0..12.
BEAUFORT_KMH_LIMITS: tuple[int, ...] = (1, 5, 11, 19, 28, 38, 49, 61, 74, 88, 102, 117, 1000)

_CARDINAL_LABELS: tuple[str, ...] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)


def convert_weather_type(icon: str | None) -> WeatherType:
    """Map a provider icon code to a category; unknown codes map to NA."""
    if icon is None:
        return WeatherType.NA
    return ICON_WEATHER_TYPES.get(icon, WeatherType.NA)


def mph_to_beaufort(mph: float) -> int:
    """Convert a wind speed in mph to Beaufort force."""
    kmh = mph * KMH_PER_MPH
    for force, limit in enumerate(BEAUFORT_KMH_LIMITS):
        if limit > kmh:
            return force
    return 12


def cardinal_wind_direction(degrees: float) -> str:
    """Return the 16-point compass label for a wind bearing."""
    bearing = degrees % 360
    # Each sector is (center - 11.25, center + 11.25]; N takes the remainder.
    for index in range(1, 16):
        center = index * 22.5
        if center - 11.25 < bearing <= center + 11.25:
            return _CARDINAL_LABELS[index]
    return "N"


def ordinal_label(bearing: float, labels: Sequence[str]) -> str:
    """Return the configured compass label closest to `bearing`."""
    return labels[math.floor(bearing * 16 / 360 + 0.5) % 16]
