"""One Call forecast normalization."""

from .alerts import active_alerts, filter_alerts
from .conditions import WeatherType, cardinal_wind_direction, convert_weather_type, mph_to_beaufort
from .models import (
    ForecastModel,
    NormalizedAlert,
    NormalizedCurrent,
    NormalizedDay,
    NormalizedHour,
    SnowAmount,
    WeatherAlert,
)
from .normalizer import OneCallNormalizer, normalize
from .snow import snow_depth, snow_depth_ratio
from .units import UnitProfile, resolve_units

__all__ = [
    "ForecastModel",
    "NormalizedAlert",
    "NormalizedCurrent",
    "NormalizedDay",
    "NormalizedHour",
    "OneCallNormalizer",
    "SnowAmount",
    "UnitProfile",
    "WeatherAlert",
    "WeatherType",
    "active_alerts",
    "cardinal_wind_direction",
    "convert_weather_type",
    "filter_alerts",
    "mph_to_beaufort",
    "normalize",
    "resolve_units",
    "snow_depth",
    "snow_depth_ratio",
]
