"""Typed models for normalized forecast records."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .conditions import WeatherType


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class WeatherAlert(_Record):
    """Provider alert as attached to current conditions."""

    event: str | None = None
    description: str | None = None
    sender_name: str | None = None
    start: float = 0
    end: float = 0
    tags: tuple[str, ...] = ()


class NormalizedAlert(_Record):
    """Minimal alert shape handed to the renderer."""

    event: str
    description: str | None = None
    start: float
    end: float
    sender: str | None = None


class NormalizedCurrent(_Record):
    """Current conditions, unit-converted and rounded for display."""

    date: datetime
    day_of_week: str
    wind_speed: int
    wind_direction: float
    sunrise: datetime
    sunset: datetime
    temperature: float
    weather_icon: str
    weather_type: WeatherType
    humidity: float
    feels_like_temp: float
    precipitation: float
    alerts: tuple[WeatherAlert, ...] = ()


class NormalizedHour(_Record):
    """One hourly forecast sample."""

    date: datetime
    temperature: float
    humidity: float
    wind_speed: int
    wind_direction: float
    feels_like_temp: float
    weather_icon: str
    weather_type: WeatherType
    rain: float = 0.0
    snow: float = 0.0


class NormalizedDay(_Record):
    """One daily forecast sample; rain/snow are water-equivalent amounts."""

    date: datetime
    day_of_week: str
    sunrise: datetime
    sunset: datetime
    min_temperature: float
    max_temperature: float
    humidity: float
    wind_speed: int
    wind_direction: float
    feels_like_temp: float
    weather_icon: str
    weather_type: WeatherType
    rain: float = 0.0
    snow: float = 0.0


class SnowAmount(_Record):
    """Snow amount with the unit label it should be displayed with."""

    value: float
    unit: Literal["mm", "cm", "in"]


class ForecastModel(_Record):
    """Complete normalized forecast built from one provider payload."""

    current: tuple[NormalizedCurrent, ...] = ()
    hours: tuple[NormalizedHour, ...] = ()
    days: tuple[NormalizedDay, ...] = ()
