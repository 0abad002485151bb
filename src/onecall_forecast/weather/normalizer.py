"""OpenWeather One Call payload normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from ..config import Settings
from ..exceptions import WeatherPayloadError
from .conditions import convert_weather_type
from .models import (
    ForecastModel,
    NormalizedCurrent,
    NormalizedDay,
    NormalizedHour,
    WeatherAlert,
)
from .units import (
    UnitProfile,
    as_number,
    mm_to_inches,
    resolve_units,
    round_half_up,
    round_temperature,
)

_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class OneCallNormalizer:
    """Turns a raw One Call payload into an immutable ForecastModel."""

    def __init__(self, settings: Settings, logger: logging.Logger | None = None) -> None:
        self.settings = settings
        self.logger = logger or logging.getLogger("onecall_forecast.weather.normalizer")
        self.unit_profile: UnitProfile = resolve_units(settings.units, settings.wind_units)

    def normalize(
        self,
        payload: Mapping[str, Any],
        *,
        max_hours: int | None = None,
        max_days: int | None = None,
    ) -> ForecastModel:
        """Normalize all sections present in `payload`.

        Raises WeatherPayloadError when the root is not a mapping, lacks a
        numeric `timezone_offset`, or carries a section of the wrong type.
        Missing sections produce empty output.
        """
        if not isinstance(payload, Mapping):
            raise WeatherPayloadError(
                f"One Call payload must be an object, got {type(payload).__name__}."
            )
        tz = self._timezone(payload)

        raw_current = self._section(payload, "current", Mapping)
        raw_hourly = self._section(payload, "hourly", list)
        raw_daily = self._section(payload, "daily", list)
        raw_alerts = self._section(payload, "alerts", list)

        current: tuple[NormalizedCurrent, ...] = ()
        if raw_current is not None:
            alerts = self._parse_alerts(raw_alerts or [])
            current = (self._normalize_current(raw_current, tz, alerts),)
            self.logger.debug("current weather is %s", current[0].model_dump_json())

        hours = tuple(
            self._normalize_hour(entry, tz)
            for entry in self._entries(raw_hourly, "hourly", max_hours)
        )
        days = tuple(
            self._normalize_day(entry, tz)
            for entry in self._entries(raw_daily, "daily", max_days)
        )
        self.logger.debug(
            "normalized forecast current=%d hours=%d days=%d",
            len(current),
            len(hours),
            len(days),
        )
        return ForecastModel(current=current, hours=hours, days=days)

    def _timezone(self, payload: Mapping[str, Any]) -> timezone:
        offset = as_number(payload.get("timezone_offset"))
        if offset is None:
            raise WeatherPayloadError(
                "One Call payload missing numeric 'timezone_offset'."
            )
        try:
            return timezone(timedelta(seconds=int(offset)))
        except ValueError as exc:
            raise WeatherPayloadError(
                f"One Call payload 'timezone_offset' out of range: {offset:g}."
            ) from exc

    @staticmethod
    def _section(payload: Mapping[str, Any], key: str, expected: type) -> Any:
        value = payload.get(key)
        if value is None:
            return None
        if not isinstance(value, expected):
            raise WeatherPayloadError(
                f"One Call payload '{key}' has unexpected type {type(value).__name__}."
            )
        return value

    def _entries(
        self,
        raw: list[Any] | None,
        section: str,
        limit: int | None,
    ) -> list[Mapping[str, Any]]:
        if raw is None:
            return []
        selected = raw if limit is None else raw[:limit]
        entries: list[Mapping[str, Any]] = []
        for index, entry in enumerate(selected):
            if not isinstance(entry, Mapping):
                self.logger.warning(
                    "Skipping %s entry %d of type %s",
                    section,
                    index,
                    type(entry).__name__,
                    extra={"section": section},
                )
                continue
            entries.append(entry)
        return entries

    def _parse_alerts(self, raw_alerts: list[Any]) -> tuple[WeatherAlert, ...]:
        alerts: list[WeatherAlert] = []
        for index, raw in enumerate(raw_alerts):
            if not isinstance(raw, Mapping):
                self.logger.warning(
                    "Skipping alert %d of type %s",
                    index,
                    type(raw).__name__,
                    extra={"section": "alerts"},
                )
                continue
            description = raw.get("description")
            raw_tags = raw.get("tags")
            tags = raw_tags if isinstance(raw_tags, list) else []
            alerts.append(
                WeatherAlert(
                    event=self._as_str(raw.get("event")),
                    description=description if isinstance(description, str) else None,
                    sender_name=self._as_str(raw.get("sender_name")),
                    start=self._number(raw.get("start")),
                    end=self._number(raw.get("end")),
                    tags=tuple(tag for tag in tags if isinstance(tag, str)),
                )
            )
        return tuple(alerts)

    def _normalize_current(
        self,
        raw: Mapping[str, Any],
        tz: timezone,
        alerts: tuple[WeatherAlert, ...],
    ) -> NormalizedCurrent:
        date = self._local_datetime(raw.get("dt"), tz)
        icon = self._icon(raw)
        water = self._precip_amount(raw.get("rain"), "1h") + self._precip_amount(
            raw.get("snow"), "1h"
        )
        return NormalizedCurrent(
            date=date,
            day_of_week=_WEEKDAY_LABELS[date.weekday()],
            wind_speed=self._wind_speed(raw.get("wind_speed")),
            wind_direction=self._number(raw.get("wind_deg")),
            sunrise=self._local_datetime(raw.get("sunrise"), tz),
            sunset=self._local_datetime(raw.get("sunset"), tz),
            temperature=self._temperature(raw.get("temp")),
            weather_icon=icon,
            weather_type=convert_weather_type(icon),
            humidity=self._number(raw.get("humidity")),
            feels_like_temp=self._feels_like(raw.get("feels_like")),
            precipitation=self._precip_display(water),
            alerts=alerts,
        )

    def _normalize_hour(self, raw: Mapping[str, Any], tz: timezone) -> NormalizedHour:
        icon = self._icon(raw)
        return NormalizedHour(
            date=self._local_datetime(raw.get("dt"), tz),
            temperature=self._temperature(raw.get("temp")),
            humidity=self._number(raw.get("humidity")),
            wind_speed=self._wind_speed(raw.get("wind_speed")),
            wind_direction=self._number(raw.get("wind_deg")),
            feels_like_temp=self._feels_like(raw.get("feels_like")),
            weather_icon=icon,
            weather_type=convert_weather_type(icon),
            rain=self._precip_display(self._precip_amount(raw.get("rain"), "1h")),
            snow=self._precip_display(self._precip_amount(raw.get("snow"), "1h")),
        )

    def _normalize_day(self, raw: Mapping[str, Any], tz: timezone) -> NormalizedDay:
        date = self._local_datetime(raw.get("dt"), tz)
        temps = raw.get("temp")
        if not isinstance(temps, Mapping):
            temps = {}
        icon = self._icon(raw)
        # Each day converts its own rain and snow fields.
        return NormalizedDay(
            date=date,
            day_of_week=_WEEKDAY_LABELS[date.weekday()],
            sunrise=self._local_datetime(raw.get("sunrise"), tz),
            sunset=self._local_datetime(raw.get("sunset"), tz),
            min_temperature=self._temperature(temps.get("min")),
            max_temperature=self._temperature(temps.get("max")),
            humidity=self._number(raw.get("humidity")),
            wind_speed=self._wind_speed(raw.get("wind_speed")),
            wind_direction=self._number(raw.get("wind_deg")),
            feels_like_temp=self._feels_like(raw.get("feels_like")),
            weather_icon=icon,
            weather_type=convert_weather_type(icon),
            rain=self._precip_display(self._precip_amount(raw.get("rain"))),
            snow=self._precip_display(self._precip_amount(raw.get("snow"))),
        )

    def _wind_speed(self, value: Any) -> int:
        speed = self._number(value) * self.unit_profile.wind_speed_factor
        return int(round_half_up(self._number(speed)))

    def _temperature(self, value: Any) -> float:
        return round_temperature(self._number(value), self.settings.round_temp)

    def _precip_display(self, amount_mm: float) -> float:
        if self.unit_profile.precipitation_in_inches:
            return mm_to_inches(self._number(amount_mm))
        return self._number(amount_mm)

    @staticmethod
    def _precip_amount(value: Any, key: str | None = None) -> float:
        """Read a water-equivalent amount in mm; absent or invalid is 0."""
        if key is not None and isinstance(value, Mapping):
            value = value.get(key)
        amount = as_number(value)
        if amount is None or amount <= 0:
            return 0.0
        return amount

    @staticmethod
    def _feels_like(value: Any) -> float:
        # Daily samples nest feels-like under per-period keys.
        if isinstance(value, Mapping):
            value = value.get("day")
        return round_half_up(OneCallNormalizer._number(value), 1)

    @staticmethod
    def _icon(raw: Mapping[str, Any]) -> str:
        weather = raw.get("weather")
        if isinstance(weather, list) and weather and isinstance(weather[0], Mapping):
            icon = weather[0].get("icon")
            if isinstance(icon, str):
                return icon.strip()
        return ""

    @staticmethod
    def _local_datetime(value: Any, tz: timezone) -> datetime:
        seconds = OneCallNormalizer._number(value)
        try:
            return datetime.fromtimestamp(seconds, tz)
        except (OverflowError, OSError, ValueError):
            return datetime.fromtimestamp(0, tz)

    @staticmethod
    def _number(value: Any) -> float:
        """Finite float or 0; also catches overflow after unit conversion."""
        number = as_number(value)
        return 0.0 if number is None else number

    @staticmethod
    def _as_str(value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None


def normalize(
    payload: Mapping[str, Any],
    settings: Settings,
    *,
    max_hours: int | None = None,
    max_days: int | None = None,
) -> ForecastModel:
    """Normalize a raw One Call payload with the given settings."""
    return OneCallNormalizer(settings).normalize(
        payload, max_hours=max_hours, max_days=max_days
    )
