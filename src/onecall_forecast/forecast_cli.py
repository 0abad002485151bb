"""CLI: normalize a saved One Call payload and preview the forecast."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from .config import Settings, load_settings
from .exceptions import ConfigError, WeatherPayloadError
from .log_setup import setup_logger
from .weather.alerts import active_alerts
from .weather.conditions import cardinal_wind_direction, ordinal_label
from .weather.display import (
    alert_detail_lines,
    alert_summary,
    current_wind_display,
    display_temperature,
    format_day_snow,
    format_precipitation,
    has_any,
    temperature_label,
)
from .weather.models import ForecastModel, NormalizedCurrent
from .weather.normalizer import OneCallNormalizer


def parse_args() -> argparse.Namespace:
    """Parse forecast preview CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Normalize a saved OpenWeather One Call payload and print a preview."
    )
    parser.add_argument("payload", type=Path, help="Path to a One Call JSON payload.")
    parser.add_argument(
        "--max-hours",
        type=int,
        default=None,
        help="Number of hourly samples to show.",
    )
    parser.add_argument(
        "--max-days",
        type=int,
        default=None,
        help="Number of daily samples to show.",
    )
    parser.add_argument(
        "--now",
        type=float,
        default=None,
        help="Epoch seconds used as 'now' for alert filtering.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the normalized forecast as JSON instead of tables.",
    )
    return parser.parse_args()


def _load_payload(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise WeatherPayloadError(f"Failed reading payload file {path}: {exc}") from exc
    except ValueError as exc:
        raise WeatherPayloadError(f"Payload file {path} is not valid JSON: {exc}") from exc


def _print_current(
    console: Console,
    current: NormalizedCurrent,
    settings: Settings,
    degree: str,
    now: float | None,
) -> None:
    temperature = display_temperature(current.temperature, settings.temp_units)
    feels_like = display_temperature(current.feels_like_temp, settings.temp_units)
    precip, precip_unit = format_precipitation(current.precipitation, settings)
    console.print(
        f"{current.day_of_week} {current.date:%H:%M} {current.weather_type} "
        f"temp={temperature:g}{degree} feels={feels_like:g}{degree} "
        f"wind={current_wind_display(current, settings)} "
        f"{cardinal_wind_direction(current.wind_direction)} "
        f"humidity={current.humidity:g}% precip={precip} {precip_unit}"
    )

    tz = current.date.tzinfo
    for alert in active_alerts(current, settings, now=now):
        console.print(f"[bold red]ALERT[/bold red] {alert_summary(alert, tz)}")
        for line in alert_detail_lines(alert, tz):
            console.print(f"  {line}", markup=False)


def _print_forecast(
    console: Console,
    forecast: ForecastModel,
    settings: Settings,
    max_hours: int,
    max_days: int,
    now: float | None,
) -> None:
    degree = temperature_label(settings.units, settings.scale)
    if forecast.current:
        _print_current(console, forecast.current[0], settings, degree, now)
    else:
        console.print("No current conditions in payload.")

    if forecast.hours:
        table = Table(title="Hourly Forecast")
        table.add_column("Time")
        table.add_column("Type")
        table.add_column("Temp")
        table.add_column("Wind")
        table.add_column("Rain")
        table.add_column("Snow")
        for hour in forecast.hours[:max_hours]:
            rain, rain_unit = format_precipitation(hour.rain, settings)
            snow, snow_unit = format_precipitation(hour.snow, settings)
            table.add_row(
                f"{hour.date:%a %H:%M}",
                str(hour.weather_type),
                f"{display_temperature(hour.temperature, settings.temp_units):g}{degree}",
                f"{hour.wind_speed} {ordinal_label(hour.wind_direction, settings.label_ordinals)}",
                f"{rain} {rain_unit}",
                f"{snow} {snow_unit}",
            )
        console.print(table)

    if forecast.days:
        shown = forecast.days[:max_days]
        any_rain = has_any(shown, "rain", max_days)
        any_snow = has_any(shown, "snow", max_days)
        table = Table(title="Daily Forecast")
        table.add_column("Day")
        table.add_column("Type")
        table.add_column("Max")
        table.add_column("Min")
        table.add_column("Wind")
        table.add_column("Rain")
        table.add_column("Snow")
        for day in shown:
            rain_cell = "-" if any_rain else ""
            if day.rain > 0:
                rain_cell = " ".join(format_precipitation(day.rain, settings))
            snow_cell = "-" if any_snow else ""
            if day.snow > 0:
                snow_cell = " ".join(format_day_snow(day, settings))
            table.add_row(
                day.day_of_week,
                str(day.weather_type),
                f"{display_temperature(day.max_temperature, settings.temp_units):g}{degree}",
                f"{display_temperature(day.min_temperature, settings.temp_units):g}{degree}",
                f"{day.wind_speed} {ordinal_label(day.wind_direction, settings.label_ordinals)}",
                rain_cell,
                snow_cell,
            )
        console.print(table)


def main() -> int:
    """Run the forecast preview flow."""
    args = parse_args()
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    logger.info("Loaded settings: %s", settings.safe_summary())

    max_hours = args.max_hours if args.max_hours is not None else settings.max_hourlies_to_show
    max_days = args.max_days if args.max_days is not None else settings.max_dailies_to_show
    log_context = {"payload_path": str(args.payload)}
    try:
        if max_hours <= 0 or max_days <= 0:
            raise WeatherPayloadError("--max-hours and --max-days must be > 0 when provided.")
        payload = _load_payload(args.payload)
        normalizer = OneCallNormalizer(settings, logger=logger)
        forecast = normalizer.normalize(payload, max_hours=max_hours, max_days=max_days)
        logger.info(
            "Normalized payload (hours=%d days=%d)",
            len(forecast.hours),
            len(forecast.days),
            extra=log_context,
        )
        if args.json:
            console.print_json(forecast.model_dump_json())
        else:
            _print_forecast(console, forecast, settings, max_hours, max_days, args.now)
    except WeatherPayloadError as exc:
        logger.error("Forecast normalization failure: %s", exc, extra=log_context)
        return 4
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        logger.exception("Unexpected forecast CLI failure: %s", exc, extra=log_context)
        return 99
    return 0


if __name__ == "__main__":
    sys.exit(main())
