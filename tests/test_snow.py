"""Snow depth ratio and conversion tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from onecall_forecast.weather.conditions import WeatherType
from onecall_forecast.weather.models import NormalizedDay
from onecall_forecast.weather.snow import day_snow_depth, snow_depth, snow_depth_ratio


@pytest.mark.parametrize(
    ("temp_c", "ratio"),
    [
        (-30.0, 20),
        (-15.01, 20),
        (-15.0, 15),
        (-12.0, 15),
        (-10.0, 12),
        (-5.0, 10),
        (-0.5, 10),
        (0.0, 6),
        (1.99, 6),
        (2.0, 5),
        (15.0, 5),
    ],
)
def test_snow_depth_ratio_bands(temp_c: float, ratio: int) -> None:
    assert snow_depth_ratio(temp_c) == ratio


def test_snow_depth_ratio_is_non_increasing_with_temperature() -> None:
    temps = [t / 2 for t in range(-60, 20)]
    ratios = [snow_depth_ratio(t) for t in temps]
    assert all(a >= b for a, b in zip(ratios, ratios[1:]))
    assert set(ratios) == {20, 15, 12, 10, 6, 5}


def test_density_factor_scales_ratio() -> None:
    assert snow_depth_ratio(-7.0, density_factor=1.5) == pytest.approx(18.0)
    assert snow_depth_ratio(5.0, density_factor=0.5) == pytest.approx(2.5)


def test_metric_snow_depth_is_reported_in_cm() -> None:
    result = snow_depth(5.0, -20.0, -12.0, units="metric")
    assert result.value == pytest.approx(10.0)
    assert result.unit == "cm"


def test_imperial_snow_depth_uses_fahrenheit_average() -> None:
    # Average 3.2F is -16C.
    result = snow_depth(0.5, -4.0, 10.4, units="imperial")
    assert result.value == pytest.approx(10.0)
    assert result.unit == "in"


def test_standard_units_treat_temperatures_as_kelvin() -> None:
    result = snow_depth(4.0, 273.65, 274.65, units="standard")
    assert result.value == pytest.approx(4.0 * 6 / 10)
    assert result.unit == "cm"


@pytest.mark.parametrize(
    ("units", "unit"),
    [("metric", "mm"), ("imperial", "in"), ("standard", "mm")],
)
def test_disabled_conversion_passes_amount_through(units: str, unit: str) -> None:
    result = snow_depth(3.3, -30.0, -25.0, units=units, enabled=False)
    assert result.value == 3.3
    assert result.unit == unit


def test_day_snow_depth_reads_normalized_day() -> None:
    day = NormalizedDay(
        date=datetime(2026, 1, 10, tzinfo=UTC),
        day_of_week="Sat",
        sunrise=datetime(2026, 1, 10, 7, tzinfo=UTC),
        sunset=datetime(2026, 1, 10, 17, tzinfo=UTC),
        min_temperature=-8.0,
        max_temperature=-4.0,
        humidity=80,
        wind_speed=3,
        wind_direction=90,
        feels_like_temp=-10.0,
        weather_icon="13d",
        weather_type=WeatherType.SNOW,
        snow=2.0,
    )
    result = day_snow_depth(day, units="metric", density_factor=1.0)
    assert result.value == pytest.approx(2.0 * 12 / 10)
    assert result.unit == "cm"
