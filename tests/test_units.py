"""Unit resolution and rounding tests."""

from __future__ import annotations

import math

import pytest

from onecall_forecast.weather.units import (
    as_number,
    get_wind_speed_factor,
    inches_to_mm,
    mm_to_inches,
    resolve_units,
    round_half_up,
    round_temperature,
    speed_to_mph,
    to_celsius,
)


@pytest.mark.parametrize(
    ("units", "wind_units", "expected"),
    [
        ("imperial", "mph", 1.0),
        ("imperial", "kmph", 1.609344),
        ("imperial", "ms", 0.44704),
        ("metric", "ms", 1.0),
        ("metric", "kmph", 3.6),
        ("metric", "mph", 2.2369362920544),
        ("standard", "kmph", 3.6),
        ("metric", "knots", 1.943844492440605),
    ],
)
def test_wind_speed_factor(units: str, wind_units: str, expected: float) -> None:
    assert get_wind_speed_factor(units, wind_units) == pytest.approx(expected, rel=1e-6)


@pytest.mark.parametrize(
    ("units", "wind_units"),
    [("metric", "furlongs"), ("imperial", ""), ("bogus", "bogus")],
)
def test_unknown_wind_units_default_to_no_op(units: str, wind_units: str) -> None:
    assert get_wind_speed_factor(units, wind_units) == 1.0


def test_resolve_units_flags_imperial_precipitation() -> None:
    imperial = resolve_units("imperial", "mph")
    metric = resolve_units("metric", "kmph")
    assert imperial.precipitation_in_inches is True
    assert imperial.precipitation_unit == "in"
    assert metric.precipitation_in_inches is False
    assert metric.precipitation_unit == "mm"
    assert metric.wind_speed_factor == pytest.approx(3.6)


@pytest.mark.parametrize("value_mm", [0.0, 0.1, 2.54, 5.0, 123.456])
def test_precipitation_unit_round_trip(value_mm: float) -> None:
    assert inches_to_mm(mm_to_inches(value_mm)) == pytest.approx(value_mm)


def test_speed_to_mph_reverses_display_conversion() -> None:
    assert speed_to_mph(10.0, "metric", "mph") == pytest.approx(10.0)
    assert speed_to_mph(3.6, "metric", "kmph") == pytest.approx(2.2369362920544)
    assert speed_to_mph(12.0, "imperial", "unknown") == pytest.approx(12.0)


def test_to_celsius_per_unit_system() -> None:
    assert to_celsius(-4.0, "metric") == -4.0
    assert to_celsius(32.0, "imperial") == pytest.approx(0.0)
    assert to_celsius(273.15, "standard") == pytest.approx(0.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, None), ("3", None), (True, None), (math.nan, None), (math.inf, None), (4, 4.0)],
)
def test_as_number(value: object, expected: float | None) -> None:
    assert as_number(value) == expected


def test_round_half_up_rounds_ties_away_from_zero() -> None:
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -3.0
    assert round_half_up(0.15, 1) == 0.2
    assert round_half_up(20.94, 1) == 20.9


def test_round_temperature_respects_round_temp() -> None:
    assert round_temperature(21.46, True) == 21.0
    assert round_temperature(21.46, False) == 21.5


def test_round_half_up_handles_extreme_values() -> None:
    assert round_half_up(1e30, 1) == pytest.approx(1e30)
    assert round_half_up(1.7e308) == pytest.approx(1.7e308)
    assert math.isinf(round_half_up(math.inf))
