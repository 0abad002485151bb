"""Unit resolution and rounding shared by every normalization stage."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pydantic import BaseModel, ConfigDict

MM_PER_INCH = 25.4
KMH_PER_MPH = 1.609344
MPH_PER_MS = 2.2369362920544
# Digits needed to hold any finite float to the left of the decimal point.
_ROUNDING_PRECISION = 320

# Provider speeds are mph for imperial requests and m/s otherwise.
_SPEED_FACTORS_FROM_MPH: dict[str, float] = {
    "mph": 1.0,
    "kmph": KMH_PER_MPH,
    "ms": 1 / MPH_PER_MS,
    "knots": 0.868976241900648,
}
_SPEED_FACTORS_FROM_MS: dict[str, float] = {
    "ms": 1.0,
    "kmph": 3.6,
    "mph": MPH_PER_MS,
    "knots": 1.943844492440605,
}


class UnitProfile(BaseModel):
    """Conversion factors derived once from the configured unit system."""

    model_config = ConfigDict(frozen=True)

    units: str
    wind_units: str
    wind_speed_factor: float
    precipitation_in_inches: bool

    @property
    def precipitation_unit(self) -> str:
        return "in" if self.precipitation_in_inches else "mm"


def is_imperial(units: str) -> bool:
    return units == "imperial"


def get_wind_speed_factor(units: str, wind_units: str) -> float:
    """Return the multiplier from provider speed units to the display unit.

    Unknown unit combinations fall back to 1 (no conversion).
    """
    table = _SPEED_FACTORS_FROM_MPH if is_imperial(units) else _SPEED_FACTORS_FROM_MS
    return table.get(wind_units, 1.0)


def resolve_units(units: str, wind_units: str) -> UnitProfile:
    """Resolve conversion factors for a `units`/`windUnits` combination."""
    return UnitProfile(
        units=units,
        wind_units=wind_units,
        wind_speed_factor=get_wind_speed_factor(units, wind_units),
        precipitation_in_inches=is_imperial(units),
    )


def speed_to_mph(speed: float, units: str, wind_units: str) -> float:
    """Convert an already-displayed wind speed back to mph."""
    factor = get_wind_speed_factor(units, wind_units)
    native = speed / factor
    if is_imperial(units):
        return native
    return native * MPH_PER_MS


def mm_to_inches(value: float) -> float:
    return value / MM_PER_INCH


def inches_to_mm(value: float) -> float:
    return value * MM_PER_INCH


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def to_celsius(value: float, units: str) -> float:
    """Convert a temperature in the configured unit system to Celsius."""
    if is_imperial(units):
        return fahrenheit_to_celsius(value)
    if units == "metric":
        return value
    return value - 273.15


def as_number(value: Any) -> float | None:
    """Return a finite float, or None for anything else (bools included)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float, places: int = 0) -> float:
    """Round ties away from zero, the way display strings are formatted.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    # Large floats need more than the default 28 significant digits.
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION + places
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_temperature(value: float, round_temp: bool) -> float:
    """Round to an integer when `round_temp` is set, else to one decimal."""
    return round_half_up(value, 0 if round_temp else 1)
