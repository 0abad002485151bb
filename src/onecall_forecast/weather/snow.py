"""Snow water-equivalent to snow depth conversion.

The snow-to-water ratio depends on the day's average temperature: colder
air produces lighter, less dense snow, so the same amount of water makes a
deeper snowpack.

    avg temp (C)     ratio
    < -15            20   very light powder
    [-15, -10)       15   light powder
    [-10, -5)        12   dry snow
    [-5, 0)          10   normal snow
    [0, 2)            6   wet snow
    >= 2              5   very wet / slushy

The configured density factor scales the base ratio.
"""

from __future__ import annotations

from .models import NormalizedDay, SnowAmount
from .units import is_imperial, to_celsius

# (exclusive upper bound in C, base ratio), coldest first.
SNOW_RATIO_BANDS: tuple[tuple[float, int], ...] = (
    (-15.0, 20),
    (-10.0, 15),
    (-5.0, 12),
    (0.0, 10),
    (2.0, 6),
)
WARM_SNOW_RATIO = 5


def snow_depth_ratio(temp_celsius: float, density_factor: float = 1.0) -> float:
    """Return the snow:water ratio for an average temperature in Celsius."""
    for upper_bound, ratio in SNOW_RATIO_BANDS:
        if temp_celsius < upper_bound:
            return ratio * density_factor
    return WARM_SNOW_RATIO * density_factor


def snow_depth(
    amount: float,
    min_temp: float,
    max_temp: float,
    *,
    units: str,
    density_factor: float = 1.0,
    enabled: bool = True,
) -> SnowAmount:
    """Convert a water-equivalent snow amount to an estimated depth.

    `amount` is inches for imperial units and mm otherwise; `min_temp` and
    `max_temp` are in the configured unit system. Metric depths are
    reported in cm. With `enabled` false the amount passes through with
    its water-equivalent unit.
    """
    imperial = is_imperial(units)
    if not enabled:
        return SnowAmount(value=amount, unit="in" if imperial else "mm")

    avg_celsius = to_celsius((max_temp + min_temp) / 2, units)
    ratio = snow_depth_ratio(avg_celsius, density_factor)
    if imperial:
        return SnowAmount(value=amount * ratio, unit="in")
    return SnowAmount(value=(amount * ratio) / 10, unit="cm")


def day_snow_depth(
    day: NormalizedDay,
    *,
    units: str,
    density_factor: float = 1.0,
    enabled: bool = True,
) -> SnowAmount:
    """Apply `snow_depth` to a normalized daily record."""
    return snow_depth(
        day.snow,
        day.min_temperature,
        day.max_temperature,
        units=units,
        density_factor=density_factor,
        enabled=enabled,
    )
