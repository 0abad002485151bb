"""Typed settings for the One Call forecast normalizer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

DEFAULT_LABEL_ORDINALS: tuple[str, ...] = (
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

# MagicMirror-style option keys accepted by Settings.from_module_config.
MODULE_OPTION_FIELDS: dict[str, str] = {
    "units": "units",
    "windUnits": "wind_units",
    "tempUnits": "temp_units",
    "roundTemp": "round_temp",
    "convertSnowToDepth": "convert_snow_to_depth",
    "snowDensityFactor": "snow_density_factor",
    "showAlerts": "show_alerts",
    "showAlertsHours": "show_alerts_hours",
    "useBeaufortInCurrent": "use_beaufort_in_current",
    "decimalSymbol": "decimal_symbol",
    "scale": "scale",
    "maxHourliesToShow": "max_hourlies_to_show",
    "maxDailiesToShow": "max_dailies_to_show",
    "labelOrdinals": "label_ordinals",
}


class Settings(BaseSettings):
    """Normalizer options loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    units: str = Field(default="metric", alias="ONECALL_UNITS")
    wind_units: str = Field(default="mph", alias="ONECALL_WIND_UNITS")
    temp_units: Literal["c", "f"] = Field(default="c", alias="ONECALL_TEMP_UNITS")
    round_temp: bool = Field(default=True, alias="ONECALL_ROUND_TEMP")
    convert_snow_to_depth: bool = Field(default=True, alias="ONECALL_CONVERT_SNOW_TO_DEPTH")
    snow_density_factor: float = Field(default=1.0, alias="ONECALL_SNOW_DENSITY_FACTOR")
    show_alerts: bool = Field(default=True, alias="ONECALL_SHOW_ALERTS")
    show_alerts_hours: float = Field(default=12, alias="ONECALL_SHOW_ALERTS_HOURS")
    use_beaufort_in_current: bool = Field(
        default=False,
        alias="ONECALL_USE_BEAUFORT_IN_CURRENT",
    )
    decimal_symbol: str = Field(default=".", alias="ONECALL_DECIMAL_SYMBOL")
    scale: bool = Field(default=False, alias="ONECALL_SCALE")
    max_hourlies_to_show: int = Field(default=30, alias="ONECALL_MAX_HOURLIES_TO_SHOW")
    max_dailies_to_show: int = Field(default=6, alias="ONECALL_MAX_DAILIES_TO_SHOW")
    label_ordinals: tuple[str, ...] = Field(
        default=DEFAULT_LABEL_ORDINALS,
        alias="ONECALL_LABEL_ORDINALS",
    )

    @field_validator("units", "wind_units", "temp_units", mode="before")
    @classmethod
    def normalize_unit_names(cls, value: Any) -> Any:
        """Unit names are matched case-insensitively."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("decimal_symbol", mode="before")
    @classmethod
    def default_blank_decimal_symbol(cls, value: Any) -> Any:
        """Treat an empty or blank decimal symbol as '.'."""
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return "."
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate numeric options that the pipeline divides or windows by."""
        if self.snow_density_factor <= 0:
            raise ValueError("ONECALL_SNOW_DENSITY_FACTOR must be > 0.")
        if self.show_alerts_hours < 0:
            raise ValueError("ONECALL_SHOW_ALERTS_HOURS must be >= 0.")
        if self.max_hourlies_to_show <= 0:
            raise ValueError("ONECALL_MAX_HOURLIES_TO_SHOW must be > 0.")
        if self.max_dailies_to_show <= 0:
            raise ValueError("ONECALL_MAX_DAILIES_TO_SHOW must be > 0.")
        if len(self.label_ordinals) != 16:
            raise ValueError("ONECALL_LABEL_ORDINALS must contain exactly 16 labels.")
        return self

    @classmethod
    def from_module_config(cls, options: Mapping[str, Any]) -> Settings:
        """Build settings from a camelCase module option mapping.

        Unknown keys are ignored. Options not present keep their defaults;
        the process environment is not consulted.
        """
        values = {
            field_name: options[key]
            for key, field_name in MODULE_OPTION_FIELDS.items()
            if key in options
        }
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid module options: {exc}") from exc

    def safe_summary(self) -> dict[str, Any]:
        """Return the option values as a plain dict for logging."""
        return {
            "units": self.units,
            "wind_units": self.wind_units,
            "temp_units": self.temp_units,
            "round_temp": self.round_temp,
            "convert_snow_to_depth": self.convert_snow_to_depth,
            "snow_density_factor": self.snow_density_factor,
            "show_alerts": self.show_alerts,
            "show_alerts_hours": self.show_alerts_hours,
            "use_beaufort_in_current": self.use_beaufort_in_current,
            "max_hourlies_to_show": self.max_hourlies_to_show,
            "max_dailies_to_show": self.max_dailies_to_show,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
