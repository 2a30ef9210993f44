"""Configuration settings for the ShoreSquad backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger("shoresquad.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _get_station_list(env_var: str, default: str) -> tuple[str, ...]:
    """Parse a comma-separated list of station identifiers, keeping order."""

    raw = os.getenv(env_var, default)
    stations = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not stations:
        logger.warning("%s is empty; falling back to %s", env_var, default)
        stations = tuple(part.strip() for part in default.split(","))
    return stations


@dataclass(frozen=True)
class SuitabilityThresholds:
    """Bounds used by the cleanup suitability ladder (Celsius, km/h, %)."""

    max_temperature: float = 35.0
    max_uv_index: float = 9.0
    max_wind_speed: float = 25.0
    min_temperature: float = 20.0
    max_humidity: float = 90.0
    perfect_temperature_low: float = 24.0
    perfect_temperature_high: float = 32.0
    perfect_max_wind_speed: float = 20.0
    perfect_max_humidity: float = 85.0


@dataclass(frozen=True)
class ConditionThresholds:
    """Bounds used to derive the current-conditions symbol and description."""

    humid: float = 80.0
    rain_max_temperature: float = 28.0
    hot: float = 32.0
    cool: float = 24.0
    windy: float = 20.0


# Values used when every station reports null for a measurement kind.
MEASUREMENT_DEFAULTS: dict[str, float] = {
    "temperature": 28.0,
    "humidity": 75.0,
    "wind_speed": 10.0,
    "wind_direction": 45.0,
    "uv_index": 6.0,
}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    shoresquad_env: str = os.getenv("SHORESQUAD_ENV", "local")
    log_level: str = os.getenv("SHORESQUAD_LOG_LEVEL", "INFO")

    # Weather ingestion
    weather_base_url: str = os.getenv(
        "WEATHER_BASE_URL", "https://api.data.gov.sg/v1/environment"
    )
    weather_timeout: float = float(os.getenv("WEATHER_TIMEOUT", "10.0"))
    weather_location_label: str = os.getenv("WEATHER_LOCATION_LABEL", "Singapore")
    preferred_stations: tuple[str, ...] = _get_station_list(
        "WEATHER_PREFERRED_STATIONS", "S107,S24,S104,S60,S43"
    )
    refresh_on_request: bool = _get_bool("WEATHER_REFRESH_ON_REQUEST", default=True)

    suitability: SuitabilityThresholds = field(default_factory=SuitabilityThresholds)
    conditions: ConditionThresholds = field(default_factory=ConditionThresholds)

    # Cleanup events
    events_default_radius_km: float = float(os.getenv("EVENTS_DEFAULT_RADIUS_KM", "50.0"))


settings = Settings()

__all__ = [
    "ConditionThresholds",
    "MEASUREMENT_DEFAULTS",
    "Settings",
    "SuitabilityThresholds",
    "settings",
]
