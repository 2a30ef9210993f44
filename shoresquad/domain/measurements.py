"""Measurement kinds and fetch failure categories for weather ingestion."""

from __future__ import annotations

from enum import Enum


class MeasurementKind(str, Enum):
    """Environmental readings fetched for current conditions."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND_SPEED = "wind_speed"
    WIND_DIRECTION = "wind_direction"
    UV_INDEX = "uv_index"


# Upstream endpoint path for each measurement kind, relative to the base URL.
MEASUREMENT_ENDPOINTS: dict[MeasurementKind, str] = {
    MeasurementKind.TEMPERATURE: "/air-temperature",
    MeasurementKind.HUMIDITY: "/relative-humidity",
    MeasurementKind.WIND_SPEED: "/wind-speed",
    MeasurementKind.WIND_DIRECTION: "/wind-direction",
    MeasurementKind.UV_INDEX: "/uv-index",
}

FORECAST_ENDPOINT = "/4-day-weather-forecast"


class FetchFailureKind(str, Enum):
    """Why an upstream fetch could not produce usable data."""

    NETWORK_FAILURE = "network_failure"
    UPSTREAM_ERROR = "upstream_error"
    MALFORMED_PAYLOAD = "malformed_payload"
    NO_STATION_DATA = "no_station_data"


__all__ = [
    "FORECAST_ENDPOINT",
    "FetchFailureKind",
    "MEASUREMENT_ENDPOINTS",
    "MeasurementKind",
]
