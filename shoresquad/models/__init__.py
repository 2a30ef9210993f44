"""Pydantic models for the ShoreSquad backend."""

from .events import CleanupEvent, NearbyEvent
from .suitability import CleanupConditions, SuitabilityAssessment
from .weather import (
    CurrentConditions,
    ForecastDay,
    ForecastPayload,
    MeasurementPayload,
    StationReading,
    WeatherReport,
)

__all__ = [
    "CleanupConditions",
    "CleanupEvent",
    "CurrentConditions",
    "ForecastDay",
    "ForecastPayload",
    "MeasurementPayload",
    "NearbyEvent",
    "StationReading",
    "SuitabilityAssessment",
    "WeatherReport",
]
