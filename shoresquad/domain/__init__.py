"""Domain enumerations for the ShoreSquad backend."""

from .measurements import (
    FORECAST_ENDPOINT,
    MEASUREMENT_ENDPOINTS,
    FetchFailureKind,
    MeasurementKind,
)
from .suitability import SuitabilityLevel

__all__ = [
    "FORECAST_ENDPOINT",
    "FetchFailureKind",
    "MEASUREMENT_ENDPOINTS",
    "MeasurementKind",
    "SuitabilityLevel",
]
