"""Service-layer helpers for the ShoreSquad backend."""

from .events import find_nearby_events, haversine_km, list_events
from .fallback import offline_current_conditions, offline_forecast
from .suitability import assess_suitability, suitability
from .weather_aggregator import (
    WeatherAggregator,
    WeatherService,
    get_weather_service,
    weather_service,
)

__all__ = [
    "WeatherAggregator",
    "WeatherService",
    "assess_suitability",
    "find_nearby_events",
    "get_weather_service",
    "haversine_km",
    "list_events",
    "offline_current_conditions",
    "offline_forecast",
    "suitability",
    "weather_service",
]
