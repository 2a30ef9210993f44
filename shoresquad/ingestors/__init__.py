"""Data ingestors for ShoreSquad."""

from .stations import ResolvedReading, resolve_station_reading
from .weather import FetchFailure, FetchResult, FetchSuccess, WeatherIngestor

__all__ = [
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "ResolvedReading",
    "WeatherIngestor",
    "resolve_station_reading",
]
