"""Assemble current conditions and forecasts from upstream weather data."""

from __future__ import annotations

import asyncio
from datetime import date, datetime, timezone
import logging
from typing import Callable, Optional, Sequence

from shoresquad.config import MEASUREMENT_DEFAULTS, ConditionThresholds, settings
from shoresquad.domain import FetchFailureKind, MeasurementKind
from shoresquad.ingestors import (
    FetchFailure,
    WeatherIngestor,
    resolve_station_reading,
)
from shoresquad.models.suitability import CleanupConditions
from shoresquad.models.weather import (
    CurrentConditions,
    ForecastDay,
    StationReading,
    UpstreamForecastDay,
    WeatherReport,
)
from shoresquad.services.fallback import (
    day_label,
    offline_current_conditions,
    offline_forecast,
)
from shoresquad.services.suitability import assess_suitability
from shoresquad.services.symbols import CLEAR_SYMBOL, forecast_symbol

logger = logging.getLogger("shoresquad.services.weather_aggregator")

KNOTS_TO_KMH = 1.852

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def degrees_to_compass(degrees: float) -> str:
    index = int((degrees % 360) / 22.5 + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def condition_symbol(
    temperature: float,
    humidity: float,
    wind_speed: float,
    thresholds: ConditionThresholds | None = None,
) -> str:
    limits = thresholds or settings.conditions
    if humidity > limits.humid and temperature <= limits.rain_max_temperature:
        return "🌧️"
    if humidity > limits.humid:
        return "☁️"
    if temperature > limits.hot:
        return "🌞"
    if wind_speed > limits.windy:
        return "💨"
    return CLEAR_SYMBOL


def condition_description(
    temperature: float,
    humidity: float,
    wind_speed: float,
    thresholds: ConditionThresholds | None = None,
) -> str:
    limits = thresholds or settings.conditions
    if temperature > limits.hot:
        return "Hot"
    if temperature < limits.cool:
        return "Cool"
    if humidity > limits.humid:
        return "Humid"
    if wind_speed > limits.windy:
        return "Windy"
    return "Pleasant"


class WeatherAggregator:
    """Build presentation-ready weather, degrading to offline data on failure."""

    def __init__(
        self,
        ingestor: Optional[WeatherIngestor] = None,
        *,
        preferred_stations: Optional[Sequence[str]] = None,
        location_label: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.ingestor = ingestor or WeatherIngestor()
        self.preferred_stations = tuple(preferred_stations or settings.preferred_stations)
        self.location_label = location_label or settings.weather_location_label
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def load_current(self) -> CurrentConditions:
        kinds = list(MeasurementKind)
        async with self.ingestor.client() as client:
            results = await asyncio.gather(
                *(self.ingestor.fetch_measurement(client, kind) for kind in kinds)
            )

        now = self.clock()
        failures = [
            (kind, result)
            for kind, result in zip(kinds, results)
            if isinstance(result, FetchFailure)
        ]
        if failures:
            for kind, failure in failures:
                logger.warning(
                    "Current %s unavailable (%s): %s",
                    kind.value,
                    failure.kind.value,
                    failure.detail,
                )
            logger.warning("Serving offline current conditions")
            return offline_current_conditions(now)

        values = {
            kind: self._resolve(kind, result.value)
            for kind, result in zip(kinds, results)
        }
        temperature = values[MeasurementKind.TEMPERATURE]
        humidity = values[MeasurementKind.HUMIDITY]
        wind_speed = values[MeasurementKind.WIND_SPEED]
        uv_index = values[MeasurementKind.UV_INDEX]

        assessment = assess_suitability(
            CleanupConditions(
                temperature=temperature,
                humidity=humidity,
                wind_speed=wind_speed,
                uv_index=uv_index,
            )
        )
        conditions = CurrentConditions(
            temperature=temperature,
            humidity=humidity,
            wind_speed=wind_speed,
            wind_direction=degrees_to_compass(values[MeasurementKind.WIND_DIRECTION]),
            uv_index=uv_index,
            condition_symbol=condition_symbol(temperature, humidity, wind_speed),
            description=condition_description(temperature, humidity, wind_speed),
            location_label=self.location_label,
            observed_at=now,
            is_offline=False,
            suitability=assessment.level,
            suitability_message=assessment.message,
        )
        logger.debug("Current conditions assembled: %s", conditions)
        return conditions

    async def load_forecast(self, today: Optional[date] = None) -> list[ForecastDay]:
        async with self.ingestor.client() as client:
            result = await self.ingestor.fetch_forecast(client)

        if isinstance(result, FetchFailure):
            logger.warning(
                "Forecast unavailable (%s): %s; serving offline forecast",
                result.kind.value,
                result.detail,
            )
            return offline_forecast(today or self.clock().date())

        return [self._forecast_day(index, entry) for index, entry in enumerate(result.value)]

    def _resolve(self, kind: MeasurementKind, readings: list[StationReading]) -> float:
        resolved = resolve_station_reading(readings, self.preferred_stations)
        if resolved is None:
            default = MEASUREMENT_DEFAULTS[kind.value]
            logger.warning(
                "%s for %s; using default %s",
                FetchFailureKind.NO_STATION_DATA.value,
                kind.value,
                default,
            )
            return default

        logger.debug("Resolved %s from station %s", kind.value, resolved.station_id)
        if kind is MeasurementKind.WIND_SPEED:
            return round(resolved.value * KNOTS_TO_KMH, 1)
        return resolved.value

    def _forecast_day(self, index: int, entry: UpstreamForecastDay) -> ForecastDay:
        humidity_summary, humidity_high = _humidity_summary(entry)
        wind_summary, wind_high = _wind_summary(entry)
        level = assess_suitability(
            CleanupConditions(
                temperature=entry.temperature.high,
                humidity=humidity_high,
                wind_speed=wind_high,
                forecast_text=entry.forecast,
            )
        ).level

        return ForecastDay(
            label=day_label(index, entry.date),
            date=entry.date,
            temperature_high=entry.temperature.high,
            temperature_low=entry.temperature.low,
            condition_text=entry.forecast,
            condition_symbol=forecast_symbol(entry.forecast),
            wind_summary=wind_summary,
            humidity_summary=humidity_summary,
            suitability=level,
        )


def _humidity_summary(entry: UpstreamForecastDay) -> tuple[Optional[str], float]:
    rh = entry.relative_humidity
    if rh is None or rh.high is None:
        return None, MEASUREMENT_DEFAULTS["humidity"]
    if rh.low is None:
        return f"up to {rh.high:.0f}%", rh.high
    return f"{rh.low:.0f}-{rh.high:.0f}%", rh.high


def _wind_summary(entry: UpstreamForecastDay) -> tuple[str, float]:
    wind = entry.wind
    direction = (wind.direction if wind else None) or "Variable"
    speed = wind.speed if wind else None
    if speed is None or speed.high is None:
        return direction, MEASUREMENT_DEFAULTS["wind_speed"]
    if speed.low is None:
        return f"{direction} up to {speed.high:.0f} km/h", speed.high
    return f"{direction} {speed.low:.0f}-{speed.high:.0f} km/h", speed.high


class WeatherService:
    """Own the latest weather report across overlapping refresh cycles.

    Each refresh takes a generation number when it starts. A finished
    refresh is committed only if no newer generation has already been
    committed, so a slow stale load never replaces fresher data.
    """

    def __init__(self, aggregator: Optional[WeatherAggregator] = None) -> None:
        self.aggregator = aggregator or WeatherAggregator()
        self._generation = 0
        self._committed_generation = 0
        self._latest: Optional[WeatherReport] = None

    @property
    def latest(self) -> Optional[WeatherReport]:
        return self._latest

    async def refresh(self) -> WeatherReport:
        self._generation += 1
        generation = self._generation

        current, forecast = await asyncio.gather(
            self.aggregator.load_current(), self.aggregator.load_forecast()
        )
        report = WeatherReport(current=current, forecast=forecast, generation=generation)

        if generation <= self._committed_generation and self._latest is not None:
            logger.info(
                "Discarding stale weather generation %s (latest is %s)",
                generation,
                self._committed_generation,
            )
            return self._latest

        self._committed_generation = generation
        self._latest = report
        logger.info(
            "Weather generation %s committed (offline=%s, forecast_days=%s)",
            generation,
            current.is_offline,
            len(forecast),
        )
        return report

    async def get_report(self) -> WeatherReport:
        """Return the latest report, refreshing first if needed."""

        if self._latest is None or settings.refresh_on_request:
            return await self.refresh()
        return self._latest


weather_service = WeatherService()


def get_weather_service() -> WeatherService:
    """Dependency hook returning the process-wide weather service."""

    return weather_service


__all__ = [
    "WeatherAggregator",
    "WeatherService",
    "condition_description",
    "condition_symbol",
    "degrees_to_compass",
    "forecast_symbol",
    "get_weather_service",
    "weather_service",
]
