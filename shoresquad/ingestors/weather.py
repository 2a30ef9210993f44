"""Weather ingestion from the government environment API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Any, Generic, TypeVar, Union

import httpx
from pydantic import ValidationError

from shoresquad.config import settings
from shoresquad.domain import (
    FORECAST_ENDPOINT,
    MEASUREMENT_ENDPOINTS,
    FetchFailureKind,
    MeasurementKind,
)
from shoresquad.models.weather import (
    ForecastPayload,
    MeasurementPayload,
    StationReading,
    UpstreamForecastDay,
)

logger = logging.getLogger("shoresquad.ingestors.weather")

T = TypeVar("T")


@dataclass(frozen=True)
class FetchSuccess(Generic[T]):
    value: T


@dataclass(frozen=True)
class FetchFailure:
    kind: FetchFailureKind
    detail: str


FetchResult = Union[FetchSuccess[T], FetchFailure]


class WeatherIngestor:
    """Fetch station readings and forecasts, reporting failures as values.

    Each fetch returns either ``FetchSuccess`` or ``FetchFailure``; transport
    errors, non-success statuses and payloads that fail validation never
    raise out of this class.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.weather_base_url
        self.timeout = timeout or settings.weather_timeout
        self.transport = transport

    def client(self) -> httpx.AsyncClient:
        """Return a client scoped to one load cycle; use it with ``async with``."""

        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    async def fetch_measurement(
        self, client: httpx.AsyncClient, kind: MeasurementKind
    ) -> FetchResult[list[StationReading]]:
        path = MEASUREMENT_ENDPOINTS[kind]
        result = await self._get_json(client, path)
        if isinstance(result, FetchFailure):
            return result

        try:
            payload = MeasurementPayload.model_validate(result.value)
        except ValidationError as exc:
            logger.warning("Malformed %s payload: %s", kind.value, exc)
            return FetchFailure(FetchFailureKind.MALFORMED_PAYLOAD, str(exc))

        readings = payload.items[0].station_readings()
        logger.debug("Fetched %s readings for %s", len(readings), kind.value)
        return FetchSuccess(readings)

    async def fetch_forecast(
        self, client: httpx.AsyncClient
    ) -> FetchResult[list[UpstreamForecastDay]]:
        result = await self._get_json(client, FORECAST_ENDPOINT)
        if isinstance(result, FetchFailure):
            return result

        try:
            payload = ForecastPayload.model_validate(result.value)
        except ValidationError as exc:
            logger.warning("Malformed forecast payload: %s", exc)
            return FetchFailure(FetchFailureKind.MALFORMED_PAYLOAD, str(exc))

        forecasts = payload.items[0].forecasts
        if not forecasts:
            logger.warning("Forecast payload contained no days")
            return FetchFailure(FetchFailureKind.MALFORMED_PAYLOAD, "empty forecasts")

        logger.debug("Fetched %s forecast days", len(forecasts))
        return FetchSuccess(forecasts)

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> FetchResult[Any]:
        try:
            response = await asyncio.wait_for(client.get(path), timeout=self.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning("Weather request to %s timed out: %s", path, exc)
            return FetchFailure(FetchFailureKind.NETWORK_FAILURE, f"timeout: {path}")
        except httpx.RequestError as exc:
            logger.warning("Weather request to %s failed: %s", path, exc)
            return FetchFailure(FetchFailureKind.NETWORK_FAILURE, str(exc))

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Weather service returned error: path=%s status=%s",
                path,
                exc.response.status_code,
            )
            return FetchFailure(
                FetchFailureKind.UPSTREAM_ERROR, f"HTTP {exc.response.status_code}"
            )

        try:
            return FetchSuccess(response.json())
        except ValueError as exc:
            logger.warning("Failed to parse weather JSON from %s: %s", path, exc)
            return FetchFailure(FetchFailureKind.MALFORMED_PAYLOAD, str(exc))


__all__ = ["FetchFailure", "FetchResult", "FetchSuccess", "WeatherIngestor"]
