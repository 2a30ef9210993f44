"""Weather endpoints consumed by the web client."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from shoresquad.models import (
    CleanupConditions,
    CurrentConditions,
    ForecastDay,
    SuitabilityAssessment,
    WeatherReport,
)
from shoresquad.services import WeatherService, assess_suitability, get_weather_service

router = APIRouter(prefix="/api/v1/weather", tags=["weather"])

logger = logging.getLogger("shoresquad.api.weather")


@router.get("", response_model=WeatherReport, summary="Current conditions and forecast")
async def get_weather(
    service: WeatherService = Depends(get_weather_service),
) -> WeatherReport:
    """Return the latest weather report, refreshing it from upstream."""

    return await service.get_report()


@router.get(
    "/current", response_model=CurrentConditions, summary="Current conditions"
)
async def get_current_conditions(
    service: WeatherService = Depends(get_weather_service),
) -> CurrentConditions:
    report = await service.get_report()
    return report.current


@router.get(
    "/forecast", response_model=list[ForecastDay], summary="Multi-day forecast"
)
async def get_forecast(
    service: WeatherService = Depends(get_weather_service),
) -> list[ForecastDay]:
    report = await service.get_report()
    return report.forecast


@router.post(
    "/suitability",
    response_model=SuitabilityAssessment,
    summary="Rate ad hoc conditions for a cleanup",
)
async def rate_conditions(conditions: CleanupConditions) -> SuitabilityAssessment:
    """Classify caller-supplied conditions without contacting upstream."""

    assessment = assess_suitability(conditions)
    logger.info(
        "Suitability computed: temperature=%s level=%s",
        conditions.temperature,
        assessment.level.value,
    )
    return assessment
