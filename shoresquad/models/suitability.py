"""Request and response models for cleanup suitability classification."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from shoresquad.domain import SuitabilityLevel


class CleanupConditions(BaseModel):
    """Conditions fed into the suitability ladder."""

    temperature: float = Field(..., description="Air temperature in Celsius")
    humidity: float = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., description="Wind speed in km/h")
    uv_index: Optional[float] = Field(
        default=None, description="UV index, when known",
    )
    forecast_text: Optional[str] = Field(
        default=None, description="Free-text forecast wording, when known",
    )


class SuitabilityAssessment(BaseModel):
    """Rating and short advice for a set of conditions."""

    level: SuitabilityLevel
    message: str
