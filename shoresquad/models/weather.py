"""Weather data models: upstream payloads and presentation records."""

from __future__ import annotations

from datetime import date as date_type, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shoresquad.domain import SuitabilityLevel

# Station id assigned to readings the upstream reports without one (UV index).
NATIONAL_STATION_ID = "national"


class StationReading(BaseModel):
    """A single station's reading for one measurement kind."""

    station_id: str = Field(..., description="Short code of the reporting station")
    value: Optional[float] = Field(
        default=None, description="Measured value, null when the station has no data",
    )


class IndexEntry(BaseModel):
    """Station-less reading, as reported by the UV index endpoint."""

    value: Optional[float] = None
    timestamp: Optional[datetime] = None


class MeasurementItem(BaseModel):
    """One reading snapshot; must carry ``readings`` or ``index``."""

    timestamp: Optional[datetime] = None
    readings: Optional[list[StationReading]] = None
    index: Optional[list[IndexEntry]] = None

    @model_validator(mode="after")
    def _require_readings(self) -> "MeasurementItem":
        if self.readings is None and self.index is None:
            raise ValueError("item has neither readings nor index")
        return self

    def station_readings(self) -> list[StationReading]:
        if self.readings is not None:
            return list(self.readings)
        return [
            StationReading(station_id=NATIONAL_STATION_ID, value=entry.value)
            for entry in self.index or []
        ]


class MeasurementPayload(BaseModel):
    """Envelope returned by a per-measurement endpoint."""

    items: list[MeasurementItem] = Field(..., min_length=1)


class ValueRange(BaseModel):
    low: Optional[float] = None
    high: Optional[float] = None


class TemperatureRange(BaseModel):
    low: float
    high: float


class WindForecast(BaseModel):
    speed: Optional[ValueRange] = None
    direction: Optional[str] = None


class UpstreamForecastDay(BaseModel):
    """One day of the upstream multi-day forecast."""

    date: date_type
    forecast: str
    temperature: TemperatureRange
    relative_humidity: Optional[ValueRange] = None
    wind: Optional[WindForecast] = None


class ForecastItem(BaseModel):
    timestamp: Optional[datetime] = None
    forecasts: list[UpstreamForecastDay]


class ForecastPayload(BaseModel):
    """Envelope returned by the multi-day forecast endpoint."""

    items: list[ForecastItem] = Field(..., min_length=1)


class CurrentConditions(BaseModel):
    """Fully populated current-conditions summary for one load cycle."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Air temperature in Celsius")
    humidity: float = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., description="Wind speed in km/h")
    wind_direction: str = Field(..., description="Compass point the wind blows from")
    uv_index: float = Field(..., description="UV index")
    condition_symbol: str = Field(..., description="Symbol summarising conditions")
    description: str = Field(..., description="Short textual summary of conditions")
    location_label: str = Field(..., description="Where the readings apply")
    observed_at: datetime = Field(..., description="When the readings were taken (UTC)")
    is_offline: bool = Field(
        default=False, description="True when the record is static fallback data",
    )
    suitability: SuitabilityLevel = Field(..., description="Cleanup suitability rating")
    suitability_message: str = Field(..., description="Advice matching the rating")


class ForecastDay(BaseModel):
    """Presentation-ready forecast for one day."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Today, Tomorrow or the weekday name")
    date: Optional[date_type] = Field(
        default=None, description="Calendar date, absent for fallback entries",
    )
    temperature_high: float = Field(..., description="Daily high in Celsius")
    temperature_low: float = Field(..., description="Daily low in Celsius")
    condition_text: str = Field(..., description="Upstream forecast wording")
    condition_symbol: str = Field(..., description="Symbol derived from the wording")
    wind_summary: str = Field(..., description="Wind direction and speed range")
    humidity_summary: Optional[str] = Field(
        default=None, description="Relative humidity range, when reported",
    )
    suitability: SuitabilityLevel = Field(..., description="Cleanup suitability rating")


class WeatherReport(BaseModel):
    """Current conditions and forecast produced by one refresh cycle."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    forecast: list[ForecastDay]
    generation: int = Field(..., description="Refresh cycle that produced the report")


__all__ = [
    "CurrentConditions",
    "ForecastDay",
    "ForecastItem",
    "ForecastPayload",
    "IndexEntry",
    "MeasurementItem",
    "MeasurementPayload",
    "NATIONAL_STATION_ID",
    "StationReading",
    "TemperatureRange",
    "UpstreamForecastDay",
    "ValueRange",
    "WeatherReport",
    "WindForecast",
]
