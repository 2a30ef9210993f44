"""Cleanup event models."""

from __future__ import annotations

from datetime import date as date_type, time as time_type

from pydantic import BaseModel, ConfigDict, Field


class CleanupEvent(BaseModel):
    """A scheduled community beach cleanup."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog identifier")
    title: str
    date: date_type
    time: time_type
    location: str = Field(..., description="Human-readable meeting point")
    latitude: float
    longitude: float
    participants: int = Field(default=0, ge=0)
    organizer: str
    description: str


class NearbyEvent(CleanupEvent):
    """Cleanup event annotated with its distance from the caller."""

    distance_km: float = Field(..., ge=0, description="Great-circle distance in km")
