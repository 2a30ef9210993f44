"""Cleanup event listing endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Query

from shoresquad.models import CleanupEvent, NearbyEvent
from shoresquad.services import find_nearby_events, list_events

router = APIRouter(prefix="/api/v1/events", tags=["events"])

logger = logging.getLogger("shoresquad.api.events")


@router.get("", response_model=list[CleanupEvent], summary="List cleanup events")
async def get_events() -> list[CleanupEvent]:
    return list_events()


@router.get(
    "/nearby",
    response_model=list[NearbyEvent],
    summary="Find cleanup events near a location",
)
async def get_nearby_events(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius_km: Optional[float] = Query(
        default=None, gt=0, le=500, description="Search radius, defaults to 50 km"
    ),
) -> list[NearbyEvent]:
    """Return events within ``radius_km`` of the caller, nearest first."""

    events = find_nearby_events(lat, lon, radius_km)
    logger.info("Found %s events near %.4f,%.4f", len(events), lat, lon)
    return events
