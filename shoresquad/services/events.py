"""Cleanup event catalog and proximity search."""

from __future__ import annotations

from datetime import date, time
import logging
import math
from typing import Optional

from shoresquad.config import settings
from shoresquad.models.events import CleanupEvent, NearbyEvent

logger = logging.getLogger("shoresquad.services.events")

EARTH_RADIUS_KM = 6371.0

EVENT_CATALOG: tuple[CleanupEvent, ...] = (
    CleanupEvent(
        id=1,
        title="Pasir Ris Beach Cleanup",
        date=date(2025, 6, 7),
        time=time(9, 0),
        location="Pasir Ris Park, Singapore",
        latitude=1.3817,
        longitude=103.9562,
        participants=24,
        organizer="East Side Shore Squad",
        description="Morning sweep of the mangrove boardwalk and beach.",
    ),
    CleanupEvent(
        id=2,
        title="East Coast Park Community Clean",
        date=date(2025, 6, 14),
        time=time(10, 0),
        location="East Coast Park Area C, Singapore",
        latitude=1.3008,
        longitude=103.9122,
        participants=18,
        organizer="Marine Parade Crew",
        description="Weekend cleanup with the local community. All welcome!",
    ),
    CleanupEvent(
        id=3,
        title="Changi Coastal Care",
        date=date(2025, 6, 21),
        time=time(8, 30),
        location="Changi Beach Park, Singapore",
        latitude=1.3894,
        longitude=103.9886,
        participants=32,
        organizer="Changi Village Squad",
        description="Early bird cleanup session. Coffee and pastries provided!",
    ),
    CleanupEvent(
        id=4,
        title="Mersing Shoreline Sweep",
        date=date(2025, 6, 28),
        time=time(8, 0),
        location="Mersing Beach, Johor",
        latitude=2.4312,
        longitude=103.8405,
        participants=12,
        organizer="Johor Tide Keepers",
        description="Cross-border volunteer day on the Mersing coast.",
    ),
)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def list_events() -> list[CleanupEvent]:
    return list(EVENT_CATALOG)


def find_nearby_events(
    lat: float, lon: float, radius_km: Optional[float] = None
) -> list[NearbyEvent]:
    """Return catalog events within ``radius_km`` of a point, nearest first."""

    radius = radius_km if radius_km is not None else settings.events_default_radius_km
    nearby: list[NearbyEvent] = []
    for event in EVENT_CATALOG:
        distance = haversine_km(lat, lon, event.latitude, event.longitude)
        if distance <= radius:
            nearby.append(NearbyEvent(**event.model_dump(), distance_km=round(distance, 2)))

    nearby.sort(key=lambda event: event.distance_km)
    logger.debug("Found %s events within %.1f km of %s,%s", len(nearby), radius, lat, lon)
    return nearby


__all__ = ["EVENT_CATALOG", "find_nearby_events", "haversine_km", "list_events"]
