"""Resolve multi-station readings to a single usable value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from shoresquad.models.weather import StationReading

logger = logging.getLogger("shoresquad.ingestors.stations")


@dataclass(frozen=True)
class ResolvedReading:
    """Value picked from a reading set and the station that reported it."""

    value: float
    station_id: str


def resolve_station_reading(
    readings: Sequence[StationReading], preferred: Sequence[str]
) -> Optional[ResolvedReading]:
    """Pick the reading to use from ``readings``.

    Preferred stations are tried in priority order; the first one present
    with a non-null value wins even if other stations appear earlier in the
    payload. When no preferred station has data, the first non-null reading
    in payload order is used. Returns ``None`` when nothing usable exists so
    the caller can apply its own default.
    """

    if not readings:
        return None

    by_station: dict[str, float] = {}
    for reading in readings:
        if reading.value is not None and reading.station_id not in by_station:
            by_station[reading.station_id] = reading.value

    for station_id in preferred:
        if station_id in by_station:
            return ResolvedReading(value=by_station[station_id], station_id=station_id)

    for reading in readings:
        if reading.value is not None:
            logger.debug(
                "No preferred station reported; using %s", reading.station_id
            )
            return ResolvedReading(value=reading.value, station_id=reading.station_id)

    return None


__all__ = ["ResolvedReading", "resolve_station_reading"]
