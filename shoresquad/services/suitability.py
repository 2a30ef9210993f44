"""Rule-based cleanup suitability classification."""

from __future__ import annotations

from typing import Iterable, Optional

from shoresquad.config import SuitabilityThresholds, settings
from shoresquad.domain import SuitabilityLevel
from shoresquad.models.suitability import CleanupConditions, SuitabilityAssessment

STORM_KEYWORDS: tuple[str, ...] = ("thunder", "heavy rain", "heavy shower")
RAIN_KEYWORDS: tuple[str, ...] = ("rain", "shower", "drizzle")

MESSAGES: dict[str, str] = {
    "too_hot": "Too hot - stay hydrated and postpone if you can",
    "extreme_uv": "Extreme UV - cover up or reschedule",
    "too_windy": "Too windy - wait for calmer weather",
    "storm": "Thunderstorms or heavy rain expected - stay off the beach",
    "cool": "Cool - dress warmly",
    "humid": "Very humid - take regular breaks",
    "rain": "Showers possible - bring rain gear",
    "perfect": "Perfect for cleanup!",
    "good": "Good conditions",
}


def contains_keyword(text: Optional[str], keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test of ``text`` against ``keywords``."""

    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def assess_suitability(
    conditions: CleanupConditions,
    thresholds: SuitabilityThresholds | None = None,
) -> SuitabilityAssessment:
    """Classify conditions for an outdoor cleanup.

    Rules are evaluated top to bottom and the first match wins. Hazards are
    checked first so the comfort rules below them only see conditions that
    are already known to be safe.
    """

    limits = thresholds or settings.suitability
    text = conditions.forecast_text

    if conditions.temperature > limits.max_temperature:
        return _poor("too_hot")
    if conditions.uv_index is not None and conditions.uv_index > limits.max_uv_index:
        return _poor("extreme_uv")
    if conditions.wind_speed > limits.max_wind_speed:
        return _poor("too_windy")
    if contains_keyword(text, STORM_KEYWORDS):
        return _poor("storm")

    if conditions.temperature < limits.min_temperature:
        return _okay("cool")
    if conditions.humidity > limits.max_humidity:
        return _okay("humid")
    if contains_keyword(text, RAIN_KEYWORDS):
        return _okay("rain")

    if (
        limits.perfect_temperature_low
        <= conditions.temperature
        <= limits.perfect_temperature_high
        and conditions.wind_speed < limits.perfect_max_wind_speed
        and conditions.humidity < limits.perfect_max_humidity
    ):
        return SuitabilityAssessment(
            level=SuitabilityLevel.PERFECT, message=MESSAGES["perfect"]
        )

    return SuitabilityAssessment(level=SuitabilityLevel.GOOD, message=MESSAGES["good"])


def suitability(
    conditions: CleanupConditions, thresholds: SuitabilityThresholds | None = None
) -> SuitabilityLevel:
    """Return only the level from :func:`assess_suitability`."""

    return assess_suitability(conditions, thresholds).level


def _poor(reason: str) -> SuitabilityAssessment:
    return SuitabilityAssessment(level=SuitabilityLevel.POOR, message=MESSAGES[reason])


def _okay(reason: str) -> SuitabilityAssessment:
    return SuitabilityAssessment(level=SuitabilityLevel.OKAY, message=MESSAGES[reason])


__all__ = [
    "RAIN_KEYWORDS",
    "STORM_KEYWORDS",
    "assess_suitability",
    "contains_keyword",
    "suitability",
]
