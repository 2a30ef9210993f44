"""Cleanup suitability levels shared by current conditions and forecasts."""

from __future__ import annotations

from enum import Enum


class SuitabilityLevel(str, Enum):
    """How favourable conditions are for an outdoor cleanup."""

    PERFECT = "perfect"
    GOOD = "good"
    OKAY = "okay"
    POOR = "poor"


__all__ = ["SuitabilityLevel"]
