"""Static weather used when the upstream source is unavailable."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from shoresquad.config import settings
from shoresquad.models.suitability import CleanupConditions
from shoresquad.models.weather import CurrentConditions, ForecastDay
from shoresquad.services.suitability import assess_suitability
from shoresquad.services.symbols import forecast_symbol

OFFLINE_CONDITIONS = {
    "temperature": 28.0,
    "humidity": 75.0,
    "wind_speed": 12.0,
    "wind_direction": "NE",
    "uv_index": 6.0,
    "condition_symbol": forecast_symbol("Partly Cloudy"),
    "description": "Partly Cloudy",
}

# (forecast text, high, low, wind direction, wind low, wind high, rh low, rh high)
OFFLINE_FORECAST: tuple[tuple[str, float, float, str, float, float, float, float], ...] = (
    ("Partly Cloudy", 31.0, 25.0, "NE", 5.0, 15.0, 60.0, 80.0),
    ("Fair and Warm", 33.0, 26.0, "NE", 10.0, 20.0, 55.0, 85.0),
    ("Afternoon Thundery Showers", 30.0, 24.0, "S", 10.0, 25.0, 65.0, 95.0),
    ("Showers", 29.0, 24.0, "SW", 10.0, 20.0, 70.0, 95.0),
    ("Partly Cloudy", 31.0, 25.0, "NE", 5.0, 15.0, 60.0, 80.0),
    ("Fair", 32.0, 26.0, "E", 5.0, 15.0, 55.0, 80.0),
    ("Cloudy", 30.0, 25.0, "NE", 10.0, 20.0, 60.0, 85.0),
)


def offline_location_label() -> str:
    return f"{settings.weather_location_label} (offline)"


def offline_current_conditions(now: Optional[datetime] = None) -> CurrentConditions:
    """Return the fixed offline conditions, stamped with ``now``."""

    assessment = assess_suitability(
        CleanupConditions(
            temperature=OFFLINE_CONDITIONS["temperature"],
            humidity=OFFLINE_CONDITIONS["humidity"],
            wind_speed=OFFLINE_CONDITIONS["wind_speed"],
            uv_index=OFFLINE_CONDITIONS["uv_index"],
        )
    )
    return CurrentConditions(
        **OFFLINE_CONDITIONS,
        location_label=offline_location_label(),
        observed_at=now or datetime.now(timezone.utc),
        is_offline=True,
        suitability=assessment.level,
        suitability_message=assessment.message,
    )


def day_label(index: int, day: date) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return day.strftime("%A")


def offline_forecast(today: Optional[date] = None) -> list[ForecastDay]:
    """Return the seven-day fallback forecast starting at ``today``."""

    start = today or date.today()
    days: list[ForecastDay] = []
    for index, entry in enumerate(OFFLINE_FORECAST):
        text, high, low, direction, wind_low, wind_high, rh_low, rh_high = entry
        level = assess_suitability(
            CleanupConditions(
                temperature=high,
                humidity=rh_high,
                wind_speed=wind_high,
                forecast_text=text,
            )
        ).level
        days.append(
            ForecastDay(
                label=day_label(index, start + timedelta(days=index)),
                date=None,
                temperature_high=high,
                temperature_low=low,
                condition_text=text,
                condition_symbol=forecast_symbol(text),
                wind_summary=f"{direction} {wind_low:.0f}-{wind_high:.0f} km/h",
                humidity_summary=f"{rh_low:.0f}-{rh_high:.0f}%",
                suitability=level,
            )
        )
    return days


__all__ = [
    "OFFLINE_CONDITIONS",
    "OFFLINE_FORECAST",
    "day_label",
    "offline_current_conditions",
    "offline_forecast",
    "offline_location_label",
]
