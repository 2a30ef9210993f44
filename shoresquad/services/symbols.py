"""Forecast wording to display symbol."""

from __future__ import annotations

# Checked in order; the first keyword group found in the forecast text wins.
FORECAST_SYMBOLS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("thunder", "heavy rain", "heavy shower"), "⛈️"),
    (("rain", "shower", "drizzle"), "🌧️"),
    (("cloudy", "overcast"), "☁️"),
    (("partly cloudy", "fair"), "⛅"),
    (("haze", "hazy", "mist"), "🌫️"),
)
CLEAR_SYMBOL = "☀️"


def forecast_symbol(text: str) -> str:
    lowered = text.lower()
    for keywords, symbol in FORECAST_SYMBOLS:
        if any(keyword in lowered for keyword in keywords):
            return symbol
    return CLEAR_SYMBOL


__all__ = ["CLEAR_SYMBOL", "FORECAST_SYMBOLS", "forecast_symbol"]
