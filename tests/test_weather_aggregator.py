from datetime import date

import httpx
import pytest

from upstream import BASE_URL, FIXED_NOW, readings_payload, upstream_transport
from shoresquad.domain import SuitabilityLevel
from shoresquad.ingestors.weather import WeatherIngestor
from shoresquad.services.fallback import offline_current_conditions, offline_forecast
from shoresquad.services.weather_aggregator import (
    WeatherAggregator,
    condition_description,
    condition_symbol,
    degrees_to_compass,
    forecast_symbol,
)


def _aggregator(transport, **kwargs):
    ingestor = WeatherIngestor(base_url=BASE_URL, transport=transport)
    return WeatherAggregator(
        ingestor,
        preferred_stations=("S107", "S24"),
        location_label="East Coast",
        clock=lambda: FIXED_NOW,
        **kwargs,
    )


@pytest.mark.anyio
async def test_load_current_resolves_preferred_stations():
    aggregator = _aggregator(upstream_transport())

    current = await aggregator.load_current()

    assert current.is_offline is False
    assert current.temperature == 28.4
    assert current.humidity == 70.0
    assert current.wind_speed == 10.0
    assert current.wind_direction == "NE"
    assert current.uv_index == 6
    assert current.condition_symbol == "☀️"
    assert current.description == "Pleasant"
    assert current.location_label == "East Coast"
    assert current.observed_at == FIXED_NOW
    assert current.suitability is SuitabilityLevel.PERFECT


@pytest.mark.anyio
async def test_load_current_falls_back_entirely_when_one_fetch_times_out():
    def timeout(request):
        raise httpx.ReadTimeout("timeout", request=request)

    aggregator = _aggregator(upstream_transport({"/wind-speed": timeout}))

    current = await aggregator.load_current()

    assert current.is_offline is True
    assert current == offline_current_conditions(FIXED_NOW)
    assert "offline" in current.location_label


@pytest.mark.anyio
async def test_load_current_falls_back_on_upstream_error():
    aggregator = _aggregator(
        upstream_transport({"/uv-index": lambda request: httpx.Response(503)})
    )

    current = await aggregator.load_current()

    assert current == offline_current_conditions(FIXED_NOW)


@pytest.mark.anyio
async def test_load_current_uses_default_when_no_station_reports():
    aggregator = _aggregator(
        upstream_transport(
            {
                "/relative-humidity": lambda request: httpx.Response(
                    200, json=readings_payload([("S107", None), ("S24", None)])
                )
            }
        )
    )

    current = await aggregator.load_current()

    assert current.is_offline is False
    assert current.humidity == 75.0
    assert current.temperature == 28.4


@pytest.mark.anyio
async def test_load_current_falls_back_when_item_has_no_readings():
    aggregator = _aggregator(
        upstream_transport(
            {
                "/wind-speed": lambda request: httpx.Response(
                    200, json={"items": [{"timestamp": "2024-06-03T10:00:00+08:00"}]}
                )
            }
        )
    )

    current = await aggregator.load_current()

    assert current.is_offline is True
    assert current == offline_current_conditions(FIXED_NOW)


@pytest.mark.anyio
async def test_load_current_treats_empty_readings_as_no_station_data():
    aggregator = _aggregator(
        upstream_transport(
            {"/wind-speed": lambda request: httpx.Response(200, json=readings_payload([]))}
        )
    )

    current = await aggregator.load_current()

    assert current.is_offline is False
    assert current.wind_speed == 10.0


@pytest.mark.anyio
async def test_load_current_is_idempotent_apart_from_timestamp():
    ingestor = WeatherIngestor(base_url=BASE_URL, transport=upstream_transport())
    aggregator = WeatherAggregator(ingestor, preferred_stations=("S107", "S24"))

    first = await aggregator.load_current()
    second = await aggregator.load_current()

    assert first.model_dump(exclude={"observed_at"}) == second.model_dump(
        exclude={"observed_at"}
    )


@pytest.mark.anyio
async def test_load_forecast_maps_upstream_days():
    aggregator = _aggregator(upstream_transport())

    forecast = await aggregator.load_forecast()

    assert [day.label for day in forecast] == ["Today", "Tomorrow", "Wednesday", "Thursday"]
    assert [day.date for day in forecast] == [
        date(2024, 6, 3),
        date(2024, 6, 4),
        date(2024, 6, 5),
        date(2024, 6, 6),
    ]
    today = forecast[0]
    assert today.temperature_high == 26
    assert today.temperature_low == 25
    assert today.condition_symbol == "⛈️"
    assert today.suitability is SuitabilityLevel.POOR
    assert today.wind_summary == "SSE 10-20 km/h"
    assert today.humidity_summary == "60-90%"

    assert forecast[1].condition_symbol == "☁️"
    assert forecast[1].suitability is SuitabilityLevel.PERFECT
    assert forecast[2].condition_symbol == "🌧️"
    assert forecast[2].suitability is SuitabilityLevel.OKAY
    assert forecast[3].condition_symbol == "⛅"
    assert forecast[3].suitability is SuitabilityLevel.GOOD


@pytest.mark.anyio
async def test_load_forecast_without_humidity_or_wind():
    payload = {
        "items": [
            {
                "forecasts": [
                    {
                        "date": "2024-06-03",
                        "forecast": "Hazy",
                        "temperature": {"low": 26, "high": 30},
                    }
                ]
            }
        ]
    }
    aggregator = _aggregator(
        upstream_transport(
            {"/4-day-weather-forecast": lambda request: httpx.Response(200, json=payload)}
        )
    )

    forecast = await aggregator.load_forecast()

    assert len(forecast) == 1
    assert forecast[0].humidity_summary is None
    assert forecast[0].wind_summary == "Variable"
    assert forecast[0].condition_symbol == "🌫️"


@pytest.mark.anyio
async def test_load_forecast_uses_humidity_high_without_low():
    payload = {
        "items": [
            {
                "forecasts": [
                    {
                        "date": "2024-06-03",
                        "forecast": "Fair",
                        "temperature": {"low": 25, "high": 28},
                        "relative_humidity": {"high": 95},
                        "wind": {"speed": {"low": 5, "high": 10}, "direction": "NE"},
                    }
                ]
            }
        ]
    }
    aggregator = _aggregator(
        upstream_transport(
            {"/4-day-weather-forecast": lambda request: httpx.Response(200, json=payload)}
        )
    )

    forecast = await aggregator.load_forecast()

    assert forecast[0].suitability is SuitabilityLevel.OKAY
    assert forecast[0].humidity_summary == "up to 95%"


@pytest.mark.anyio
async def test_load_forecast_falls_back_on_missing_forecasts():
    aggregator = _aggregator(
        upstream_transport(
            {
                "/4-day-weather-forecast": lambda request: httpx.Response(
                    200, json={"items": [{"update_timestamp": "2024-06-03"}]}
                )
            }
        )
    )

    first = await aggregator.load_forecast()
    second = await aggregator.load_forecast()

    assert len(first) == 7
    assert first == second
    assert first == offline_forecast(FIXED_NOW.date())
    assert all(day.date is None for day in first)
    assert first[0].label == "Today"
    assert first[1].label == "Tomorrow"
    assert first[2].label == "Wednesday"


@pytest.mark.anyio
async def test_load_forecast_falls_back_on_timeout():
    def timeout(request):
        raise httpx.ConnectTimeout("timeout", request=request)

    aggregator = _aggregator(upstream_transport({"/4-day-weather-forecast": timeout}))

    forecast = await aggregator.load_forecast()

    assert forecast == offline_forecast(FIXED_NOW.date())


def test_offline_forecast_suitability_is_preset():
    levels = [day.suitability for day in offline_forecast(date(2024, 6, 3))]

    assert levels[0] is SuitabilityLevel.PERFECT
    assert levels[2] is SuitabilityLevel.POOR
    assert levels[3] is SuitabilityLevel.OKAY


def test_offline_symbols_follow_forecast_wording():
    for day in offline_forecast(date(2024, 6, 3)):
        assert day.condition_symbol == forecast_symbol(day.condition_text)

    current = offline_current_conditions(FIXED_NOW)
    assert current.condition_symbol == forecast_symbol(current.description)


@pytest.mark.parametrize(
    "text, symbol",
    [
        ("Thundery Showers", "⛈️"),
        ("Heavy Rain", "⛈️"),
        ("Light Rain", "🌧️"),
        ("Passing Showers", "🌧️"),
        ("Overcast", "☁️"),
        ("Fair and Warm", "⛅"),
        ("Hazy", "🌫️"),
        ("Mist", "🌫️"),
        ("Sunny", "☀️"),
    ],
)
def test_forecast_symbol_keyword_ladder(text, symbol):
    assert forecast_symbol(text) == symbol


@pytest.mark.parametrize(
    "temperature, humidity, wind, symbol, description",
    [
        (26.0, 85.0, 5.0, "🌧️", "Humid"),
        (30.0, 85.0, 5.0, "☁️", "Humid"),
        (33.0, 60.0, 5.0, "🌞", "Hot"),
        (28.0, 60.0, 25.0, "💨", "Windy"),
        (22.0, 60.0, 5.0, "☀️", "Cool"),
        (28.0, 60.0, 5.0, "☀️", "Pleasant"),
    ],
)
def test_current_condition_ladders(temperature, humidity, wind, symbol, description):
    assert condition_symbol(temperature, humidity, wind) == symbol
    assert condition_description(temperature, humidity, wind) == description


@pytest.mark.parametrize(
    "degrees, point",
    [(0, "N"), (11, "N"), (12, "NNE"), (45, "NE"), (180, "S"), (350, "N"), (360, "N")],
)
def test_degrees_to_compass(degrees, point):
    assert degrees_to_compass(degrees) == point
