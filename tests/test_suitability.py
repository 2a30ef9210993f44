import pytest

from shoresquad.config import SuitabilityThresholds
from shoresquad.domain import SuitabilityLevel
from shoresquad.models.suitability import CleanupConditions
from shoresquad.services.suitability import assess_suitability, suitability


def _conditions(**overrides):
    values = {"temperature": 28.0, "humidity": 70.0, "wind_speed": 10.0, "uv_index": 6.0}
    values.update(overrides)
    return CleanupConditions(**values)


def test_perfect_conditions():
    assert suitability(_conditions()) is SuitabilityLevel.PERFECT


@pytest.mark.parametrize(
    "overrides",
    [
        {"temperature": 36.0},
        {"temperature": 36.0, "humidity": 10.0, "wind_speed": 0.0, "uv_index": 0.0},
        {"uv_index": 10.0},
        {"wind_speed": 26.0},
        {"forecast_text": "Heavy Rain"},
    ],
)
def test_hazards_are_poor(overrides):
    assert suitability(_conditions(**overrides)) is SuitabilityLevel.POOR


def test_hot_message_takes_priority_over_wind():
    assessment = assess_suitability(_conditions(temperature=37.0, wind_speed=40.0))

    assert assessment.level is SuitabilityLevel.POOR
    assert "hot" in assessment.message.lower()


def test_cool_is_okay():
    assessment = assess_suitability(_conditions(temperature=18.0, humidity=50.0))

    assert assessment.level is SuitabilityLevel.OKAY
    assert "warmly" in assessment.message


def test_high_humidity_beats_perfect_range():
    conditions = _conditions(temperature=27.0, humidity=92.0, wind_speed=5.0)

    assert suitability(conditions) is SuitabilityLevel.OKAY


def test_thundery_showers_override_perfect():
    conditions = _conditions(temperature=26.0, forecast_text="Thundery Showers")

    assert suitability(conditions) is SuitabilityLevel.POOR


def test_showers_are_okay():
    assert suitability(_conditions(forecast_text="Passing Showers")) is SuitabilityLevel.OKAY


@pytest.mark.parametrize(
    "overrides",
    [
        {"temperature": 33.0},
        {"temperature": 22.0},
        {"wind_speed": 20.0},
        {"humidity": 85.0},
    ],
)
def test_outside_perfect_band_is_good(overrides):
    assert suitability(_conditions(**overrides)) is SuitabilityLevel.GOOD


def test_missing_uv_skips_uv_rule():
    assert suitability(_conditions(uv_index=None)) is SuitabilityLevel.PERFECT


def test_custom_thresholds():
    strict = SuitabilityThresholds(max_temperature=27.0)

    assert suitability(_conditions(), strict) is SuitabilityLevel.POOR
