"""Composite outdoor score, critical caps and score bands."""

import pytest

from health_app.config import DEFAULT_WEIGHTS, EngineConfig, UserSettings
from logic.composite_score import calculate_outdoor_score, score_band
from models.locale import Translator
from models.weather_sample import Conditions


def _ideal(**overrides) -> Conditions:
    values = dict(
        temperature=20,
        feels_like=20,
        wind_speed=5,
        precipitation_probability=5,
        humidity=50,
        uv_index=2,
        visibility=10,
        aqi=10,
        pollen_level=1,
    )
    values.update(overrides)
    return Conditions(**values)


def test_ideal_day_is_excellent() -> None:
    result = calculate_outdoor_score(_ideal())

    assert result.score >= 90
    assert result.score == 99
    assert result.label == "excellent"
    assert result.color == "#4ade80"
    assert result.capped is False
    assert result.capped_by is None
    assert result.factors["wind"].score == 95
    assert result.factors["temperature"].raw_value == 20


def test_rain_caps_score_at_thirty() -> None:
    result = calculate_outdoor_score(_ideal(precipitation_probability=60, wind_speed=10))

    assert result.capped is True
    assert result.capped_by == "precipitation"
    assert result.score <= 30
    assert result.factors["precipitation"].critical is True
    assert result.factors["wind"].critical is False


def test_wind_caps_score_when_dry() -> None:
    result = calculate_outdoor_score(_ideal(wind_speed=45))

    assert result.capped_by == "wind"
    assert result.score <= 30


def test_precipitation_is_checked_before_wind() -> None:
    result = calculate_outdoor_score(_ideal(precipitation_probability=50, wind_speed=50))

    assert result.capped_by == "precipitation"
    assert result.factors["wind"].critical is True


def test_threshold_is_exclusive() -> None:
    result = calculate_outdoor_score(_ideal(precipitation_probability=40, wind_speed=40))

    assert result.capped is False
    assert result.score > 30


def test_extreme_conditions_give_an_integer_in_range() -> None:
    result = calculate_outdoor_score(
        Conditions(
            temperature=50,
            feels_like=50,
            humidity=100,
            wind_speed=120,
            precipitation_probability=100,
            uv_index=15,
            visibility=0,
            aqi=500,
            pollen_level=5,
        )
    )

    assert isinstance(result.score, int)
    assert result.score == 7
    assert result.label == "critical"


@pytest.mark.parametrize(
    "score,label",
    [(100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"), (40, "moderate"), (20, "poor"), (19, "critical")],
)
def test_score_bands(score: int, label: str) -> None:
    assert score_band(score)[0] == label


def test_label_text_is_localized() -> None:
    config = EngineConfig(settings=UserSettings(language="en"))

    assert calculate_outdoor_score(_ideal(), config).label_text == "Excellent"
    assert calculate_outdoor_score(_ideal(), EngineConfig(), Translator("de")).label_text == "Ausgezeichnet"


def test_invalid_weights_fall_back_to_defaults() -> None:
    config = EngineConfig(weights={"temperature": 1.0})

    assert dict(config.weights) == dict(DEFAULT_WEIGHTS)
