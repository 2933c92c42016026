from datetime import datetime

import pytest
from pydantic import ValidationError

from logic.validation import AnalyzeRequest, ForecastRequest, WeatherSampleInput, validation_failure


def test_camel_case_payload_is_accepted() -> None:
    request = AnalyzeRequest.model_validate(
        {
            "current": {"temperature": 4, "feelsLike": 3, "windSpeed": 12, "precipProb": None},
            "daily": [{"precipProbMax": 30}, {"precipProbMax": 90}],
            "airQuality": {"europeanAqi": 55},
            "alerts": [{"title": "Sturm", "severity": "red"}],
            "settings": {"skinType": 3},
            "unknownKey": True,
        }
    )

    sample = request.current.to_sample()
    assert sample.feels_like == 3
    assert sample.wind_speed == 12
    assert sample.precipitation_probability is None
    assert request.daily is not None
    assert request.daily.to_summary().precipitation_probability_max == 30
    assert request.air_quality is not None
    assert request.air_quality.to_reading().value == 55
    assert request.alerts[0].to_alert().is_critical is True
    assert request.settings is not None
    assert request.settings.overrides() == {"skin_type": 3}


def test_snake_case_payload_is_accepted() -> None:
    request = AnalyzeRequest.model_validate(
        {"current": {"feels_like": 10, "uv_index": 4}, "hourly": None, "alerts": None, "daily": []}
    )

    assert request.current.to_sample().uv_index == 4
    assert request.hourly == []
    assert request.alerts == []
    assert request.daily is None


def test_time_is_parsed_when_iso() -> None:
    iso = WeatherSampleInput.model_validate({"time": "2024-06-01T10:00"}).to_sample()
    label = WeatherSampleInput.model_validate({"time": "10:00"}).to_sample()

    assert iso.timestamp == datetime(2024, 6, 1, 10)
    assert iso.time_label == "2024-06-01T10:00"
    assert label.timestamp is None
    assert label.time_label == "10:00"


def test_skin_type_out_of_range_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AnalyzeRequest.model_validate({"settings": {"skinType": 9}})


def test_forecast_request_aliases() -> None:
    request = ForecastRequest.model_validate({"hourly": [{"temperature": 20}], "aqiValue": 40, "pollenLevel": 2})

    assert request.aqi_value == 40
    assert request.pollen_level == 2
    assert len(request.hourly) == 1


def test_validation_failure_payload() -> None:
    with pytest.raises(ValidationError) as excinfo:
        AnalyzeRequest.model_validate({"current": {"temperature": "hot"}})

    payload = validation_failure("Invalid analysis request", excinfo.value)

    assert payload["status"] == "needs_review"
    assert payload["message"] == "Invalid analysis request"
    assert payload["details"]
    assert payload["details"][0]["loc"][:2] == ("current", "temperature")


@pytest.mark.parametrize("field", ["precipProb", "windSpeed", "uvIndex"])
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_are_rejected(field: str, value: float) -> None:
    with pytest.raises(ValidationError):
        AnalyzeRequest.model_validate({"current": {"temperature": 20, field: value}})


def test_offset_timestamps_keep_wall_clock_time() -> None:
    aware = WeatherSampleInput.model_validate({"time": "2024-06-01T11:00+02:00"}).to_sample()

    assert aware.timestamp == datetime(2024, 6, 1, 11)
    assert aware.timestamp.tzinfo is None
    assert aware.time_label == "2024-06-01T11:00+02:00"
