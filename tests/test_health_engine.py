"""End-to-end analysis runs with a fixed clock."""

from datetime import datetime, timedelta, timezone

import pytest

from health_app.config import EngineConfig, UserSettings
from models.weather_sample import AirQualityReading, PollenReading, WeatherAlert, WeatherSample
from pipeline.health_engine import HealthEngine

DAY = datetime(2024, 6, 1)

IDEAL_CURRENT = WeatherSample(
    temperature=20,
    feels_like=20,
    wind_speed=5,
    precipitation_probability=5,
    humidity=50,
    uv_index=2,
    visibility=10,
)


def _engine(hour: int = 12, **settings) -> HealthEngine:
    config = EngineConfig(settings=UserSettings(language="en", **settings))
    return HealthEngine(config, clock=lambda: DAY.replace(hour=hour))


def _pleasant_hours(count: int = 24, **overrides_by_index) -> list[WeatherSample]:
    samples = []
    for index in range(count):
        moment = DAY + timedelta(hours=index)
        values = dict(temperature=20, humidity=50, wind_speed=10, precipitation_probability=0, uv_index=0)
        values.update(overrides_by_index.get(f"h{index}", {}))
        samples.append(WeatherSample(timestamp=moment, time_label=moment.isoformat(timespec="minutes"), **values))
    return samples


def _analyze(engine: HealthEngine, current: WeatherSample = IDEAL_CURRENT, **kwargs):
    kwargs.setdefault("air_quality", AirQualityReading(european_aqi=10))
    kwargs.setdefault("pollen", PollenReading(trees=1, grass=1, weeds=1))
    return engine.analyze(current, **kwargs)


def test_ideal_day_analysis() -> None:
    analysis = _analyze(_engine(), hourly=_pleasant_hours())

    assert analysis.outdoor_score.score == 99
    assert analysis.outdoor_score.label_text == "Excellent"
    assert analysis.best_time_window is not None
    assert analysis.best_time_window.start_index == 0
    assert analysis.best_time_window.average_score == 100
    assert len(analysis.timeline) == 24
    assert analysis.timeline[0].time == "2024-06-01T00:00"
    assert analysis.is_night is False
    assert analysis.last_updated == "2024-06-01T12:00:00"
    assert analysis.language == "en"
    assert analysis.vitamin_d_timer.available is False
    assert analysis.headache_risk.risk_level == "unknown"


def test_timeline_is_limited_to_a_day() -> None:
    analysis = _analyze(_engine(), hourly=_pleasant_hours(30))

    assert len(analysis.timeline) == 24


def test_checks_are_sorted() -> None:
    analysis = _analyze(_engine(), hourly=_pleasant_hours())

    for checks in (analysis.quick_checks, analysis.prioritized_checks):
        priorities = [item.priority for item in checks]
        assert priorities == sorted(priorities, reverse=True)


def test_night_clock_changes_checks() -> None:
    analysis = _analyze(_engine(hour=22), WeatherSample(temperature=18, uv_index=9))

    assert analysis.is_night is True
    assert "sunprotection" not in {item.id for item in analysis.prioritized_checks}
    quick = {item.id: item for item in analysis.quick_checks}
    assert quick["sunprotection"].priority == 5


def test_day_max_uv_looks_twelve_hours_ahead() -> None:
    soon = _analyze(_engine(), hourly=_pleasant_hours(h5={"uv_index": 9}))
    later = _analyze(_engine(), hourly=_pleasant_hours(h13={"uv_index": 9}))

    assert soon.max_uv == 9
    assert {item.id: item for item in soon.prioritized_checks}["sunprotection"].priority == 130
    assert later.max_uv == 2
    assert {item.id: item for item in later.prioritized_checks}["sunprotection"].priority == 20


def test_pressure_drop_raises_headache_alert() -> None:
    hourly = [WeatherSample(pressure=1013), WeatherSample(pressure=1013), WeatherSample(pressure=1007), WeatherSample()]

    analysis = _analyze(_engine(), hourly=hourly)

    assert analysis.headache_risk.risk_level == "elevated"
    assert analysis.headache_risk.alert_level == "high"
    assert analysis.headache_risk.is_critical is True
    bio = [alert for alert in analysis.safety_alerts if alert.type == "bio"]
    assert len(bio) == 1
    assert bio[0].priority == 40


def test_migraine_sensitive_user() -> None:
    hourly = [WeatherSample(pressure=1013), WeatherSample(pressure=1013), WeatherSample(pressure=1007)]

    analysis = _analyze(_engine(migraine_sensitive=True), hourly=hourly)

    assert analysis.headache_risk.show_alert is True
    assert analysis.safety_alerts[0].type == "bio"
    assert analysis.safety_alerts[0].priority == 80


def test_external_alert_tops_prioritized_checks() -> None:
    analysis = _analyze(_engine(), alerts=[WeatherAlert(title="Unwetter", severity="critical")])

    assert analysis.prioritized_checks[0].id == "alert-critical"
    assert analysis.prioritized_checks[0].detail == "Unwetter"


def test_skin_type_changes_sunburn_time() -> None:
    current = WeatherSample(temperature=24, uv_index=9)

    assert _analyze(_engine(), current).vitamin_d_timer.sunburn_minutes == 19
    assert _analyze(_engine(skin_type=1), current).vitamin_d_timer.sunburn_minutes == 15


def test_rain_caps_current_score() -> None:
    analysis = _analyze(_engine(), WeatherSample(temperature=20, precipitation_probability=60))

    assert analysis.outdoor_score.capped_by == "precipitation"
    assert analysis.outdoor_score.score <= 30
    assert analysis.prioritized_checks[0].id == "umbrella"


def test_equal_inputs_give_equal_analyses() -> None:
    engine = _engine()
    hourly = _pleasant_hours()

    first = _analyze(engine, hourly=hourly).to_dict()
    second = _analyze(engine, hourly=hourly).to_dict()

    assert first == second


def test_empty_input_still_analyzes() -> None:
    analysis = _engine().analyze(None)

    assert 0 <= analysis.outdoor_score.score <= 100
    assert analysis.best_time_window is None
    assert analysis.timeline == []
    assert analysis.headache_risk.risk_level == "unknown"


def test_explicit_last_updated_is_kept() -> None:
    analysis = _analyze(_engine(), last_updated="2024-06-01T11:45:00")

    assert analysis.last_updated == "2024-06-01T11:45:00"


def test_ideal_day_reports_dew_point_and_activities() -> None:
    analysis = _analyze(_engine())

    assert analysis.dew_point == pytest.approx(9.3)
    assert analysis.dew_point_comfort is not None
    assert analysis.dew_point_comfort.level == "dry"
    assert set(analysis.activities) == {"running", "cycling", "hiking", "gardening"}
    assert analysis.activities["running"].note == "Ideal"
    assert analysis.activities["hiking"].suitable is True
    assert analysis.to_dict()["activities"]["cycling"]["score"] == 100


def test_non_finite_readings_fall_back_to_defaults() -> None:
    current = WeatherSample(
        temperature=20,
        precipitation_probability=float("nan"),
        wind_speed=float("inf"),
        uv_index=float("nan"),
    )
    hourly = _pleasant_hours(h0={"uv_index": float("nan"), "pressure": float("nan")}, h1={"uv_index": float("inf")})

    analysis = _analyze(_engine(), current, hourly=hourly)

    assert analysis.conditions.precipitation_probability == 0
    assert analysis.conditions.wind_speed == 0
    assert analysis.conditions.uv_index == 0
    assert analysis.max_uv == 0
    assert 0 <= analysis.outdoor_score.score <= 100
    assert all(0 <= point.score <= 100 for point in analysis.timeline)
    assert analysis.headache_risk.risk_level == "unknown"


def test_mixed_offset_pressure_history_is_analyzed() -> None:
    hourly = [
        WeatherSample(pressure=1013, timestamp=DAY.replace(hour=10)),
        WeatherSample(pressure=1010, timestamp=DAY.replace(hour=11, tzinfo=timezone.utc)),
    ]

    analysis = _analyze(_engine(), hourly=hourly)

    assert analysis.headache_risk.change == -3.0
    assert analysis.headache_risk.risk_level == "moderate"
