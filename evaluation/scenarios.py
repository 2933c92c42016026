"""Evaluation scenarios covering comfort, caps, pressure swings, frost and time windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List

from models.weather_sample import AirQualityReading, PollenReading, WeatherSample

NOON = datetime(2024, 6, 1, 12, 0)
LATE_EVENING = datetime(2024, 1, 15, 23, 0)


@dataclass
class EvaluationScenario:
    name: str
    description: str
    now: datetime
    current: WeatherSample
    hourly: List[WeatherSample] = field(default_factory=list)
    air_quality: AirQualityReading | None = None
    pollen: PollenReading | None = None
    migraine_sensitive: bool = False
    expectations: Dict[str, object] = field(default_factory=dict)


def _hour(day: datetime, hour: int, **values: float) -> WeatherSample:
    moment = day.replace(hour=0, minute=0) + timedelta(hours=hour)
    return WeatherSample(timestamp=moment, time_label=moment.isoformat(timespec="minutes"), **values)


def _pleasant(day: datetime, hour: int) -> WeatherSample:
    return _hour(day, hour, temperature=20, humidity=50, wind_speed=10, precipitation_probability=0, uv_index=0)


def _showery(day: datetime, hour: int) -> WeatherSample:
    return _hour(day, hour, temperature=20, humidity=50, wind_speed=10, precipitation_probability=60, uv_index=0)


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="ideal_day",
        description="Mild, dry, light breeze: every factor near its optimum.",
        now=NOON,
        current=WeatherSample(
            temperature=20,
            feels_like=20,
            wind_speed=5,
            precipitation_probability=5,
            humidity=50,
            uv_index=2,
            visibility=10,
        ),
        air_quality=AirQualityReading(european_aqi=10),
        pollen=PollenReading(trees=1, grass=1, weeds=1),
        expectations={"min_score": 90, "label": "excellent", "capped_by": None},
    ),
    EvaluationScenario(
        name="rainy_afternoon",
        description="Otherwise pleasant but 60 % rain probability caps the score.",
        now=NOON,
        current=WeatherSample(
            temperature=20,
            feels_like=20,
            wind_speed=10,
            precipitation_probability=60,
            humidity=50,
            uv_index=1,
        ),
        expectations={"max_score": 30, "capped_by": "precipitation", "top_check": "umbrella"},
    ),
    EvaluationScenario(
        name="pressure_drop",
        description="A 6 hPa fall within three hours for a migraine-sensitive user.",
        now=NOON,
        current=WeatherSample(temperature=18, humidity=55, pressure=1013),
        hourly=[
            _hour(NOON, 8, temperature=17, pressure=1013),
            _hour(NOON, 9, temperature=18, pressure=1013),
            _hour(NOON, 10, temperature=18, pressure=1007),
        ],
        migraine_sensitive=True,
        expectations={"headache_alert_level": "high", "alert_types": ["bio"]},
    ),
    EvaluationScenario(
        name="frosty_night",
        description="Late evening hard frost: safety items outrank everyday checks.",
        now=LATE_EVENING,
        current=WeatherSample(temperature=-8, feels_like=-8, wind_speed=10, humidity=80, uv_index=0),
        expectations={"top_check": "frost", "absent_check": "sunprotection", "alert_types": ["cold"]},
    ),
    EvaluationScenario(
        name="midday_window",
        description="Only 10:00-13:00 is dry; the best window starts at 10:00.",
        now=datetime(2024, 6, 1, 6, 0),
        current=WeatherSample(temperature=20, humidity=50),
        hourly=[
            _pleasant(NOON, hour) if 10 <= hour <= 13 else _showery(NOON, hour)
            for hour in range(24)
        ],
        expectations={"window": (10, 12)},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
