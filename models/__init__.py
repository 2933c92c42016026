"""Model package exports."""

from models.results import *  # noqa: F401,F403
from models.results import __all__ as _RESULT_EXPORTS
from models.weather_sample import (
    AirQualityReading,
    Conditions,
    DailySummary,
    PollenReading,
    WeatherAlert,
    WeatherSample,
)

__all__ = [
    "AirQualityReading",
    "Conditions",
    "DailySummary",
    "PollenReading",
    "WeatherAlert",
    "WeatherSample",
    *_RESULT_EXPORTS,
]
