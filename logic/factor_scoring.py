"""Piecewise comfort curves mapping one physical quantity to a 0-100 score.

Each curve has an optimal band scoring 100 and degrading tails. Threshold
edges are inclusive as written; values far outside the curve are clamped,
never rejected.
"""

from __future__ import annotations

import math
from typing import Optional


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like a UI would show it."""

    return math.floor(value + 0.5)


def temperature_comfort(temp: Optional[float]) -> float:
    """Comfort score for a (felt) temperature in °C; 18-24 °C is optimal."""

    if temp is None:
        return 50.0
    if 18 <= temp <= 24:
        return 100.0

    if temp < 18:
        if temp < 0:
            return clamp_score(max(0.0, 20 + temp * 2))
        if temp < 10:
            return clamp_score(max(30.0, 60 + (temp - 10) * 3))
        return clamp_score(max(60.0, 100 - (18 - temp) * 5))

    if temp <= 28:
        return clamp_score(max(70.0, 100 - (temp - 24) * 7.5))
    if temp <= 32:
        return clamp_score(max(40.0, 70 - (temp - 28) * 7.5))
    if temp <= 36:
        return clamp_score(max(15.0, 40 - (temp - 32) * 6.25))
    return clamp_score(max(0.0, 15 - (temp - 36) * 5))


def wind_comfort(wind_speed: Optional[float]) -> float:
    """Comfort score for wind speed in km/h; a light breeze scores best."""

    if wind_speed is None:
        return 80.0
    if wind_speed <= 5:
        return 95.0
    if wind_speed <= 15:
        return 100.0
    if wind_speed <= 25:
        return 85.0
    if wind_speed <= 35:
        return 65.0
    if wind_speed <= 50:
        return 40.0
    if wind_speed <= 70:
        return 20.0
    return clamp_score(max(0.0, 20 - (wind_speed - 70) / 3))


def humidity_comfort(humidity: Optional[float]) -> float:
    """Comfort score for relative humidity; dry air is tolerated better than damp."""

    if humidity is None:
        return 50.0
    if 40 <= humidity <= 60:
        return 100.0

    if humidity < 40:
        if humidity < 20:
            return clamp_score(max(40.0, 60 + (humidity - 20)))
        return clamp_score(max(60.0, 100 - (40 - humidity) * 2))

    if humidity <= 70:
        return clamp_score(max(70.0, 100 - (humidity - 60) * 3))
    if humidity <= 80:
        return clamp_score(max(50.0, 70 - (humidity - 70) * 2))
    if humidity <= 90:
        return clamp_score(max(30.0, 50 - (humidity - 80) * 2))
    return clamp_score(max(10.0, 30 - (humidity - 90)))


def precipitation_score(probability: Optional[float]) -> float:
    probability = probability or 0.0
    if probability <= 10:
        return 100.0
    if probability <= 25:
        return 90.0
    if probability <= 40:
        return 70.0
    if probability <= 60:
        return 45.0
    if probability <= 80:
        return 25.0
    return 10.0


def uv_score(uv_index: Optional[float]) -> float:
    uv_index = uv_index or 0.0
    if uv_index <= 2:
        return 100.0
    if uv_index <= 5:
        return 80.0
    if uv_index <= 7:
        return 55.0
    if uv_index <= 10:
        return 30.0
    return 10.0


def air_quality_score(aqi: Optional[float]) -> float:
    aqi = aqi or 0.0
    if aqi <= 20:
        return 100.0
    if aqi <= 40:
        return 85.0
    if aqi <= 60:
        return 65.0
    if aqi <= 80:
        return 45.0
    if aqi <= 100:
        return 25.0
    return clamp_score(max(0.0, 25 - (aqi - 100) * 0.25))


def visibility_score(visibility_km: Optional[float]) -> float:
    if visibility_km is None:
        return 100.0
    if visibility_km >= 10:
        return 100.0
    if visibility_km >= 5:
        return 90.0
    if visibility_km >= 2:
        return 70.0
    if visibility_km >= 1:
        return 45.0
    return 20.0


def pollen_score(level: Optional[float]) -> float:
    """Score for a 0-5 pollen level."""

    level = level or 0.0
    if level <= 1:
        return 100.0
    if level <= 2:
        return 80.0
    if level <= 3:
        return 55.0
    if level <= 4:
        return 30.0
    return 10.0


FACTOR_FUNCTIONS = {
    "temperature": temperature_comfort,
    "precipitation": precipitation_score,
    "wind": wind_comfort,
    "humidity": humidity_comfort,
    "uv": uv_score,
    "air_quality": air_quality_score,
    "visibility": visibility_score,
    "pollen": pollen_score,
}


__all__ = [
    "FACTOR_FUNCTIONS",
    "air_quality_score",
    "clamp_score",
    "humidity_comfort",
    "pollen_score",
    "precipitation_score",
    "round_half_up",
    "temperature_comfort",
    "uv_score",
    "visibility_score",
    "wind_comfort",
]
