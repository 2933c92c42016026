"""Turn loose weather samples into fully-populated :class:`Conditions`."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from logic.comfort_math import apparent_temperature
from logic.factor_scoring import round_half_up
from models.weather_sample import (
    DEFAULT_AQI,
    DEFAULT_HUMIDITY_PCT,
    DEFAULT_POLLEN_COMPONENT,
    DEFAULT_PRECIP_PROBABILITY_PCT,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_UV_INDEX,
    DEFAULT_VISIBILITY_KM,
    DEFAULT_WIND_SPEED_KMH,
    AirQualityReading,
    Conditions,
    DailySummary,
    PollenReading,
    WeatherSample,
)


def is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def _first(*values: Optional[float], default: float) -> float:
    """First present, finite value; NaN and infinities count as missing."""

    for value in values:
        if is_finite(value):
            return float(value)
    return default


def pollen_level(pollen: PollenReading | None) -> float:
    """Mean of the three pollen groups on the 0-5 scale; a missing group counts as 1."""

    pollen = pollen or PollenReading()
    components = [
        _first(pollen.trees, default=DEFAULT_POLLEN_COMPONENT),
        _first(pollen.grass, default=DEFAULT_POLLEN_COMPONENT),
        _first(pollen.weeds, default=DEFAULT_POLLEN_COMPONENT),
    ]
    return float(round_half_up(sum(components) / len(components)))


def _feels_like(sample: WeatherSample, temperature: float, humidity: float, wind_speed: float, derive: bool) -> float:
    if is_finite(sample.feels_like):
        return float(sample.feels_like)
    if derive and is_finite(sample.temperature):
        return float(apparent_temperature(temperature, humidity, wind_speed))
    return temperature


def normalize_conditions(
    current: WeatherSample | None,
    daily: DailySummary | None = None,
    air_quality: AirQualityReading | None = None,
    pollen: PollenReading | None = None,
    derive_feels_like: bool = False,
) -> Conditions:
    """Apply the documented defaults and fallback chains to the current sample."""

    current = current or WeatherSample()
    daily = daily or DailySummary()
    air_quality = air_quality or AirQualityReading()

    temperature = _first(current.temperature, default=DEFAULT_TEMPERATURE_C)
    humidity = _first(current.humidity, default=DEFAULT_HUMIDITY_PCT)
    wind_speed = _first(current.wind_speed, default=DEFAULT_WIND_SPEED_KMH)
    return Conditions(
        temperature=temperature,
        feels_like=_feels_like(current, temperature, humidity, wind_speed, derive_feels_like),
        humidity=humidity,
        wind_speed=wind_speed,
        precipitation_probability=_first(
            current.precipitation_probability,
            daily.precipitation_probability_max,
            default=DEFAULT_PRECIP_PROBABILITY_PCT,
        ),
        uv_index=_first(current.uv_index, daily.uv_index_max, default=DEFAULT_UV_INDEX),
        visibility=_first(current.visibility, default=DEFAULT_VISIBILITY_KM),
        aqi=_first(air_quality.european_aqi, air_quality.us_aqi, default=DEFAULT_AQI),
        pollen_level=pollen_level(pollen),
        pressure=current.station_pressure if is_finite(current.station_pressure) else None,
    )


def normalize_hourly(
    sample: WeatherSample,
    fallback_aqi: float = DEFAULT_AQI,
    fallback_pollen: float = 0.0,
    derive_feels_like: bool = False,
) -> Conditions:
    """Normalize one forecast hour; AQI and pollen fall back to the current values."""

    temperature = _first(sample.temperature, default=DEFAULT_TEMPERATURE_C)
    humidity = _first(sample.humidity, default=DEFAULT_HUMIDITY_PCT)
    wind_speed = _first(sample.wind_speed, default=DEFAULT_WIND_SPEED_KMH)
    return Conditions(
        temperature=temperature,
        feels_like=_feels_like(sample, temperature, humidity, wind_speed, derive_feels_like),
        humidity=humidity,
        wind_speed=wind_speed,
        precipitation_probability=_first(sample.precipitation_probability, default=DEFAULT_PRECIP_PROBABILITY_PCT),
        uv_index=_first(sample.uv_index, default=DEFAULT_UV_INDEX),
        visibility=_first(sample.visibility, default=DEFAULT_VISIBILITY_KM),
        aqi=_first(sample.aqi, fallback_aqi, default=DEFAULT_AQI),
        pollen_level=_first(sample.pollen_level, fallback_pollen, default=0.0),
        pressure=sample.station_pressure if is_finite(sample.station_pressure) else None,
    )


def pressure_readings(
    hourly: Iterable[WeatherSample], limit: int = 6
) -> List[Tuple[Optional[datetime], float]]:
    """Pressure readings from the first ``limit`` hourly samples, in input order."""

    readings: List[Tuple[Optional[datetime], float]] = []
    for sample in list(hourly)[:limit]:
        pressure = sample.station_pressure
        if not is_finite(pressure):
            continue
        readings.append((sample.timestamp, float(pressure)))
    return readings


__all__ = ["is_finite", "normalize_conditions", "normalize_hourly", "pollen_level", "pressure_readings"]
