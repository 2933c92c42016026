"""Normalized weather input records and the fully-populated conditions record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Defaults applied when a sample omits a field.
DEFAULT_TEMPERATURE_C = 20.0
DEFAULT_HUMIDITY_PCT = 50.0
DEFAULT_WIND_SPEED_KMH = 0.0
DEFAULT_PRECIP_PROBABILITY_PCT = 0.0
DEFAULT_UV_INDEX = 0.0
DEFAULT_VISIBILITY_KM = 10.0
DEFAULT_AQI = 0.0
DEFAULT_POLLEN_COMPONENT = 1.0
DEFAULT_POLLEN_LEVEL = 0.0


@dataclass(frozen=True)
class WeatherSample:
    """One observation or forecast point. Every field may be missing."""

    temperature: Optional[float] = None
    feels_like: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    precipitation_probability: Optional[float] = None
    uv_index: Optional[float] = None
    visibility: Optional[float] = None
    aqi: Optional[float] = None
    pollen_level: Optional[float] = None
    pressure: Optional[float] = None
    surface_pressure: Optional[float] = None
    timestamp: Optional[datetime] = None
    time_label: Optional[str] = None

    @property
    def station_pressure(self) -> Optional[float]:
        """Sea-level pressure when reported, otherwise surface pressure."""

        return self.pressure if self.pressure is not None else self.surface_pressure


@dataclass(frozen=True)
class DailySummary:
    """The subset of a daily forecast used as fallback for current values."""

    precipitation_probability_max: Optional[float] = None
    uv_index_max: Optional[float] = None


@dataclass(frozen=True)
class AirQualityReading:
    european_aqi: Optional[float] = None
    us_aqi: Optional[float] = None
    label: Optional[str] = None

    @property
    def value(self) -> Optional[float]:
        return self.european_aqi if self.european_aqi is not None else self.us_aqi


@dataclass(frozen=True)
class PollenReading:
    """Pollen counts already mapped onto the 0-5 scale."""

    trees: Optional[float] = None
    grass: Optional[float] = None
    weeds: Optional[float] = None


CRITICAL_ALERT_SEVERITIES = frozenset({"red", "critical"})


@dataclass(frozen=True)
class WeatherAlert:
    """An official warning issued by an external weather service."""

    title: Optional[str] = None
    severity: Optional[str] = None

    @property
    def is_critical(self) -> bool:
        return (self.severity or "").lower() in CRITICAL_ALERT_SEVERITIES


@dataclass(frozen=True)
class Conditions:
    """Fully-populated conditions used by every scoring function."""

    temperature: float = DEFAULT_TEMPERATURE_C
    feels_like: float = DEFAULT_TEMPERATURE_C
    humidity: float = DEFAULT_HUMIDITY_PCT
    wind_speed: float = DEFAULT_WIND_SPEED_KMH
    precipitation_probability: float = DEFAULT_PRECIP_PROBABILITY_PCT
    uv_index: float = DEFAULT_UV_INDEX
    visibility: float = DEFAULT_VISIBILITY_KM
    aqi: float = DEFAULT_AQI
    pollen_level: float = DEFAULT_POLLEN_LEVEL
    pressure: Optional[float] = None


__all__ = [
    "AirQualityReading",
    "Conditions",
    "DailySummary",
    "PollenReading",
    "WeatherAlert",
    "WeatherSample",
    "DEFAULT_AQI",
    "DEFAULT_HUMIDITY_PCT",
    "DEFAULT_POLLEN_COMPONENT",
    "DEFAULT_POLLEN_LEVEL",
    "DEFAULT_PRECIP_PROBABILITY_PCT",
    "DEFAULT_TEMPERATURE_C",
    "DEFAULT_UV_INDEX",
    "DEFAULT_VISIBILITY_KM",
    "DEFAULT_WIND_SPEED_KMH",
]
