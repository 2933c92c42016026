"""Human comfort formulas: felt temperature, dew point, UV bands, sleep and activities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Optional

from logic.factor_scoring import humidity_comfort, round_half_up
from models.locale import Translator
from models.results import ActivitySuitability, DewPointComfort, UVRiskLevel
from models.weather_sample import Conditions

# Wind chill is only defined for cold air with some wind.
WIND_CHILL_MAX_TEMP_C = 10.0
WIND_CHILL_MIN_WIND_KMH = 4.8
HEAT_INDEX_MIN_TEMP_C = 27.0
HEAT_INDEX_MIN_HUMIDITY = 40.0

SLEEP_WEIGHTS = {"temperature": 0.5, "humidity": 0.3, "pressure": 0.2}


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def wind_chill(temperature: Optional[float], wind_speed: Optional[float]) -> Optional[float]:
    """North American wind chill index in °C.

    Outside its valid range (above 10 °C or below 4.8 km/h) the air
    temperature is returned unchanged.
    """

    if temperature is None or wind_speed is None:
        return None
    if temperature > WIND_CHILL_MAX_TEMP_C or wind_speed < WIND_CHILL_MIN_WIND_KMH:
        return temperature
    v016 = math.pow(wind_speed, 0.16)
    chill = 13.12 + 0.6215 * temperature - 11.37 * v016 + 0.3965 * temperature * v016
    return _one_decimal(chill)


def heat_index(temperature: Optional[float], humidity: Optional[float]) -> Optional[float]:
    """Rothfusz heat index in °C, with the NWS low and high humidity adjustments."""

    if temperature is None or humidity is None:
        return temperature
    if temperature < HEAT_INDEX_MIN_TEMP_C:
        return temperature

    t = temperature * 9 / 5 + 32
    r = humidity
    hi = (
        -42.379
        + 2.04901523 * t
        + 10.14333127 * r
        - 0.22475541 * t * r
        - 0.00683783 * t * t
        - 0.05481717 * r * r
        + 0.00122874 * t * t * r
        + 0.00085282 * t * r * r
        - 0.00000199 * t * t * r * r
    )
    if r < 13 and 80 <= t <= 112:
        hi -= ((13 - r) / 4) * math.sqrt((17 - abs(t - 95)) / 17)
    elif r > 85 and 80 <= t <= 87:
        hi += ((r - 85) / 10) * ((87 - t) / 5)
    return _one_decimal((hi - 32) * 5 / 9)


def apparent_temperature(
    temperature: Optional[float],
    humidity: Optional[float],
    wind_speed: Optional[float],
) -> Optional[float]:
    """Felt temperature: wind chill when cold and windy, heat index when hot and humid."""

    if temperature is None:
        return None
    if wind_speed is not None and temperature <= WIND_CHILL_MAX_TEMP_C and wind_speed >= WIND_CHILL_MIN_WIND_KMH:
        return wind_chill(temperature, wind_speed)
    if humidity is not None and temperature >= HEAT_INDEX_MIN_TEMP_C and humidity >= HEAT_INDEX_MIN_HUMIDITY:
        return heat_index(temperature, humidity)
    return temperature


def dew_point(temperature: Optional[float], humidity: Optional[float]) -> Optional[float]:
    """Magnus-Tetens dew point in °C. Zero humidity has no dew point."""

    if temperature is None or humidity is None or humidity <= 0:
        return None
    a, b = 17.27, 237.7
    if temperature == -b:
        return None
    alpha = (a * temperature) / (b + temperature) + math.log(humidity / 100)
    if alpha == a:
        return None
    return _one_decimal((b * alpha) / (a - alpha))


# (upper bound exclusive, level, score)
_DEW_POINT_BANDS = [
    (10, "dry", 85),
    (13, "comfortable", 100),
    (16, "slightly_humid", 90),
    (18, "humid", 70),
    (21, "very_humid", 50),
    (24, "oppressive", 30),
]


def dew_point_comfort(dew_point_c: Optional[float], translator: Translator | None = None) -> DewPointComfort:
    translator = translator or Translator()
    if dew_point_c is None:
        return DewPointComfort("unknown", translator.t("dew_point_unknown"), 50)
    for upper, level, score in _DEW_POINT_BANDS:
        if dew_point_c < upper:
            return DewPointComfort(level, translator.t(f"dew_point_{level}"), score)
    return DewPointComfort("extreme", translator.t("dew_point_extreme"), 10)


# (upper bound exclusive, level, color, score)
_UV_BANDS = [
    (3, "low", "#4CAF50", 100),
    (6, "moderate", "#FFC107", 80),
    (8, "high", "#FF9800", 55),
    (11, "very_high", "#F44336", 30),
]


def uv_risk_level(uv_index: Optional[float], translator: Translator | None = None) -> UVRiskLevel:
    """Risk band and protection advice for a UV index."""

    translator = translator or Translator()
    if uv_index is None:
        return UVRiskLevel(level="unknown", risk="–", protection="–", color="#9E9E9E", score=50)
    for upper, level, color, score in _UV_BANDS:
        if uv_index < upper:
            break
    else:
        level, color, score = "extreme", "#9C27B0", 10
    return UVRiskLevel(
        level=level,
        risk=translator.t(f"uv_risk_{level}"),
        protection=translator.t(f"uv_protection_{level}"),
        color=color,
        score=score,
    )


@dataclass(frozen=True)
class SleepFactor:
    score: float
    issue: Optional[str] = None


@dataclass(frozen=True)
class SleepQuality:
    """Weighted sleep outlook (optimal 16-19 °C, 40-60 % humidity)."""

    score: int
    advice: str
    factors: Dict[str, SleepFactor] = field(default_factory=dict)


def _sleep_temperature_factor(temperature: float) -> SleepFactor:
    if 16 <= temperature <= 19:
        return SleepFactor(100.0)
    if temperature < 16:
        score = 50.0 if temperature < 10 else max(60.0, 100 - (16 - temperature) * 6.67)
        return SleepFactor(score, "cold")
    score = 30.0 if temperature > 26 else max(40.0, 100 - (temperature - 19) * 8.57)
    return SleepFactor(score, "warm")


def sleep_quality(
    temperature: Optional[float],
    humidity: Optional[float],
    pressure: Optional[float] = None,
    translator: Translator | None = None,
) -> SleepQuality:
    """Predict sleep quality from night-time temperature, humidity and pressure.

    Only the factors that are present contribute; their weights are
    renormalised. With no factors at all the score is a neutral 70.
    """

    translator = translator or Translator()
    factors: Dict[str, SleepFactor] = {}
    if temperature is not None:
        factors["temperature"] = _sleep_temperature_factor(temperature)
    if humidity is not None:
        if 40 <= humidity <= 60:
            factors["humidity"] = SleepFactor(100.0)
        else:
            factors["humidity"] = SleepFactor(humidity_comfort(humidity), "dry" if humidity < 40 else "humid")
    if pressure is not None:
        factors["pressure"] = SleepFactor(90.0, None)

    total_weight = sum(SLEEP_WEIGHTS[name] for name in factors)
    if total_weight > 0:
        weighted = sum(factor.score * SLEEP_WEIGHTS[name] for name, factor in factors.items())
        score = round_half_up(weighted / total_weight)
    else:
        score = 70

    temperature_issue = factors.get("temperature", SleepFactor(0)).issue
    humidity_issue = factors.get("humidity", SleepFactor(0)).issue
    if score >= 80:
        advice = "sleep_good"
    elif temperature_issue == "warm":
        advice = "sleep_ventilate"
    elif temperature_issue == "cold":
        advice = "sleep_warm_blanket"
    elif humidity_issue == "dry":
        advice = "sleep_humidifier"
    elif humidity_issue == "humid":
        advice = "sleep_close_windows"
    else:
        advice = "sleep_moderate"
    return SleepQuality(score=score, advice=translator.t(advice), factors=factors)


def _rate(score: int, suitable_at: int, top_at: int, notes: tuple[str, str, str], translator: Translator) -> ActivitySuitability:
    score = max(0, score)
    if score >= top_at:
        note = notes[0]
    elif score >= suitable_at:
        note = notes[1]
    else:
        note = notes[2]
    return ActivitySuitability(score=score, suitable=score >= suitable_at, note=translator.t(note))


def activity_suitability(conditions: Conditions, translator: Translator | None = None) -> Dict[str, ActivitySuitability]:
    """Rate running, cycling, hiking and gardening for the given conditions."""

    translator = translator or Translator()
    temp = conditions.temperature
    wind = conditions.wind_speed
    rain = conditions.precipitation_probability
    uv = conditions.uv_index

    running = 100
    if temp < 5 or temp > 28:
        running -= 30
    if wind > 30:
        running -= 20
    if rain > 40:
        running -= 25
    if conditions.humidity > 80:
        running -= 15

    # Cycling is the most wind-sensitive.
    cycling = 100
    if temp < 8 or temp > 30:
        cycling -= 25
    if wind > 25:
        cycling -= 35
    if rain > 30:
        cycling -= 30

    hiking = 100
    if temp < 10 or temp > 26:
        hiking -= 20
    if rain > 50:
        hiking -= 40
    if uv > 7:
        hiking -= 15

    gardening = 100
    if temp < 12 or temp > 28:
        gardening -= 25
    if rain > 60:
        gardening -= 30
    if uv > 6:
        gardening -= 20
    if wind > 35:
        gardening -= 20

    return {
        "running": _rate(
            running, 60, 80, ("activity_ideal", "activity_suitable", "activity_not_recommended"), translator
        ),
        "cycling": _rate(cycling, 55, 75, ("activity_ideal", "activity_possible", "activity_difficult"), translator),
        "hiking": _rate(
            hiking, 50, 70, ("activity_good_conditions", "activity_with_caution", "activity_not_ideal"), translator
        ),
        "gardening": _rate(
            gardening, 55, 75, ("activity_perfect", "activity_suitable", "activity_postpone"), translator
        ),
    }


__all__ = [
    "ActivitySuitability",
    "DewPointComfort",
    "SleepQuality",
    "activity_suitability",
    "apparent_temperature",
    "dew_point",
    "dew_point_comfort",
    "heat_index",
    "sleep_quality",
    "uv_risk_level",
    "wind_chill",
]
