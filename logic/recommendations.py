"""Priority-ranked quick checks for the current conditions.

Two entry points exist. :func:`quick_checks` is the simple card set (rain,
UV, jacket, sleep, wind). :func:`prioritized_checks` additionally arbitrates
safety items (external alerts, frost, storm, air quality) above the
everyday questions and shifts the sleep item with the time of day.

Both return fresh items sorted by priority, highest first; equal priorities
keep their insertion order.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from logic.comfort_math import sleep_quality
from logic.factor_scoring import round_half_up
from models import priorities as p
from models.locale import Translator
from models.results import RecommendationItem
from models.weather_sample import Conditions, WeatherAlert

# band -> (answer key, icon, color)
RAIN_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "certain": ("a_yes_definitely", "☔", "#F44336"),
    "likely": ("a_just_in_case", "🌂", "#FF9800"),
    "unlikely": ("a_not_needed", "✓", "#4CAF50"),
}
UV_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "very_high": ("a_essential", "🧴", "#F44336"),
    "high": ("a_recommended", "🕶️", "#FF9800"),
    "moderate": ("a_extended_time", "☀️", "#FFC107"),
    "low": ("a_not_needed", "✓", "#4CAF50"),
}
JACKET_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "heavy": ("a_heavy_coat", "🧥", "#2196F3"),
    "warm": ("a_warm_jacket", "🧤", "#4CAF50"),
    "rain": ("a_rain_jacket", "🧥", "#42A5F5"),
    "light": ("a_light_jacket", "🧥", "#8BC34A"),
    "none": ("a_not_needed", "✓", "#4CAF50"),
}
SLEEP_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "very_good": ("a_sleep_very_good", "😴", "#4CAF50"),
    "good": ("a_sleep_good", "🛏️", "#8BC34A"),
    "limited": ("a_sleep_limited", "🌡️", "#FF9800"),
}
SLEEP_FORECAST_ANSWERS = {
    "very_good": "a_good_night_expected",
    "good": "a_ok_tonight",
    "limited": "a_difficult_night",
}
WIND_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "storm": ("a_strong_wind", "🌪️", "#F44336"),
    "gusty": ("a_gusty_wind", "💨", "#FF9800"),
}

QUICK_RAIN_PRIORITY = {"certain": p.QUICK_RAIN_CERTAIN, "likely": p.QUICK_RAIN_LIKELY, "unlikely": p.QUICK_RAIN_UNLIKELY}
RAIN_PRIORITY = {"certain": p.RAIN_CERTAIN, "likely": p.RAIN_LIKELY, "unlikely": p.RAIN_UNLIKELY}
QUICK_UV_PRIORITY = {
    "very_high": p.QUICK_UV_VERY_HIGH,
    "high": p.QUICK_UV_HIGH,
    "moderate": p.QUICK_UV_MODERATE,
    "low": p.QUICK_UV_LOW,
}
UV_PRIORITY = {"very_high": p.UV_VERY_HIGH, "high": p.UV_HIGH, "moderate": p.UV_MODERATE, "low": p.UV_LOW}
QUICK_JACKET_PRIORITY = {
    "heavy": p.QUICK_JACKET_HEAVY,
    "warm": p.QUICK_JACKET_WARM,
    "rain": p.QUICK_JACKET_LIGHT,
    "light": p.QUICK_JACKET_LIGHT,
    "none": p.QUICK_JACKET_NONE,
}
QUICK_SLEEP_PRIORITY = {
    "very_good": p.QUICK_SLEEP_VERY_GOOD,
    "good": p.QUICK_SLEEP_GOOD,
    "limited": p.QUICK_SLEEP_LIMITED,
}


def rain_band(probability: float, likely_at: float) -> str:
    if probability >= 70:
        return "certain"
    if probability >= likely_at:
        return "likely"
    return "unlikely"


def uv_band(uv_index: float) -> str:
    if uv_index >= 8:
        return "very_high"
    if uv_index >= 5:
        return "high"
    if uv_index >= 3:
        return "moderate"
    return "low"


def jacket_band(feels_like: float, precipitation_probability: float) -> str:
    if feels_like <= 5:
        return "heavy"
    if feels_like <= 12:
        return "warm"
    if precipitation_probability >= 50:
        return "rain"
    if feels_like <= 18:
        return "light"
    return "none"


def sleep_band(score: float) -> str:
    if score >= 80:
        return "very_good"
    if score >= 60:
        return "good"
    return "limited"


def sleep_score(temperature: float, humidity: float) -> float:
    """Quick sleep sub-score; 16-19 °C and 30-70 % humidity lose nothing."""

    score = 100.0
    if temperature < 14:
        score -= (14 - temperature) * 5
    elif temperature > 22:
        score -= (temperature - 22) * 8
    elif temperature < 16 or temperature > 19:
        score -= 10

    if humidity < 30:
        score -= (30 - humidity) * 0.5
    elif humidity > 70:
        score -= (humidity - 70) * 0.5
    return max(0.0, min(100.0, score))


def sort_by_priority(items: Iterable[RecommendationItem]) -> List[RecommendationItem]:
    return sorted(items, key=lambda item: -item.priority)


def _item(
    translator: Translator,
    item_id: str,
    category: str,
    question_key: str,
    tokens: Tuple[str, str, str],
    priority: int,
    detail: str,
    answer_key: Optional[str] = None,
) -> RecommendationItem:
    default_answer, icon, color = tokens
    return RecommendationItem(
        id=item_id,
        category=category,
        priority=priority,
        display_text=translator.t(question_key),
        answer=translator.t(answer_key or default_answer),
        icon=icon,
        color=color,
        detail=detail,
    )


def quick_checks(
    conditions: Conditions,
    is_night: bool = False,
    max_uv: Optional[float] = None,
    translator: Translator | None = None,
) -> List[RecommendationItem]:
    """The simple check set: umbrella, sun protection, jacket, sleep and wind."""

    translator = translator or Translator()
    rain = conditions.precipitation_probability
    feels = conditions.feels_like
    wind = conditions.wind_speed
    effective_uv = max(conditions.uv_index, max_uv if max_uv is not None else conditions.uv_index)
    checks: List[RecommendationItem] = []

    band = rain_band(rain, likely_at=40)
    checks.append(
        _item(
            translator, "umbrella", "umbrella", "q_umbrella", RAIN_TOKENS[band],
            QUICK_RAIN_PRIORITY[band], translator.t("detail_rain", value=round_half_up(rain)),
        )
    )

    band = uv_band(effective_uv)
    checks.append(
        _item(
            translator, "sunprotection", "uv", "q_sun_protection", UV_TOKENS[band],
            p.QUICK_UV_NIGHT if is_night else QUICK_UV_PRIORITY[band],
            translator.t("detail_uv", value=round_half_up(effective_uv)),
        )
    )

    band = jacket_band(feels, rain)
    checks.append(
        _item(
            translator, "jacket", "clothing", "q_jacket", JACKET_TOKENS[band],
            QUICK_JACKET_PRIORITY[band], translator.t("detail_feels", value=round_half_up(feels)),
        )
    )

    outlook = sleep_quality(conditions.temperature, conditions.humidity, translator=translator)
    band = sleep_band(outlook.score)
    night_priority, day_priority = QUICK_SLEEP_PRIORITY[band]
    checks.append(
        _item(
            translator, "sleep", "sleep", "q_sleep_quality", SLEEP_TOKENS[band],
            night_priority if is_night else day_priority, outlook.advice,
        )
    )

    if wind >= 30:
        storm = wind >= 50
        checks.append(
            _item(
                translator, "wind", "wind", "q_wind", WIND_TOKENS["storm" if storm else "gusty"],
                p.QUICK_WIND_STORM if storm else p.QUICK_WIND_GUSTY,
                translator.t("detail_wind", value=round_half_up(wind)),
            )
        )

    return sort_by_priority(checks)


def _safety_checks(
    conditions: Conditions, alerts: Iterable[WeatherAlert], translator: Translator
) -> List[RecommendationItem]:
    checks: List[RecommendationItem] = []
    feels = conditions.feels_like
    wind = conditions.wind_speed

    critical = [alert for alert in alerts if alert.is_critical]
    if critical:
        checks.append(
            _item(
                translator, "alert-critical", "alert", "q_weather_warnings",
                ("a_warning_active", "🚨", "#F44336"), p.SAFETY_CRITICAL_ALERT,
                critical[0].title or translator.t("detail_critical_alert"),
            )
        )

    if feels <= 0:
        severe = feels <= -5
        checks.append(
            _item(
                translator, "frost", "frost", "q_frost",
                ("a_frost_caution" if severe else "a_light_frost", "❄️", "#F44336" if severe else "#4FC3F7"),
                p.SAFETY_SEVERE_FROST if severe else p.SAFETY_FROST,
                translator.t("detail_frost", value=round_half_up(feels)),
            )
        )

    if wind >= 50:
        checks.append(
            _item(
                translator, "storm", "storm", "q_storm", ("a_stay_inside", "🌪️", "#F44336"),
                p.SAFETY_STORM, translator.t("detail_wind", value=round_half_up(wind)),
            )
        )
    return checks


def prioritized_checks(
    conditions: Conditions,
    is_night: bool,
    max_uv: Optional[float] = None,
    alerts: Iterable[WeatherAlert] = (),
    translator: Translator | None = None,
) -> List[RecommendationItem]:
    """Context-sensitive checks: safety first, then rain, UV, sleep, jacket and advisories.

    The sun protection item is omitted at night; the sleep item becomes the
    night's primary question after dark and a low-priority forecast by day.
    """

    translator = translator or Translator()
    rain = conditions.precipitation_probability
    feels = conditions.feels_like
    wind = conditions.wind_speed
    aqi = conditions.aqi
    checks = _safety_checks(conditions, alerts, translator)

    band = rain_band(rain, likely_at=30)
    checks.append(
        _item(
            translator, "umbrella", "umbrella", "q_umbrella", RAIN_TOKENS[band],
            RAIN_PRIORITY[band], translator.t("detail_rain", value=round_half_up(rain)),
        )
    )

    if not is_night:
        effective_uv = max(conditions.uv_index, max_uv if max_uv is not None else conditions.uv_index)
        band = uv_band(effective_uv)
        checks.append(
            _item(
                translator, "sunprotection", "uv", "q_sun_protection", UV_TOKENS[band],
                UV_PRIORITY[band], translator.t("detail_uv", value=round_half_up(effective_uv)),
            )
        )

    band = sleep_band(sleep_score(conditions.temperature, conditions.humidity))
    if is_night:
        checks.append(
            _item(
                translator, "sleep", "sleep", "q_sleep_quality", SLEEP_TOKENS[band], p.SLEEP_NIGHT,
                translator.t(
                    "detail_sleep",
                    temperature=round_half_up(conditions.temperature),
                    humidity=round_half_up(conditions.humidity),
                ),
            )
        )
    else:
        _, _, color = SLEEP_TOKENS[band]
        checks.append(
            _item(
                translator, "sleep", "sleep", "q_sleep_forecast", (SLEEP_FORECAST_ANSWERS[band], "🛏️", color),
                p.SLEEP_DAY, translator.t("detail_tonight"),
            )
        )

    band = jacket_band(feels, rain)
    if feels <= 5:
        jacket_priority = p.JACKET_HEAVY
    elif feels <= 12:
        jacket_priority = p.JACKET_WARM
    else:
        jacket_priority = p.JACKET_DEFAULT
    checks.append(
        _item(
            translator, "jacket", "clothing", "q_jacket", JACKET_TOKENS[band], jacket_priority,
            translator.t("detail_feels", value=round_half_up(feels)),
        )
    )

    if 30 <= wind < 50:
        checks.append(
            _item(
                translator, "wind", "wind", "q_wind", WIND_TOKENS["gusty"], p.WIND_ADVISORY,
                translator.t("detail_wind", value=round_half_up(wind)),
            )
        )

    if aqi >= 100:
        very_poor = aqi >= 150
        checks.append(
            _item(
                translator, "aqi", "aqi", "q_air_quality",
                ("a_aqi_poor" if very_poor else "a_aqi_moderate", "😷", "#F44336" if very_poor else "#FF9800"),
                p.AQI_VERY_POOR if very_poor else p.AQI_POOR,
                translator.t("detail_aqi", value=round_half_up(aqi)),
            )
        )

    return sort_by_priority(checks)


__all__ = [
    "jacket_band",
    "prioritized_checks",
    "quick_checks",
    "rain_band",
    "sleep_band",
    "sleep_score",
    "sort_by_priority",
    "uv_band",
]
