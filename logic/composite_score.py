"""Weighted multi-factor outdoor comfort score with hard critical caps."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from health_app.config import EngineConfig
from logic.factor_scoring import FACTOR_FUNCTIONS, clamp_score, round_half_up
from models.locale import Translator
from models.results import CompositeScore, FactorResult
from models.weather_sample import Conditions

# (lower bound, band id, color); first match wins.
SCORE_BANDS: List[Tuple[float, str, str]] = [
    (80, "excellent", "#4ade80"),
    (60, "good", "#a3e635"),
    (40, "moderate", "#fbbf24"),
    (20, "poor", "#fb923c"),
    (float("-inf"), "critical", "#ef4444"),
]


def score_band(score: float) -> Tuple[str, str]:
    """Return ``(label, color)`` for a score."""

    for lower, label, color in SCORE_BANDS:
        if score >= lower:
            return label, color
    return SCORE_BANDS[-1][1], SCORE_BANDS[-1][2]


def score_color(score: float) -> str:
    return score_band(score)[1]


def _factor_values(conditions: Conditions) -> Dict[str, float]:
    return {
        "temperature": conditions.feels_like,
        "precipitation": conditions.precipitation_probability,
        "wind": conditions.wind_speed,
        "humidity": conditions.humidity,
        "uv": conditions.uv_index,
        "air_quality": conditions.aqi,
        "visibility": conditions.visibility,
        "pollen": conditions.pollen_level,
    }


def detect_critical_breach(conditions: Conditions, config: EngineConfig) -> Optional[str]:
    """Return the factor that breaches its critical threshold, precipitation first."""

    if conditions.precipitation_probability > config.critical_precipitation_probability:
        return "precipitation"
    if conditions.wind_speed > config.critical_wind_speed:
        return "wind"
    return None


def calculate_outdoor_score(
    conditions: Conditions,
    config: EngineConfig | None = None,
    translator: Translator | None = None,
) -> CompositeScore:
    """Combine the per-factor scores into one 0-100 comfort score."""

    config = config or EngineConfig()
    translator = translator or Translator(config.settings.language)

    capped_by = detect_critical_breach(conditions, config)
    critical_flags = {
        "precipitation": conditions.precipitation_probability > config.critical_precipitation_probability,
        "wind": conditions.wind_speed > config.critical_wind_speed,
    }

    factors: Dict[str, FactorResult] = {}
    for factor, raw_value in _factor_values(conditions).items():
        factors[factor] = FactorResult(
            factor=factor,
            score=clamp_score(FACTOR_FUNCTIONS[factor](raw_value)),
            weight=config.weights[factor],
            raw_value=raw_value,
            critical=critical_flags.get(factor, False),
        )

    weighted = sum(result.score * result.weight for result in factors.values())
    score = int(max(0, min(100, round_half_up(weighted))))
    if capped_by is not None:
        score = min(score, config.max_score_on_critical)

    label, color = score_band(score)
    return CompositeScore(
        score=score,
        factors=factors,
        capped=capped_by is not None,
        capped_by=capped_by,
        label=label,
        label_text=translator.t(label),
        color=color,
    )


__all__ = ["SCORE_BANDS", "calculate_outdoor_score", "detect_critical_breach", "score_band", "score_color"]
