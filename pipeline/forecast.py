"""24-hour outdoor forecast view: hourly scores, trend and recommendations."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, List, Optional, Sequence

from health_app.config import EngineConfig
from logic.composite_score import calculate_outdoor_score
from logic.factor_scoring import round_half_up
from logic.normalization import normalize_hourly
from logic.time_window import find_best_time_window, sample_time
from models import priorities as p
from models.locale import Translator
from models.results import Forecast24h, ForecastHour, ForecastRecommendation, TimeWindow
from models.weather_sample import WeatherSample
from tools.observability import instrument_operation

TREND_HOURS = 6
TREND_MARGIN = 10
CAPPED_HOURS_WARNING = 3
HIGH_UV = 6
WARNING_COLOR = "#FF9800"


def _trend(scores: Sequence[int]) -> str:
    """Compare the mean of hours 6-12 with hours 0-6."""

    first = sum(scores[:TREND_HOURS]) / TREND_HOURS
    second = sum(scores[TREND_HOURS : TREND_HOURS * 2]) / TREND_HOURS
    if second > first + TREND_MARGIN:
        return "improving"
    if second < first - TREND_MARGIN:
        return "declining"
    return "stable"


def forecast_recommendations(
    hours: Sequence[ForecastHour],
    best_window: Optional[TimeWindow],
    translator: Translator,
) -> List[ForecastRecommendation]:
    recommendations: List[ForecastRecommendation] = []

    if best_window is not None:
        recommendations.append(
            ForecastRecommendation(
                type="best-time",
                priority=p.FORECAST_BEST_TIME,
                icon="⭐",
                title=translator.t("forecast_best_time_title"),
                message=translator.t(
                    "forecast_best_time_message",
                    window=best_window.display_text,
                    score=best_window.average_score,
                ),
                color=best_window.color,
            )
        )

    capped = [hour for hour in hours if hour.capped]
    if len(capped) > CAPPED_HOURS_WARNING:
        title_key = "forecast_rain_expected" if capped[0].capped_by == "precipitation" else "forecast_strong_wind"
        recommendations.append(
            ForecastRecommendation(
                type="warning",
                priority=p.FORECAST_CAPPED_HOURS,
                icon="⚠️",
                title=translator.t(title_key),
                message=translator.t("forecast_limited_hours", count=len(capped)),
                color=WARNING_COLOR,
            )
        )

    high_uv = [hour.uv_index for hour in hours if hour.uv_index >= HIGH_UV]
    if high_uv:
        recommendations.append(
            ForecastRecommendation(
                type="uv",
                priority=p.FORECAST_UV,
                icon="☀️",
                title=translator.t("forecast_uv_title"),
                message=translator.t("forecast_uv_message", value=round_half_up(max(high_uv))),
                color=WARNING_COLOR,
            )
        )

    return sorted(recommendations, key=lambda item: -item.priority)


@instrument_operation("engine.forecast_24h")
def forecast_24h(
    hourly: Sequence[WeatherSample],
    config: EngineConfig | None = None,
    translator: Translator | None = None,
    aqi_value: float = 0.0,
    pollen_level: float = 0.0,
    clock: Callable[[], datetime] | None = None,
) -> Forecast24h:
    """Build the 24-hour view; samples without a timestamp are placed hourly from now."""

    config = config or EngineConfig()
    translator = translator or Translator(config.settings.language)
    if not hourly:
        return Forecast24h(trend_label=translator.t("trend_stable"))

    clock = clock or datetime.now
    horizon = list(hourly)[: config.timeline_hours]
    start = clock()
    hours: List[ForecastHour] = []
    for index, sample in enumerate(horizon):
        conditions = normalize_hourly(sample, aqi_value, pollen_level, config.derive_feels_like)
        result = calculate_outdoor_score(conditions, config, translator)
        moment = sample.timestamp or start + timedelta(hours=index)
        hours.append(
            ForecastHour(
                index=index,
                time=sample_time(sample) or moment.isoformat(),
                hour=moment.hour,
                display_time=f"{moment.hour:02d}:00",
                score=result.score,
                label=result.label,
                label_text=result.label_text,
                color=result.color,
                capped=result.capped,
                capped_by=result.capped_by,
                is_night=config.is_night(moment.hour),
                uv_index=conditions.uv_index,
            )
        )

    best_window = find_best_time_window(
        horizon, config, translator, fallback_aqi=aqi_value, fallback_pollen=pollen_level
    )
    scores = [hour.score for hour in hours]
    trend = _trend(scores)
    return Forecast24h(
        hours=hours,
        best_window=best_window,
        average_score=round_half_up(sum(scores) / len(scores)),
        trend=trend,
        trend_label=translator.t(f"trend_{trend}"),
        recommendations=forecast_recommendations(hours, best_window, translator),
    )


__all__ = ["forecast_24h", "forecast_recommendations"]
