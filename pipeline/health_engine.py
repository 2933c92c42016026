"""Orchestration of one complete health analysis."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from health_app.config import EngineConfig
from health_app.logging_config import get_logger, log_event
from logic.bio_signals import headache_risk, vitamin_d_timer
from logic.comfort_math import activity_suitability, dew_point, dew_point_comfort
from logic.composite_score import calculate_outdoor_score
from logic.normalization import is_finite, normalize_conditions, normalize_hourly, pressure_readings
from logic.recommendations import prioritized_checks, quick_checks
from logic.safety_alerts import safety_alerts
from logic.time_window import find_best_time_window, sample_time
from models.locale import Translator
from models.results import Forecast24h, HealthAnalysis, TimelinePoint
from models.weather_sample import (
    AirQualityReading,
    Conditions,
    DailySummary,
    PollenReading,
    WeatherAlert,
    WeatherSample,
)
from pipeline.forecast import forecast_24h
from tools.observability import instrument_operation

LOGGER = get_logger(__name__)


class HealthEngine:
    """Runs every scorer over one observation and its hourly forecast.

    The engine holds only immutable configuration and a clock; each call
    builds its results from scratch, so equal inputs and equal clock
    readings give equal analyses.
    """

    def __init__(self, config: EngineConfig | None = None, clock: Callable[[], datetime] | None = None) -> None:
        self.config = config or EngineConfig()
        self.clock = clock or datetime.now
        self.translator = Translator(self.config.settings.language)

    def is_night(self, moment: datetime | None = None) -> bool:
        moment = moment or self.clock()
        return self.config.is_night(moment.hour)

    def _timeline(self, horizon: Sequence[WeatherSample], conditions: Conditions) -> List[TimelinePoint]:
        points: List[TimelinePoint] = []
        for sample in horizon:
            hour_conditions = normalize_hourly(
                sample, conditions.aqi, conditions.pollen_level, self.config.derive_feels_like
            )
            result = calculate_outdoor_score(hour_conditions, self.config, self.translator)
            points.append(TimelinePoint(time=sample_time(sample), score=result.score, color=result.color))
        return points

    def _max_uv(self, conditions: Conditions, hourly: Sequence[WeatherSample]) -> float:
        lookahead = hourly[: self.config.uv_lookahead_hours]
        return max([conditions.uv_index] + [sample.uv_index for sample in lookahead if is_finite(sample.uv_index)])

    @instrument_operation("engine.analyze")
    def analyze(
        self,
        current: WeatherSample | None,
        hourly: Iterable[WeatherSample] = (),
        daily: DailySummary | None = None,
        air_quality: AirQualityReading | None = None,
        pollen: PollenReading | None = None,
        alerts: Iterable[WeatherAlert] = (),
        last_updated: str | None = None,
    ) -> HealthAnalysis:
        """Score current conditions and derive windows, risks, checks and alerts."""

        settings = self.config.settings
        hourly = list(hourly)
        horizon = hourly[: self.config.timeline_hours]
        now = self.clock()
        is_night = self.is_night(now)

        conditions = normalize_conditions(current, daily, air_quality, pollen, self.config.derive_feels_like)
        outdoor_score = calculate_outdoor_score(conditions, self.config, self.translator)
        best_time_window = find_best_time_window(
            horizon,
            self.config,
            self.translator,
            fallback_aqi=conditions.aqi,
            fallback_pollen=conditions.pollen_level,
        )

        headache = headache_risk(
            pressure_readings(hourly, self.config.pressure_history_samples),
            migraine_sensitive=settings.migraine_sensitive,
            tiers=4,
            window_hours=self.config.pressure_window_hours,
            translator=self.translator,
        )
        vitamin_d = vitamin_d_timer(conditions.uv_index, settings.skin_type, self.translator)

        max_uv = self._max_uv(conditions, hourly)
        dew_point_c = dew_point(conditions.temperature, conditions.humidity)
        analysis = HealthAnalysis(
            outdoor_score=outdoor_score,
            best_time_window=best_time_window,
            headache_risk=headache,
            vitamin_d_timer=vitamin_d,
            quick_checks=quick_checks(conditions, is_night, max_uv, self.translator),
            prioritized_checks=prioritized_checks(conditions, is_night, max_uv, list(alerts), self.translator),
            safety_alerts=safety_alerts(conditions, headache, settings.migraine_sensitive, self.translator),
            timeline=self._timeline(horizon, conditions),
            conditions=conditions,
            last_updated=last_updated or now.isoformat(),
            is_night=is_night,
            language=self.translator.language,
            max_uv=max_uv,
            dew_point=dew_point_c,
            dew_point_comfort=dew_point_comfort(dew_point_c, self.translator),
            activities=activity_suitability(conditions, self.translator),
        )
        log_event(
            LOGGER,
            logging.DEBUG,
            "analysis_assembled",
            score=outdoor_score.score,
            capped_by=outdoor_score.capped_by,
            window=best_time_window.display_text if best_time_window else None,
            headache_risk=headache.risk_level,
            alert_count=len(analysis.safety_alerts),
        )
        return analysis

    def forecast(
        self,
        hourly: Sequence[WeatherSample],
        aqi_value: float = 0.0,
        pollen_level: float = 0.0,
    ) -> Forecast24h:
        return forecast_24h(
            hourly,
            config=self.config,
            translator=self.translator,
            aqi_value=aqi_value,
            pollen_level=pollen_level,
            clock=self.clock,
        )


__all__ = ["HealthEngine"]
