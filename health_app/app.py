"""Application wiring: configuration, logging and the validated entry points."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict

from pydantic import ValidationError

from health_app.config import EngineConfig
from health_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.validation import AnalyzeRequest, ForecastRequest, validation_failure
from pipeline.health_engine import HealthEngine

LOGGER = get_logger(__name__)


class HealthIntelligenceApp:
    """Owns the configured engine and translates request payloads into analyses."""

    def __init__(self, config: EngineConfig | None = None, clock: Callable[[], datetime] | None = None) -> None:
        self.config = config or EngineConfig.from_env()
        self.clock = clock
        configure_logging()
        self.engine = HealthEngine(self.config, clock=clock)

    def _engine_for(self, overrides: Dict[str, Any]) -> HealthEngine:
        if not overrides:
            return self.engine
        return HealthEngine(self.config.with_settings(**overrides), clock=self.clock)

    def analyze_request(self, request: AnalyzeRequest) -> Dict[str, Any]:
        overrides = request.settings.overrides() if request.settings else {}
        with operation_context("app:analyze") as correlation_id:
            engine = self._engine_for(overrides)
            analysis = engine.analyze(
                current=request.current.to_sample(),
                hourly=[sample.to_sample() for sample in request.hourly],
                daily=request.daily.to_summary() if request.daily else None,
                air_quality=request.air_quality.to_reading() if request.air_quality else None,
                pollen=request.pollen.to_reading() if request.pollen else None,
                alerts=[alert.to_alert() for alert in request.alerts],
                last_updated=request.last_updated,
            )
            log_event(
                LOGGER,
                logging.INFO,
                "app_analysis_completed",
                correlation_id=correlation_id,
                score=analysis.outdoor_score.score,
                hourly_count=len(request.hourly),
                overrides=sorted(overrides),
            )
            return {"status": "ok", **analysis.to_dict()}

    def analyze_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a loose app-state payload and run the analysis."""

        try:
            request = AnalyzeRequest.model_validate(payload)
        except ValidationError as exc:
            log_event(LOGGER, logging.WARNING, "app_request_invalid", method="analyze", details=str(exc))
            return validation_failure("Invalid analysis request payload", exc)
        return self.analyze_request(request)

    def forecast_request(self, request: ForecastRequest) -> Dict[str, Any]:
        engine = self._engine_for({"language": request.language} if request.language else {})
        forecast = engine.forecast(
            [sample.to_sample() for sample in request.hourly],
            aqi_value=request.aqi_value,
            pollen_level=request.pollen_level,
        )
        return {"status": "ok", **forecast.to_dict()}

    def forecast_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            request = ForecastRequest.model_validate(payload)
        except ValidationError as exc:
            log_event(LOGGER, logging.WARNING, "app_request_invalid", method="forecast", details=str(exc))
            return validation_failure("Invalid forecast request payload", exc)
        return self.forecast_request(request)


__all__ = ["HealthIntelligenceApp"]
