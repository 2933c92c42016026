"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from health_app.config import EngineConfig, UserSettings
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from models.results import HealthAnalysis
from pipeline.health_engine import HealthEngine


def _evaluate_expectations(expectations: Dict[str, object], analysis: HealthAnalysis) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    score = analysis.outdoor_score
    check_ids = [item.id for item in analysis.prioritized_checks]

    if "min_score" in expectations:
        checks["min_score"] = score.score >= int(expectations["min_score"])
    if "max_score" in expectations:
        checks["max_score"] = score.score <= int(expectations["max_score"])
    if "label" in expectations:
        checks["label"] = score.label == expectations["label"]
    if "capped_by" in expectations:
        checks["capped_by"] = score.capped_by == expectations["capped_by"]
    if "top_check" in expectations:
        checks["top_check"] = bool(check_ids) and check_ids[0] == expectations["top_check"]
    if "absent_check" in expectations:
        checks["absent_check"] = expectations["absent_check"] not in check_ids
    if "headache_alert_level" in expectations:
        checks["headache_alert_level"] = analysis.headache_risk.alert_level == expectations["headache_alert_level"]
    if "alert_types" in expectations:
        alert_types = {alert.type for alert in analysis.safety_alerts}
        checks["alert_types"] = set(expectations["alert_types"]) <= alert_types
    if "window" in expectations:
        window = analysis.best_time_window
        checks["window"] = window is not None and (window.start_index, window.end_index) == tuple(
            expectations["window"]
        )
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    config = EngineConfig(settings=UserSettings(language="en", migraine_sensitive=scenario.migraine_sensitive))
    engine = HealthEngine(config, clock=lambda: scenario.now)
    analysis = engine.analyze(
        current=scenario.current,
        hourly=scenario.hourly,
        air_quality=scenario.air_quality,
        pollen=scenario.pollen,
    )
    evaluation = _evaluate_expectations(scenario.expectations, analysis)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "score": analysis.outdoor_score.score,
        "analysis": analysis,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
