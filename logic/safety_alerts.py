"""Safety alerts raised alongside the quick checks."""

from __future__ import annotations

from typing import List, Optional

from models import priorities as p
from models.locale import Translator
from models.results import RiskSignal, SafetyAlert
from models.weather_sample import Conditions


def _alert(
    translator: Translator,
    alert_type: str,
    severity: str,
    key: str,
    icon: str,
    color: str,
    priority: int,
    message: Optional[str] = None,
) -> SafetyAlert:
    return SafetyAlert(
        type=alert_type,
        severity=severity,
        title=translator.t(f"{key}_title"),
        message=message if message is not None else translator.t(f"{key}_message"),
        icon=icon,
        color=color,
        priority=priority,
    )


def safety_alerts(
    conditions: Conditions,
    headache: RiskSignal | None = None,
    migraine_sensitive: bool = False,
    translator: Translator | None = None,
) -> List[SafetyAlert]:
    """Heat, cold, UV, storm, air quality and headache alerts, most urgent first."""

    translator = translator or Translator()
    feels = conditions.feels_like
    uv = conditions.uv_index
    wind = conditions.wind_speed
    aqi = conditions.aqi
    alerts: List[SafetyAlert] = []

    if feels >= 35:
        alerts.append(_alert(translator, "heat", "critical", "alert_heat_extreme", "🌡️", "#F44336", p.ALERT_HEAT_EXTREME))
    elif feels >= 30:
        alerts.append(_alert(translator, "heat", "warning", "alert_heat_high", "☀️", "#FF9800", p.ALERT_HEAT_HIGH))

    if feels <= -10:
        alerts.append(_alert(translator, "cold", "critical", "alert_cold_extreme", "❄️", "#2196F3", p.ALERT_COLD_EXTREME))
    elif feels <= 0:
        alerts.append(_alert(translator, "cold", "warning", "alert_frost", "🥶", "#4FC3F7", p.ALERT_FROST))

    if uv >= 11:
        alerts.append(_alert(translator, "uv", "critical", "alert_uv_extreme", "☀️", "#9C27B0", p.ALERT_UV_EXTREME))
    elif uv >= 8:
        alerts.append(_alert(translator, "uv", "warning", "alert_uv_very_high", "🧴", "#F44336", p.ALERT_UV_VERY_HIGH))

    if wind >= 60:
        alerts.append(_alert(translator, "storm", "critical", "alert_storm", "⛈️", "#7E57C2", p.ALERT_STORM_SEVERE))
    elif wind >= 40 and conditions.precipitation_probability >= 70:
        alerts.append(_alert(translator, "storm", "warning", "alert_storm", "⛈️", "#7E57C2", p.ALERT_STORM))

    if aqi >= 150:
        alerts.append(_alert(translator, "aqi", "critical", "alert_aqi", "😷", "#795548", p.ALERT_AQI_CRITICAL))
    elif aqi >= 100:
        alerts.append(_alert(translator, "aqi", "warning", "alert_aqi", "😷", "#795548", p.ALERT_AQI_POOR))

    if headache is not None and headache.is_critical:
        alerts.append(
            _alert(
                translator,
                "bio",
                "info",
                "alert_headache",
                "🧠",
                "#FF9800",
                p.ALERT_HEADACHE_SENSITIVE if migraine_sensitive else p.ALERT_HEADACHE,
                message=headache.advisory_text,
            )
        )

    return sorted(alerts, key=lambda alert: -alert.priority)


__all__ = ["safety_alerts"]
