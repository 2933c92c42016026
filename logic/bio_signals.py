"""Bio-meteorological signals: pressure-driven headache risk and UV exposure timers.

Headache risk is derived from the *change* in pressure over a trailing
window, never from the absolute reading. Two classifications share the
3/5/8 hPa breakpoints: the four-tier one shown on the risk card and a
three-tier one used for alerting.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from health_app.config import DEFAULT_SKIN_TYPE
from logic.comfort_math import uv_risk_level
from logic.factor_scoring import round_half_up
from models.locale import Translator
from models.results import PressureChange, RiskSignal, UVExposure

PressureReading = Tuple[Optional[datetime], float]

CRITICAL_CHANGE_HPA = 5.0
SENSITIVE_ALERT_CHANGE_HPA = 4.0
TREND_TEXT_CHANGE_HPA = 2.0
UNKNOWN_RISK_COLOR = "#9E9E9E"

# Minimal erythemal dose per Fitzpatrick skin type, J/m².
MED_BY_SKIN_TYPE = {1: 200, 2: 250, 3: 300, 4: 450, 5: 600, 6: 800}
VITAMIN_D_MULTIPLIER = {1: 0.7, 2: 1.0, 3: 1.3, 4: 1.8, 5: 2.5, 6: 3.5}
# Minutes for ~1000 IU at UV 6 for skin type 2.
VITAMIN_D_BASE_MINUTES = 15
VITAMIN_D_MIN_UV = 3.0
SAFE_EXPOSURE_FACTOR = 0.7


class HeadacheTier(NamedTuple):
    risk: str
    level: int
    advisory_key: str
    color: str


FOUR_TIERS: List[Tuple[float, HeadacheTier]] = [
    (3.0, HeadacheTier("low", 1, "headache_low", "#4CAF50")),
    (5.0, HeadacheTier("moderate", 2, "headache_moderate", "#FFC107")),
    (8.0, HeadacheTier("elevated", 3, "headache_elevated", "#FF9800")),
    (math.inf, HeadacheTier("high", 4, "headache_high", "#F44336")),
]
THREE_TIERS: List[Tuple[float, HeadacheTier]] = [
    (3.0, HeadacheTier("low", 1, "low_risk", "#4CAF50")),
    (5.0, HeadacheTier("moderate", 2, "moderate_risk", "#FFC107")),
    (math.inf, HeadacheTier("high", 3, "high_risk", "#F44336")),
]


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def _wall_clock(timestamp: Optional[datetime]) -> Optional[datetime]:
    """Drop any UTC offset so naive and offset-carrying readings compare."""

    if timestamp is None or timestamp.tzinfo is None:
        return timestamp
    return timestamp.replace(tzinfo=None)


def _as_readings(readings: Sequence[Union[PressureReading, float]]) -> List[PressureReading]:
    """Coerce to (time, hPa) pairs, skipping NaN and infinite pressures."""

    normalized: List[PressureReading] = []
    for reading in readings:
        if isinstance(reading, (int, float)):
            timestamp, value = None, float(reading)
        else:
            timestamp, value = _wall_clock(reading[0]), float(reading[1])
        if math.isfinite(value):
            normalized.append((timestamp, value))
    return normalized


def _recent_readings(readings: List[PressureReading], window_hours: float) -> List[PressureReading]:
    """Sort by time and drop readings older than the window before the newest one.

    Untimed readings are taken in the order given.
    """

    if any(timestamp is None for timestamp, _ in readings):
        return readings
    ordered = sorted(readings, key=lambda reading: reading[0])
    newest = ordered[-1][0]
    window = timedelta(hours=window_hours)
    return [reading for reading in ordered if newest - reading[0] <= window]


def pressure_change(
    readings: Sequence[Union[PressureReading, float]],
    window_hours: float = 3.0,
) -> PressureChange:
    """Net pressure change over the trailing window and its trend."""

    series = _as_readings(readings)
    if len(series) < 2:
        return PressureChange(change=0.0, rate=0.0, trend="stable")
    recent = _recent_readings(series, window_hours)
    if len(recent) < 2:
        return PressureChange(change=0.0, rate=0.0, trend="stable")

    change = recent[-1][1] - recent[0][1]
    if change > 3:
        trend = "rising_fast"
    elif change > 1:
        trend = "rising"
    elif change < -3:
        trend = "falling_fast"
    elif change < -1:
        trend = "falling"
    else:
        trend = "stable"
    return PressureChange(
        change=_one_decimal(change),
        rate=_one_decimal(change / window_hours),
        trend=trend,
    )


def classify_headache_risk(change: float, tiers: int = 4) -> HeadacheTier:
    """Map a pressure change to a headache tier using the 3/5/8 hPa breakpoints."""

    if tiers not in (3, 4):
        raise ValueError(f"tiers must be 3 or 4, got {tiers}")
    table = FOUR_TIERS if tiers == 4 else THREE_TIERS
    magnitude = abs(change)
    for upper, tier in table:
        if magnitude < upper:
            return tier
    return table[-1][1]


def headache_risk(
    readings: Sequence[Union[PressureReading, float]],
    migraine_sensitive: bool = False,
    tiers: int = 4,
    window_hours: float = 3.0,
    translator: Translator | None = None,
) -> RiskSignal:
    """Headache risk card for a trailing pressure series.

    ``alert_level`` always carries the three-tier classification so alerting
    consumers do not depend on the card's granularity.
    """

    translator = translator or Translator()
    readings = _as_readings(readings)
    if len(readings) < 2:
        stable = translator.t("pressure_stable")
        return RiskSignal(
            risk_level="unknown",
            level=0,
            change=0.0,
            advisory_text=stable,
            trend_text=stable,
            color=UNKNOWN_RISK_COLOR,
            alert_level="unknown",
        )

    change = pressure_change(readings, window_hours).change
    magnitude = abs(change)
    tier = classify_headache_risk(change, tiers)

    if change > TREND_TEXT_CHANGE_HPA:
        trend_text = translator.t("pressure_rising")
    elif change < -TREND_TEXT_CHANGE_HPA:
        trend_text = translator.t("pressure_falling")
    else:
        trend_text = translator.t("pressure_stable")

    return RiskSignal(
        risk_level=tier.risk,
        level=tier.level,
        change=change,
        advisory_text=translator.t(tier.advisory_key),
        trend_text=trend_text,
        color=tier.color,
        is_critical=magnitude >= CRITICAL_CHANGE_HPA,
        show_alert=migraine_sensitive and magnitude >= SENSITIVE_ALERT_CHANGE_HPA,
        alert_level=classify_headache_risk(change, tiers=3).risk,
    )


def _skin(skin_type: int) -> int:
    return skin_type if skin_type in MED_BY_SKIN_TYPE else DEFAULT_SKIN_TYPE


def sunburn_time(uv_index: Optional[float], skin_type: int = DEFAULT_SKIN_TYPE) -> float:
    """Minutes of unprotected exposure until sunburn; infinite without UV."""

    if uv_index is None or not math.isfinite(uv_index) or uv_index <= 0:
        return math.inf
    return round_half_up(MED_BY_SKIN_TYPE[_skin(skin_type)] / (uv_index * 1.5))


def vitamin_d_time(uv_index: Optional[float], skin_type: int = DEFAULT_SKIN_TYPE) -> Optional[int]:
    """Minutes for an adequate vitamin-D dose, or ``None`` below UV 3."""

    if uv_index is None or not math.isfinite(uv_index) or uv_index < VITAMIN_D_MIN_UV:
        return None
    minutes = (VITAMIN_D_BASE_MINUTES * 6 / uv_index) * VITAMIN_D_MULTIPLIER[_skin(skin_type)]
    return round_half_up(minutes)


def vitamin_d_timer(
    uv_index: Optional[float],
    skin_type: int = DEFAULT_SKIN_TYPE,
    translator: Translator | None = None,
) -> UVExposure:
    translator = translator or Translator()
    vitamin_d = vitamin_d_time(uv_index, skin_type)
    if vitamin_d is None:
        return UVExposure(
            available=False,
            vitamin_d_minutes=None,
            sunburn_minutes=None,
            safe_exposure_minutes=None,
            advice=translator.t("uv_too_low_for_vitamin_d"),
        )

    sunburn = int(sunburn_time(uv_index, skin_type))
    return UVExposure(
        available=True,
        vitamin_d_minutes=vitamin_d,
        sunburn_minutes=sunburn,
        safe_exposure_minutes=min(vitamin_d, math.floor(sunburn * SAFE_EXPOSURE_FACTOR)),
        advice=f"{vitamin_d} {translator.t('minutes_for_vitamin_d')}",
        sunburn_advice=f"{sunburn} {translator.t('minutes_until_sunburn')}",
        uv_level=uv_risk_level(uv_index, translator),
    )


__all__ = [
    "FOUR_TIERS",
    "HeadacheTier",
    "MED_BY_SKIN_TYPE",
    "PressureReading",
    "THREE_TIERS",
    "VITAMIN_D_MULTIPLIER",
    "classify_headache_risk",
    "headache_risk",
    "pressure_change",
    "sunburn_time",
    "vitamin_d_time",
    "vitamin_d_timer",
]
