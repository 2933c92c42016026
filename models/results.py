"""Value objects returned by the scoring, risk and recommendation engines."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from models.weather_sample import Conditions


@dataclass(frozen=True)
class FactorResult:
    factor: str
    score: float
    weight: float
    raw_value: float
    critical: bool = False


@dataclass(frozen=True)
class CompositeScore:
    """Weighted outdoor comfort score with its per-factor breakdown."""

    score: int
    factors: Dict[str, FactorResult]
    capped: bool
    capped_by: Optional[str]
    label: str
    label_text: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HourScore:
    index: int
    score: int
    time: Optional[str] = None


@dataclass(frozen=True)
class TimeWindow:
    """Best contiguous run of hours for outdoor activity."""

    start_index: int
    end_index: int
    average_score: int
    hours: List[HourScore]
    start_label: str = ""
    end_label: str = ""
    display_text: str = ""
    title: str = ""
    color: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PressureChange:
    change: float
    rate: float
    trend: str


@dataclass(frozen=True)
class RiskSignal:
    """Headache risk derived from the rate of pressure change."""

    risk_level: str
    level: int
    change: float
    advisory_text: str
    trend_text: str
    color: str
    is_critical: bool = False
    show_alert: bool = False
    alert_level: str = "low"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UVRiskLevel:
    level: str
    risk: str
    protection: str
    color: str
    score: int


@dataclass(frozen=True)
class DewPointComfort:
    level: str
    description: str
    score: int


@dataclass(frozen=True)
class ActivitySuitability:
    score: int
    suitable: bool
    note: str


@dataclass(frozen=True)
class UVExposure:
    """Vitamin-D and sunburn timers for one UV index and skin type."""

    available: bool
    vitamin_d_minutes: Optional[int]
    sunburn_minutes: Optional[int]
    safe_exposure_minutes: Optional[int]
    advice: str
    sunburn_advice: Optional[str] = None
    uv_level: Optional[UVRiskLevel] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecommendationItem:
    id: str
    category: str
    priority: int
    display_text: str
    answer: str
    icon: str
    color: str
    detail: str = ""


@dataclass(frozen=True)
class SafetyAlert:
    type: str
    severity: str
    title: str
    message: str
    icon: str
    color: str
    priority: int


@dataclass(frozen=True)
class TimelinePoint:
    time: Optional[str]
    score: int
    color: str


@dataclass(frozen=True)
class HealthAnalysis:
    """Everything the presentation layer needs from one analysis call."""

    outdoor_score: CompositeScore
    best_time_window: Optional[TimeWindow]
    headache_risk: RiskSignal
    vitamin_d_timer: UVExposure
    quick_checks: List[RecommendationItem]
    prioritized_checks: List[RecommendationItem]
    safety_alerts: List[SafetyAlert]
    timeline: List[TimelinePoint]
    conditions: Conditions
    last_updated: str
    is_night: bool
    language: str
    max_uv: float = 0.0
    dew_point: Optional[float] = None
    dew_point_comfort: Optional[DewPointComfort] = None
    activities: Dict[str, ActivitySuitability] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ForecastHour:
    index: int
    time: Optional[str]
    hour: Optional[int]
    display_time: str
    score: int
    label: str
    label_text: str
    color: str
    capped: bool
    capped_by: Optional[str]
    is_night: bool
    uv_index: float = 0.0


@dataclass(frozen=True)
class ForecastRecommendation:
    type: str
    priority: int
    icon: str
    title: str
    message: str
    color: str


@dataclass(frozen=True)
class Forecast24h:
    hours: List[ForecastHour] = field(default_factory=list)
    best_window: Optional[TimeWindow] = None
    average_score: int = 0
    trend: str = "stable"
    trend_label: str = ""
    recommendations: List[ForecastRecommendation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ActivitySuitability",
    "CompositeScore",
    "DewPointComfort",
    "FactorResult",
    "Forecast24h",
    "ForecastHour",
    "ForecastRecommendation",
    "HealthAnalysis",
    "HourScore",
    "PressureChange",
    "RecommendationItem",
    "RiskSignal",
    "SafetyAlert",
    "TimeWindow",
    "TimelinePoint",
    "UVExposure",
    "UVRiskLevel",
]
