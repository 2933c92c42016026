"""Pressure-driven headache risk and UV exposure timers."""

import math
from datetime import datetime, timezone

import pytest

from logic.bio_signals import (
    classify_headache_risk,
    headache_risk,
    pressure_change,
    sunburn_time,
    vitamin_d_time,
    vitamin_d_timer,
)
from models.locale import Translator

EN = Translator("en")


def _at(hour: int) -> datetime:
    return datetime(2024, 6, 1, hour)


def test_untimed_pressure_drop() -> None:
    change = pressure_change([1013, 1013, 1007])

    assert change.change == -6.0
    assert change.rate == -2.0
    assert change.trend == "falling_fast"


def test_timed_readings_outside_window_are_ignored() -> None:
    readings = [(_at(6), 1020.0), (_at(8), 1013.0), (_at(9), 1012.0), (_at(10), 1010.0)]

    change = pressure_change(readings)

    assert change.change == -3.0
    assert change.trend == "falling"


def test_timed_readings_are_sorted() -> None:
    readings = [(_at(10), 1016.0), (_at(8), 1012.0), (_at(9), 1014.0)]

    assert pressure_change(readings).change == 4.0
    assert pressure_change(readings).trend == "rising_fast"


def test_single_reading_is_stable() -> None:
    change = pressure_change([1013])

    assert change.change == 0.0
    assert change.trend == "stable"


@pytest.mark.parametrize(
    "delta,four,three",
    [(0, "low", "low"), (2.9, "low", "low"), (3, "moderate", "moderate"), (-4.9, "moderate", "moderate"),
     (5, "elevated", "high"), (-6, "elevated", "high"), (8, "high", "high")],
)
def test_classification_breakpoints(delta: float, four: str, three: str) -> None:
    assert classify_headache_risk(delta, tiers=4).risk == four
    assert classify_headache_risk(delta, tiers=3).risk == three


def test_classification_rejects_other_tier_counts() -> None:
    with pytest.raises(ValueError):
        classify_headache_risk(4, tiers=5)


def test_sharp_drop_is_critical() -> None:
    risk = headache_risk([1013, 1013, 1007], translator=EN)

    assert risk.risk_level == "elevated"
    assert risk.level == 3
    assert risk.alert_level == "high"
    assert risk.is_critical is True
    assert risk.show_alert is False
    assert risk.change == -6.0
    assert risk.trend_text == "Pressure falling"


def test_three_tier_card() -> None:
    risk = headache_risk([1013, 1013, 1007], tiers=3, translator=EN)

    assert risk.risk_level == "high"
    assert risk.level == 3
    assert risk.advisory_text == "High risk"


def test_sensitive_users_see_alert_earlier() -> None:
    risk = headache_risk([1000, 1004], migraine_sensitive=True, translator=EN)

    assert risk.show_alert is True
    assert risk.is_critical is False
    assert risk.risk_level == "moderate"
    assert risk.trend_text == "Pressure rising"


def test_small_change_is_low() -> None:
    risk = headache_risk([1000, 1001], translator=EN)

    assert risk.risk_level == "low"
    assert risk.trend_text == "Pressure stable"
    assert risk.advisory_text == "Stable pressure"


def test_insufficient_data_is_unknown() -> None:
    for readings in ([], [1013]):
        risk = headache_risk(readings, translator=EN)
        assert risk.risk_level == "unknown"
        assert risk.level == 0
        assert risk.alert_level == "unknown"
        assert risk.color == "#9E9E9E"


def test_sunburn_time() -> None:
    assert sunburn_time(9, 2) == 19
    assert sunburn_time(5, 1) == 27
    assert sunburn_time(9, 9) == 19
    assert sunburn_time(0) == math.inf
    assert sunburn_time(None) == math.inf


def test_vitamin_d_time() -> None:
    assert vitamin_d_time(2.9) is None
    assert vitamin_d_time(3, 2) == 30
    assert vitamin_d_time(9, 2) == 10
    assert vitamin_d_time(6, 6) == 53


def test_vitamin_d_timer_available() -> None:
    timer = vitamin_d_timer(9, 2, EN)

    assert timer.available is True
    assert timer.vitamin_d_minutes == 10
    assert timer.sunburn_minutes == 19
    assert timer.safe_exposure_minutes == 10
    assert timer.advice == "10 min for vitamin D"
    assert timer.sunburn_advice == "19 min until sunburn"
    assert timer.uv_level is not None
    assert timer.uv_level.level == "very_high"


def test_vitamin_d_timer_unavailable_below_three() -> None:
    timer = vitamin_d_timer(2, 2, EN)

    assert timer.available is False
    assert timer.vitamin_d_minutes is None
    assert timer.sunburn_minutes is None
    assert timer.advice == "UV index too low for vitamin D synthesis"


def test_mixed_offset_timestamps_compare_by_wall_clock() -> None:
    readings = [(_at(10), 1013.0), (datetime(2024, 6, 1, 11, tzinfo=timezone.utc), 1010.0)]

    assert pressure_change(readings).change == -3.0
    assert headache_risk(readings).risk_level == "moderate"


def test_non_finite_inputs_degrade() -> None:
    assert headache_risk([1013, float("nan"), 1007]).change == -6.0
    assert headache_risk([float("inf"), 1013]).risk_level == "unknown"
    assert sunburn_time(float("nan")) == math.inf
    assert vitamin_d_time(float("inf")) is None
    assert vitamin_d_timer(float("nan")).available is False
