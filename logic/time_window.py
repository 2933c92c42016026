"""Sliding-window search for the best contiguous outdoor time window."""

from __future__ import annotations

import math
import re
from dataclasses import replace
from datetime import datetime
from typing import List, Optional, Sequence, Union

from health_app.config import EngineConfig
from logic.composite_score import calculate_outdoor_score, score_color
from logic.factor_scoring import round_half_up
from logic.normalization import normalize_hourly
from models.locale import Translator
from models.results import HourScore, TimeWindow
from models.weather_sample import DEFAULT_AQI, WeatherSample

MIN_SAMPLES = 3
_HH_MM = re.compile(r"^\d{1,2}:\d{2}$")
_EMBEDDED_TIME = re.compile(r"(\d{1,2}):(\d{2})")


def window_size(min_duration: float, slots_per_hour: int = 2, min_slots: int = MIN_SAMPLES) -> int:
    return max(min_slots, math.ceil(min_duration * slots_per_hour))


def format_time_label(value: Union[str, datetime, None]) -> str:
    """Render a timestamp or time string as ``HH:MM``."""

    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        return value.strftime("%H:%M")
    text = str(value)
    if _HH_MM.match(text):
        return text
    try:
        return datetime.fromisoformat(text).strftime("%H:%M")
    except ValueError:
        pass
    match = _EMBEDDED_TIME.search(text)
    if match:
        return f"{match.group(1).zfill(2)}:{match.group(2)}"
    return text[:5]


def sample_time(sample: WeatherSample) -> Optional[str]:
    if sample.time_label:
        return sample.time_label
    if sample.timestamp is not None:
        return sample.timestamp.isoformat()
    return None


def best_window(
    scores: Sequence[float],
    min_duration: float = 1.5,
    slots_per_hour: int = 2,
    min_slots: int = MIN_SAMPLES,
    min_hour_score: float = 25,
    times: Sequence[Optional[str]] | None = None,
) -> Optional[TimeWindow]:
    """Find the left-most window with the highest mean whose worst hour clears the floor.

    Returns ``None`` when there are fewer than three scores, fewer scores
    than the window size, or no window satisfies the floor.
    """

    if len(scores) < MIN_SAMPLES:
        return None
    size = window_size(min_duration, slots_per_hour, min_slots)
    if len(scores) < size:
        return None

    best_start: Optional[int] = None
    best_mean = 0.0
    for start in range(len(scores) - size + 1):
        members = scores[start : start + size]
        mean = sum(members) / size
        if mean > best_mean and min(members) >= min_hour_score:
            best_mean = mean
            best_start = start

    if best_start is None:
        return None

    labels = list(times) if times is not None else [None] * len(scores)
    hours = [
        HourScore(index=index, score=int(scores[index]), time=labels[index])
        for index in range(best_start, best_start + size)
    ]
    start_label = format_time_label(hours[0].time)
    end_label = format_time_label(hours[-1].time)
    return TimeWindow(
        start_index=best_start,
        end_index=best_start + size - 1,
        average_score=round_half_up(best_mean),
        hours=hours,
        start_label=start_label,
        end_label=end_label,
        display_text=f"{start_label} - {end_label}",
        color=score_color(best_mean),
    )


def find_best_time_window(
    hourly: Sequence[WeatherSample],
    config: EngineConfig | None = None,
    translator: Translator | None = None,
    min_duration: float | None = None,
    fallback_aqi: float = DEFAULT_AQI,
    fallback_pollen: float = 0.0,
) -> Optional[TimeWindow]:
    """Score each hourly sample and return the best qualifying window."""

    config = config or EngineConfig()
    translator = translator or Translator(config.settings.language)
    if len(hourly) < MIN_SAMPLES:
        return None

    scores: List[int] = []
    times: List[Optional[str]] = []
    for sample in hourly:
        conditions = normalize_hourly(sample, fallback_aqi, fallback_pollen, config.derive_feels_like)
        scores.append(calculate_outdoor_score(conditions, config, translator).score)
        times.append(sample_time(sample))

    window = best_window(
        scores,
        min_duration=config.window_min_duration_hours if min_duration is None else min_duration,
        slots_per_hour=config.window_slots_per_hour,
        min_slots=config.window_min_slots,
        min_hour_score=config.window_min_hour_score,
        times=times,
    )
    if window is None:
        return None
    return replace(window, title=translator.t("best_time_window"))


__all__ = ["best_window", "find_best_time_window", "format_time_label", "sample_time", "window_size"]
