from datetime import datetime, timedelta

from health_app.config import EngineConfig, UserSettings
from logic.time_window import best_window, find_best_time_window, format_time_label, window_size
from models.weather_sample import WeatherSample


def _hourly(scores_by_hour) -> list[WeatherSample]:
    base = datetime(2024, 6, 1)
    samples = []
    for hour, dry in enumerate(scores_by_hour):
        moment = base + timedelta(hours=hour)
        samples.append(
            WeatherSample(
                timestamp=moment,
                time_label=moment.isoformat(timespec="minutes"),
                temperature=20,
                humidity=50,
                wind_speed=10,
                precipitation_probability=0 if dry else 60,
                uv_index=0,
            )
        )
    return samples


def test_midday_window_is_found() -> None:
    scores = [85 if 10 <= hour <= 13 else 40 for hour in range(24)]

    window = best_window(scores)

    assert window is not None
    assert (window.start_index, window.end_index) == (10, 12)
    assert window.average_score == 85
    assert [hour.index for hour in window.hours] == [10, 11, 12]


def test_too_few_scores_yield_no_window() -> None:
    assert best_window([90, 90]) is None
    assert best_window([]) is None


def test_hour_below_floor_disqualifies_window() -> None:
    assert best_window([100, 20, 100, 100, 24, 100]) is None


def test_floor_is_inclusive() -> None:
    window = best_window([25, 25, 25])

    assert window is not None
    assert window.average_score == 25


def test_ties_keep_the_earliest_window() -> None:
    window = best_window([50, 50, 50, 50])

    assert window is not None
    assert window.start_index == 0


def test_longer_duration_needs_more_scores() -> None:
    assert window_size(2.5) == 5
    assert window_size(1.0) == 3
    assert best_window([90, 90, 90, 90], min_duration=2.5) is None


def test_labels_come_from_times() -> None:
    times = [f"2024-06-01T{hour:02d}:00" for hour in range(4)]

    window = best_window([10, 90, 90, 90], times=times)

    assert window is not None
    assert window.start_label == "01:00"
    assert window.end_label == "03:00"
    assert window.display_text == "01:00 - 03:00"
    assert window.color == "#4ade80"


def test_format_time_label_variants() -> None:
    assert format_time_label("7:30") == "7:30"
    assert format_time_label("2024-06-01T09:00:00") == "09:00"
    assert format_time_label(datetime(2024, 6, 1, 14, 5)) == "14:05"
    assert format_time_label("at 9:05 local") == "09:05"
    assert format_time_label(None) == ""
    assert format_time_label("abcdefg") == "abcde"


def test_find_best_time_window_scores_samples() -> None:
    hourly = _hourly([10 <= hour <= 13 for hour in range(24)])
    config = EngineConfig(settings=UserSettings(language="en"))

    window = find_best_time_window(hourly, config)

    assert window is not None
    assert (window.start_index, window.end_index) == (10, 12)
    assert window.title == "Best Time Window"
    assert window.display_text == "10:00 - 12:00"


def test_find_best_time_window_needs_three_samples() -> None:
    assert find_best_time_window(_hourly([True, True])) is None


def test_all_capped_hours_still_qualify() -> None:
    window = find_best_time_window(_hourly([False] * 6))

    assert window is not None
    assert window.start_index == 0
    assert window.average_score <= 30
