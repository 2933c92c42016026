"""Simple entrypoint to run one health analysis locally."""

import json

from health_app.app import HealthIntelligenceApp

SAMPLE_STATE = {
    "current": {"temperature": 21, "humidity": 48, "windSpeed": 8, "precipProb": 5, "uvIndex": 4, "pressure": 1016},
    "hourly": [
        {"time": f"2024-06-01T{hour:02d}:00", "temperature": 14 + hour % 12, "humidity": 55, "uvIndex": 3}
        for hour in range(24)
    ],
    "airQuality": {"europeanAqi": 18},
}


def main() -> None:
    app = HealthIntelligenceApp()
    result = app.analyze_payload(SAMPLE_STATE)
    summary = {
        "score": result["outdoor_score"]["score"],
        "label": result["outdoor_score"]["label_text"],
        "best_time_window": (result["best_time_window"] or {}).get("display_text"),
        "top_check": result["prioritized_checks"][0]["display_text"],
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
