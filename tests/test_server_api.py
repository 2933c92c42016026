from fastapi.testclient import TestClient

from health_app.app import HealthIntelligenceApp
from health_app.config import EngineConfig, UserSettings
from server.api import app

client = TestClient(app)

PAYLOAD = {
    "current": {"temperature": 20, "feelsLike": 20, "humidity": 50, "windSpeed": 5, "precipProb": 5, "uvIndex": 2},
    "hourly": [{"time": f"2024-06-01T{hour:02d}:00", "temperature": 20, "humidity": 50} for hour in range(24)],
    "airQuality": {"europeanAqi": 10},
    "pollen": {"trees": 1, "grass": 1, "weeds": 1},
    "settings": {"language": "en"},
}


def test_healthcheck() -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "health-intelligence"


def test_analyze_endpoint() -> None:
    response = client.post("/analyze", json=PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["outdoor_score"]["score"] == 99
    assert body["outdoor_score"]["label_text"] == "Excellent"
    assert body["best_time_window"]["display_text"] == "00:00 - 02:00"
    assert len(body["timeline"]) == 24
    assert body["language"] == "en"


def test_analyze_rejects_invalid_skin_type() -> None:
    response = client.post("/analyze", json={"settings": {"skinType": 9}})

    assert response.status_code == 422


def test_forecast_endpoint() -> None:
    response = client.post("/forecast", json={"hourly": PAYLOAD["hourly"], "aqiValue": 10, "language": "en"})

    assert response.status_code == 200
    body = response.json()
    assert len(body["hours"]) == 24
    assert body["trend_label"] == "Stable"


def test_app_payload_validation_failure_is_reported() -> None:
    health = HealthIntelligenceApp(EngineConfig(settings=UserSettings(language="en")))

    result = health.analyze_payload({"current": {"temperature": "hot"}})

    assert result["status"] == "needs_review"
    assert result["details"]


def test_app_forecast_payload() -> None:
    health = HealthIntelligenceApp(EngineConfig(settings=UserSettings(language="en")))

    result = health.forecast_payload({"hourly": [{"temperature": 20}, {"temperature": 21}, {"temperature": 22}]})

    assert result["status"] == "ok"
    assert len(result["hours"]) == 3


def test_analyze_endpoint_reports_comfort_details() -> None:
    body = client.post("/analyze", json=PAYLOAD).json()

    assert body["dew_point"] == 9.3
    assert body["dew_point_comfort"]["level"] == "dry"
    assert body["activities"]["running"]["suitable"] is True


def test_app_rejects_non_finite_numbers() -> None:
    health = HealthIntelligenceApp(EngineConfig(settings=UserSettings(language="en")))

    for current in ({"temperature": 20, "precipProb": float("nan")}, {"windSpeed": float("inf")}):
        result = health.analyze_payload({"current": current})
        assert result["status"] == "needs_review"
        assert result["details"]

    forecast = health.forecast_payload({"hourly": [{"temperature": 20}], "aqiValue": float("nan")})
    assert forecast["status"] == "needs_review"


def test_app_accepts_mixed_offset_timestamps() -> None:
    health = HealthIntelligenceApp(EngineConfig(settings=UserSettings(language="en")))

    result = health.analyze_payload(
        {
            "current": {"temperature": 20},
            "hourly": [
                {"time": "2024-06-01T10:00", "pressure": 1013},
                {"time": "2024-06-01T11:00+00:00", "pressure": 1010},
            ],
        }
    )

    assert result["status"] == "ok"
    assert result["headache_risk"]["change"] == -3.0
    assert result["headache_risk"]["risk_level"] == "moderate"
