from logic.bio_signals import headache_risk
from logic.safety_alerts import safety_alerts
from models.locale import Translator
from models.weather_sample import Conditions

EN = Translator("en")


def _types(alerts):
    return {(alert.type, alert.severity) for alert in alerts}


def test_mild_day_has_no_alerts() -> None:
    assert safety_alerts(Conditions(feels_like=20, uv_index=2, wind_speed=10)) == []


def test_heat_alerts() -> None:
    extreme = safety_alerts(Conditions(feels_like=36), translator=EN)

    assert _types(extreme) == {("heat", "critical")}
    assert extreme[0].priority == 100
    assert extreme[0].title == "Extreme Heat"
    assert _types(safety_alerts(Conditions(feels_like=30))) == {("heat", "warning")}
    assert safety_alerts(Conditions(feels_like=29.9)) == []


def test_cold_alerts() -> None:
    assert _types(safety_alerts(Conditions(feels_like=-10))) == {("cold", "critical")}
    frost = safety_alerts(Conditions(feels_like=0), translator=EN)
    assert frost[0].title == "Frost Warning"
    assert frost[0].priority == 70


def test_uv_alerts() -> None:
    assert safety_alerts(Conditions(uv_index=11))[0].priority == 95
    assert safety_alerts(Conditions(uv_index=8))[0].priority == 80


def test_storm_alerts() -> None:
    assert _types(safety_alerts(Conditions(wind_speed=60))) == {("storm", "critical")}
    assert _types(safety_alerts(Conditions(wind_speed=40, precipitation_probability=70))) == {("storm", "warning")}
    assert safety_alerts(Conditions(wind_speed=40, precipitation_probability=69)) == []


def test_air_quality_alerts() -> None:
    assert safety_alerts(Conditions(aqi=150))[0].priority == 90
    assert safety_alerts(Conditions(aqi=100))[0].priority == 65


def test_headache_alert_priority_depends_on_sensitivity() -> None:
    risk = headache_risk([1013, 1013, 1007], translator=EN)

    sensitive = safety_alerts(Conditions(), risk, migraine_sensitive=True, translator=EN)
    regular = safety_alerts(Conditions(), risk, translator=EN)

    assert sensitive[0].type == "bio"
    assert sensitive[0].severity == "info"
    assert sensitive[0].priority == 80
    assert sensitive[0].message == "Elevated headache risk"
    assert regular[0].priority == 40


def test_non_critical_headache_risk_raises_nothing() -> None:
    risk = headache_risk([1000, 1004])

    assert safety_alerts(Conditions(), risk, migraine_sensitive=True) == []


def test_alerts_sorted_by_priority() -> None:
    alerts = safety_alerts(Conditions(feels_like=31, uv_index=12, wind_speed=65, aqi=120))
    priorities = [alert.priority for alert in alerts]

    assert priorities == sorted(priorities, reverse=True)
    assert len(alerts) == 4
