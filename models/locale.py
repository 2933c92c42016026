"""String catalogs for the supported locales.

German is the fallback locale: a key missing from the requested catalog is
looked up in ``de`` and, failing that, the key itself is returned.
"""

from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "de"

STRINGS: Dict[str, Dict[str, str]] = {
    "de": {
        # score bands
        "excellent": "Ausgezeichnet",
        "good": "Gut",
        "moderate": "Mäßig",
        "poor": "Schlecht",
        "critical": "Kritisch",
        "best_time_window": "Bestes Zeitfenster",
        # bio signals
        "minutes_until_sunburn": "Min. bis Sonnenbrand",
        "minutes_for_vitamin_d": "Min. für Vitamin D",
        "uv_too_low_for_vitamin_d": "UV-Index zu niedrig für Vitamin D Synthese",
        "pressure_stable": "Druck stabil",
        "pressure_rising": "Druck steigt",
        "pressure_falling": "Druck fällt",
        "low_risk": "Niedriges Risiko",
        "moderate_risk": "Mittleres Risiko",
        "high_risk": "Hohes Risiko",
        "headache_low": "Stabiler Luftdruck",
        "headache_moderate": "Leichte Druckschwankung",
        "headache_elevated": "Erhöhtes Kopfschmerzrisiko",
        "headache_high": "Starke Druckänderung - Migränerisiko",
        "uv_risk_low": "Gering",
        "uv_risk_moderate": "Mäßig",
        "uv_risk_high": "Hoch",
        "uv_risk_very_high": "Sehr hoch",
        "uv_risk_extreme": "Extrem",
        "uv_protection_low": "Kein Schutz nötig",
        "uv_protection_moderate": "Sonnencreme LSF 15+",
        "uv_protection_high": "Sonnencreme, Hut, Schatten",
        "uv_protection_very_high": "Voller Schutz, Mittagssonne meiden",
        "uv_protection_extreme": "Draußen meiden 10-16 Uhr",
        # checks
        "q_umbrella": "Regenschirm?",
        "q_sun_protection": "Sonnenschutz?",
        "q_jacket": "Jacke anziehen?",
        "q_sleep_quality": "Schlafqualität?",
        "q_sleep_forecast": "Schlafprognose?",
        "q_wind": "Wind beachten?",
        "q_weather_warnings": "Wetterwarnungen",
        "q_frost": "Frostgefahr?",
        "q_storm": "Sturmwarnung?",
        "q_air_quality": "Luftqualität?",
        "a_yes_definitely": "Ja, unbedingt!",
        "a_just_in_case": "Sicherheitshalber",
        "a_not_needed": "Nicht nötig",
        "a_essential": "Unbedingt!",
        "a_recommended": "Empfohlen",
        "a_extended_time": "Bei längerem Aufenthalt",
        "a_heavy_coat": "Dicke Winterjacke",
        "a_warm_jacket": "Warme Jacke",
        "a_rain_jacket": "Regenjacke",
        "a_light_jacket": "Leichte Jacke",
        "a_sleep_very_good": "Sehr gut",
        "a_sleep_good": "Gut",
        "a_sleep_limited": "Eingeschränkt",
        "a_good_night_expected": "Gute Nacht erwartet",
        "a_ok_tonight": "Ok für heute Nacht",
        "a_difficult_night": "Schwierige Nacht",
        "a_strong_wind": "Starker Wind!",
        "a_gusty_wind": "Böiger Wind",
        "a_warning_active": "Warnung aktiv!",
        "a_frost_caution": "Ja, Vorsicht!",
        "a_light_frost": "Leichter Frost",
        "a_stay_inside": "Ja, drinnen bleiben!",
        "a_aqi_poor": "Schlecht",
        "a_aqi_moderate": "Mäßig",
        "detail_rain": "{value}% Regenwahrscheinlichkeit",
        "detail_uv": "UV-Index: {value}",
        "detail_feels": "Gefühlt {value}°C",
        "detail_frost": "{value}°C gefühlt",
        "detail_sleep": "{temperature}°C, {humidity}% Feuchte",
        "detail_tonight": "Prognose für heute Nacht",
        "detail_wind": "{value} km/h",
        "detail_aqi": "AQI: {value}",
        "detail_critical_alert": "Kritische Wetterwarnung",
        # sleep advice
        "sleep_good": "Gute Schlafbedingungen",
        "sleep_ventilate": "Gut lüften vor dem Schlafen",
        "sleep_warm_blanket": "Warme Decke empfohlen",
        "sleep_humidifier": "Luftbefeuchter kann helfen",
        "sleep_close_windows": "Fenster schließen bei hoher Luftfeuchtigkeit",
        "sleep_moderate": "Mäßige Schlafbedingungen",
        # safety alerts
        "alert_heat_extreme_title": "Extreme Hitze",
        "alert_heat_extreme_message": "Hitzewarnung! Viel trinken, Sonne meiden.",
        "alert_heat_high_title": "Hohe Temperaturen",
        "alert_heat_high_message": "Viel trinken und Pausen im Schatten einlegen.",
        "alert_cold_extreme_title": "Extreme Kälte",
        "alert_cold_extreme_message": "Erfrierungsgefahr! Warm anziehen, Aufenthalt begrenzen.",
        "alert_frost_title": "Frostgefahr",
        "alert_frost_message": "Warm anziehen und auf Glätte achten.",
        "alert_uv_extreme_title": "Extreme UV-Strahlung",
        "alert_uv_extreme_message": "Mittagssonne unbedingt meiden!",
        "alert_uv_very_high_title": "Sehr hohe UV-Strahlung",
        "alert_uv_very_high_message": "Sonnencreme, Hut und Sonnenbrille tragen.",
        "alert_storm_title": "Sturmwarnung",
        "alert_storm_message": "Aufenthalt im Freien vermeiden.",
        "alert_aqi_title": "Schlechte Luftqualität",
        "alert_aqi_message": "Aktivitäten im Freien einschränken.",
        "alert_headache_title": "Kopfschmerz-Risiko",
        # 24h forecast
        "trend_improving": "Wird besser",
        "trend_declining": "Wird schlechter",
        "trend_stable": "Stabil",
        "forecast_best_time_title": "Beste Zeit",
        "forecast_best_time_message": "{window} bietet optimale Bedingungen (Score: {score})",
        "forecast_rain_expected": "Regen erwartet",
        "forecast_strong_wind": "Starker Wind",
        "forecast_limited_hours": "{count} Stunden mit eingeschränkten Bedingungen",
        "forecast_uv_title": "UV-Warnung",
        "forecast_uv_message": "UV-Index bis {value}: Sonnenschutz empfohlen",
        # comfort math
        "dew_point_unknown": "–",
        "dew_point_dry": "Trocken",
        "dew_point_comfortable": "Angenehm",
        "dew_point_slightly_humid": "Leicht feucht",
        "dew_point_humid": "Schwül",
        "dew_point_very_humid": "Sehr schwül",
        "dew_point_oppressive": "Drückend",
        "dew_point_extreme": "Extrem schwül",
        "activity_ideal": "Ideal",
        "activity_suitable": "Geeignet",
        "activity_not_recommended": "Nicht empfohlen",
        "activity_possible": "Möglich",
        "activity_difficult": "Schwierig",
        "activity_good_conditions": "Gute Bedingungen",
        "activity_with_caution": "Mit Vorsicht",
        "activity_not_ideal": "Nicht ideal",
        "activity_perfect": "Perfekt",
        "activity_postpone": "Besser verschieben",
    },
    "en": {
        "excellent": "Excellent",
        "good": "Good",
        "moderate": "Moderate",
        "poor": "Poor",
        "critical": "Critical",
        "best_time_window": "Best Time Window",
        "minutes_until_sunburn": "min until sunburn",
        "minutes_for_vitamin_d": "min for vitamin D",
        "uv_too_low_for_vitamin_d": "UV index too low for vitamin D synthesis",
        "pressure_stable": "Pressure stable",
        "pressure_rising": "Pressure rising",
        "pressure_falling": "Pressure falling",
        "low_risk": "Low risk",
        "moderate_risk": "Moderate risk",
        "high_risk": "High risk",
        "headache_low": "Stable pressure",
        "headache_moderate": "Slight pressure fluctuation",
        "headache_elevated": "Elevated headache risk",
        "headache_high": "Sharp pressure change - migraine risk",
        "uv_risk_low": "Low",
        "uv_risk_moderate": "Moderate",
        "uv_risk_high": "High",
        "uv_risk_very_high": "Very high",
        "uv_risk_extreme": "Extreme",
        "uv_protection_low": "No protection needed",
        "uv_protection_moderate": "Sunscreen SPF 15+",
        "uv_protection_high": "Sunscreen, hat, shade",
        "uv_protection_very_high": "Full protection, avoid midday sun",
        "uv_protection_extreme": "Stay inside 10am-4pm",
        "q_umbrella": "Umbrella?",
        "q_sun_protection": "Sun protection?",
        "q_jacket": "Wear a jacket?",
        "q_sleep_quality": "Sleep quality?",
        "q_sleep_forecast": "Sleep forecast?",
        "q_wind": "Wind advisory?",
        "q_weather_warnings": "Weather Warnings",
        "q_frost": "Frost danger?",
        "q_storm": "Storm warning?",
        "q_air_quality": "Air quality?",
        "a_yes_definitely": "Yes, definitely!",
        "a_just_in_case": "Just in case",
        "a_not_needed": "Not needed",
        "a_essential": "Essential!",
        "a_recommended": "Recommended",
        "a_extended_time": "For extended time",
        "a_heavy_coat": "Heavy winter coat",
        "a_warm_jacket": "Warm jacket",
        "a_rain_jacket": "Rain jacket",
        "a_light_jacket": "Light jacket",
        "a_sleep_very_good": "Very good",
        "a_sleep_good": "Good",
        "a_sleep_limited": "Limited",
        "a_good_night_expected": "Good night expected",
        "a_ok_tonight": "OK for tonight",
        "a_difficult_night": "Difficult night",
        "a_strong_wind": "Strong wind!",
        "a_gusty_wind": "Gusty wind",
        "a_warning_active": "Warning active!",
        "a_frost_caution": "Yes, caution!",
        "a_light_frost": "Light frost",
        "a_stay_inside": "Yes, stay inside!",
        "a_aqi_poor": "Poor",
        "a_aqi_moderate": "Moderate",
        "detail_rain": "{value}% rain probability",
        "detail_uv": "UV index: {value}",
        "detail_feels": "Feels like {value}°C",
        "detail_frost": "{value}°C feels like",
        "detail_sleep": "{temperature}°C, {humidity}% humidity",
        "detail_tonight": "Tonight forecast",
        "detail_wind": "{value} km/h",
        "detail_aqi": "AQI: {value}",
        "detail_critical_alert": "Critical weather alert",
        "sleep_good": "Good sleeping conditions",
        "sleep_ventilate": "Air the room well before bed",
        "sleep_warm_blanket": "Warm blanket recommended",
        "sleep_humidifier": "A humidifier may help",
        "sleep_close_windows": "Close windows when humidity is high",
        "sleep_moderate": "Moderate sleeping conditions",
        "alert_heat_extreme_title": "Extreme Heat",
        "alert_heat_extreme_message": "Heat warning! Stay hydrated, avoid sun.",
        "alert_heat_high_title": "High Temperatures",
        "alert_heat_high_message": "Stay hydrated and take breaks in shade.",
        "alert_cold_extreme_title": "Extreme Cold",
        "alert_cold_extreme_message": "Frostbite risk! Dress warmly, limit exposure.",
        "alert_frost_title": "Frost Warning",
        "alert_frost_message": "Dress warmly and watch for ice.",
        "alert_uv_extreme_title": "Extreme UV",
        "alert_uv_extreme_message": "Avoid midday sun!",
        "alert_uv_very_high_title": "Very High UV",
        "alert_uv_very_high_message": "Wear sunscreen, hat and sunglasses.",
        "alert_storm_title": "Storm Warning",
        "alert_storm_message": "Avoid being outdoors.",
        "alert_aqi_title": "Poor Air Quality",
        "alert_aqi_message": "Limit outdoor activities.",
        "alert_headache_title": "Headache Risk",
        "trend_improving": "Improving",
        "trend_declining": "Declining",
        "trend_stable": "Stable",
        "forecast_best_time_title": "Best Time",
        "forecast_best_time_message": "{window} offers optimal conditions (Score: {score})",
        "forecast_rain_expected": "Rain Expected",
        "forecast_strong_wind": "Strong Wind",
        "forecast_limited_hours": "{count} hours with limited conditions",
        "forecast_uv_title": "UV Warning",
        "forecast_uv_message": "UV index up to {value}: sun protection recommended",
        "dew_point_dry": "Dry",
        "dew_point_comfortable": "Comfortable",
        "dew_point_slightly_humid": "Slightly humid",
        "dew_point_humid": "Humid",
        "dew_point_very_humid": "Very humid",
        "dew_point_oppressive": "Oppressive",
        "dew_point_extreme": "Extremely humid",
        "activity_ideal": "Ideal",
        "activity_suitable": "Suitable",
        "activity_not_recommended": "Not recommended",
        "activity_possible": "Possible",
        "activity_difficult": "Difficult",
        "activity_good_conditions": "Good conditions",
        "activity_with_caution": "With caution",
        "activity_not_ideal": "Not ideal",
        "activity_perfect": "Perfect",
        "activity_postpone": "Better postpone",
    },
}

SUPPORTED_LANGUAGES = tuple(STRINGS)


class Translator:
    """Look up catalog strings for one language with German fallback."""

    def __init__(self, language: str | None = None) -> None:
        normalized = (language or FALLBACK_LANGUAGE).strip().lower()
        if normalized not in STRINGS:
            logger.info("Unsupported language '%s', falling back to %s", language, FALLBACK_LANGUAGE)
            normalized = FALLBACK_LANGUAGE
        self.language = normalized

    def t(self, key: str, **values: object) -> str:
        template = STRINGS[self.language].get(key) or STRINGS[FALLBACK_LANGUAGE].get(key) or key
        return template.format(**values) if values else template


__all__ = ["FALLBACK_LANGUAGE", "STRINGS", "SUPPORTED_LANGUAGES", "Translator"]
