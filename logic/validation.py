"""Pydantic schemas and helpers for validating request payloads at the boundary."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.weather_sample import (
    AirQualityReading,
    DailySummary,
    PollenReading,
    WeatherAlert,
    WeatherSample,
)


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class _LooseModel(BaseModel):
    """Accept snake_case or camelCase keys, ignore unknown ones, reject NaN and infinities."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


class WeatherSampleInput(_LooseModel):
    """One observation or forecast hour as delivered by a data provider."""

    temperature: Optional[float] = None
    feels_like: Optional[float] = Field(
        default=None,
        validation_alias=_aliases("feels_like", "feelsLike", "apparentTemperature", "apparent_temperature"),
    )
    humidity: Optional[float] = None
    wind_speed: Optional[float] = Field(default=None, validation_alias=_aliases("wind_speed", "windSpeed"))
    precipitation_probability: Optional[float] = Field(
        default=None,
        validation_alias=_aliases("precipitation_probability", "precipitationProbability", "precipProb"),
    )
    uv_index: Optional[float] = Field(default=None, validation_alias=_aliases("uv_index", "uvIndex", "uv"))
    visibility: Optional[float] = None
    aqi: Optional[float] = Field(default=None, validation_alias=_aliases("aqi", "aqiValue", "aqi_value"))
    pollen_level: Optional[float] = Field(default=None, validation_alias=_aliases("pollen_level", "pollenLevel"))
    pressure: Optional[float] = None
    surface_pressure: Optional[float] = Field(
        default=None, validation_alias=_aliases("surface_pressure", "surfacePressure")
    )
    time: Optional[str] = Field(default=None, validation_alias=_aliases("time", "timeLabel", "time_label"))

    def to_sample(self) -> WeatherSample:
        timestamp: Optional[datetime] = None
        if self.time:
            try:
                timestamp = datetime.fromisoformat(self.time)
            except ValueError:
                timestamp = None
            # Providers mix local and offset-carrying strings; keep the wall-clock time.
            if timestamp is not None and timestamp.tzinfo is not None:
                timestamp = timestamp.replace(tzinfo=None)
        return WeatherSample(
            temperature=self.temperature,
            feels_like=self.feels_like,
            humidity=self.humidity,
            wind_speed=self.wind_speed,
            precipitation_probability=self.precipitation_probability,
            uv_index=self.uv_index,
            visibility=self.visibility,
            aqi=self.aqi,
            pollen_level=self.pollen_level,
            pressure=self.pressure,
            surface_pressure=self.surface_pressure,
            timestamp=timestamp,
            time_label=self.time,
        )


class DailySummaryInput(_LooseModel):
    precipitation_probability_max: Optional[float] = Field(
        default=None,
        validation_alias=_aliases(
            "precipitation_probability_max", "precipProbMax", "precipitationProbabilityMax"
        ),
    )
    uv_index_max: Optional[float] = Field(default=None, validation_alias=_aliases("uv_index_max", "uvIndexMax"))

    def to_summary(self) -> DailySummary:
        return DailySummary(
            precipitation_probability_max=self.precipitation_probability_max,
            uv_index_max=self.uv_index_max,
        )


class AirQualityInput(_LooseModel):
    european_aqi: Optional[float] = Field(default=None, validation_alias=_aliases("european_aqi", "europeanAqi"))
    us_aqi: Optional[float] = Field(default=None, validation_alias=_aliases("us_aqi", "usAqi"))
    label: Optional[str] = None

    def to_reading(self) -> AirQualityReading:
        return AirQualityReading(european_aqi=self.european_aqi, us_aqi=self.us_aqi, label=self.label)


class PollenInput(_LooseModel):
    trees: Optional[float] = None
    grass: Optional[float] = None
    weeds: Optional[float] = None

    def to_reading(self) -> PollenReading:
        return PollenReading(trees=self.trees, grass=self.grass, weeds=self.weeds)


class WeatherAlertInput(_LooseModel):
    title: Optional[str] = None
    severity: Optional[str] = None

    def to_alert(self) -> WeatherAlert:
        return WeatherAlert(title=self.title, severity=self.severity)


class SettingsInput(_LooseModel):
    """Per-request overrides of the configured user settings."""

    language: Optional[str] = Field(default=None, min_length=2)
    skin_type: Optional[int] = Field(default=None, ge=1, le=6, validation_alias=_aliases("skin_type", "skinType"))
    migraine_sensitive: Optional[bool] = Field(
        default=None,
        validation_alias=_aliases("migraine_sensitive", "migraineSensitive", "sensitiveToMigraine"),
    )

    def overrides(self) -> Dict[str, Any]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


class AnalyzeRequest(_LooseModel):
    """Full app state for one analysis call."""

    current: WeatherSampleInput = Field(default_factory=WeatherSampleInput)
    hourly: List[WeatherSampleInput] = Field(default_factory=list)
    daily: Optional[DailySummaryInput] = None
    air_quality: Optional[AirQualityInput] = Field(
        default=None, validation_alias=_aliases("air_quality", "airQuality", "aqi")
    )
    pollen: Optional[PollenInput] = None
    alerts: List[WeatherAlertInput] = Field(default_factory=list)
    settings: Optional[SettingsInput] = None
    last_updated: Optional[str] = Field(default=None, validation_alias=_aliases("last_updated", "lastUpdated"))

    @field_validator("daily", mode="before")
    @classmethod
    def _first_day(cls, value: Any) -> Any:
        if isinstance(value, list):
            return value[0] if value else None
        return value

    @field_validator("hourly", "alerts", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ForecastRequest(_LooseModel):
    """Hourly series plus the current AQI and pollen level applied to every hour."""

    hourly: List[WeatherSampleInput] = Field(default_factory=list)
    aqi_value: float = Field(default=0.0, validation_alias=_aliases("aqi_value", "aqiValue"))
    pollen_level: float = Field(default=0.0, validation_alias=_aliases("pollen_level", "pollenLevel"))
    language: Optional[str] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "AirQualityInput",
    "AnalyzeRequest",
    "DailySummaryInput",
    "ForecastRequest",
    "PollenInput",
    "SettingsInput",
    "ValidationResult",
    "WeatherAlertInput",
    "WeatherSampleInput",
    "validation_failure",
]
