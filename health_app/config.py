"""Configuration helpers for the health intelligence engine."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from models.locale import FALLBACK_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "temperature": 0.25,
        "precipitation": 0.20,
        "wind": 0.15,
        "humidity": 0.10,
        "uv": 0.10,
        "air_quality": 0.10,
        "visibility": 0.05,
        "pollen": 0.05,
    }
)
DEFAULT_SKIN_TYPE = 2
SKIN_TYPES = range(1, 7)


@dataclass(frozen=True)
class UserSettings:
    """Per-user preferences read (never mutated) during an analysis call."""

    language: str = FALLBACK_LANGUAGE
    skin_type: int = DEFAULT_SKIN_TYPE
    migraine_sensitive: bool = False

    def __post_init__(self) -> None:
        language = (self.language or FALLBACK_LANGUAGE).strip().lower()
        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language %r, using %s", self.language, FALLBACK_LANGUAGE)
            language = FALLBACK_LANGUAGE
        object.__setattr__(self, "language", language)
        if self.skin_type not in SKIN_TYPES:
            logger.warning("Skin type %r outside 1-6, using %s", self.skin_type, DEFAULT_SKIN_TYPE)
            object.__setattr__(self, "skin_type", DEFAULT_SKIN_TYPE)


@dataclass(frozen=True)
class EngineConfig:
    """Immutable weights, thresholds and user settings for the engine.

    Values can be layered from an environment YAML file and environment
    variables via :meth:`from_env`; tests usually construct it directly.
    """

    weights: Mapping[str, float] = field(default_factory=lambda: DEFAULT_WEIGHTS)
    critical_precipitation_probability: float = 40.0
    critical_wind_speed: float = 40.0
    max_score_on_critical: int = 30
    window_min_duration_hours: float = 1.5
    window_slots_per_hour: int = 2
    window_min_slots: int = 3
    window_min_hour_score: int = 25
    night_start_hour: int = 21
    night_end_hour: int = 6
    pressure_window_hours: float = 3.0
    pressure_history_samples: int = 6
    uv_lookahead_hours: int = 12
    timeline_hours: int = 24
    derive_feels_like: bool = False
    settings: UserSettings = field(default_factory=UserSettings)
    environment: str | None = None

    def __post_init__(self) -> None:
        weights = dict(self.weights)
        if set(weights) != set(DEFAULT_WEIGHTS) or not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-6):
            logger.warning("Factor weights %s invalid, using defaults", weights)
            weights = dict(DEFAULT_WEIGHTS)
        object.__setattr__(self, "weights", MappingProxyType(weights))

    def is_night(self, hour: int) -> bool:
        return hour < self.night_end_hour or hour >= self.night_start_hour

    def with_settings(self, **overrides: object) -> "EngineConfig":
        """Return a copy with some user settings replaced."""

        return replace(self, settings=replace(self.settings, **overrides))

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by environment variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("HEALTH_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = f"HEALTH_{key.upper()}"
            return os.getenv(env_key, yaml_config.get(key, default))

        settings = UserSettings(
            language=str(get_value("language", FALLBACK_LANGUAGE)),
            skin_type=_as_int(get_value("skin_type"), DEFAULT_SKIN_TYPE),
            migraine_sensitive=_as_bool(get_value("migraine_sensitive"), False),
        )
        return cls(
            window_min_duration_hours=_as_float(get_value("min_window_hours"), 1.5),
            derive_feels_like=_as_bool(get_value("derive_feels_like"), False),
            settings=settings,
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` YAML file without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config


def _as_int(raw: Optional[str], default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Expected an integer, got %r; using %s", raw, default)
        return default


def _as_float(raw: Optional[str], default: float) -> float:
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Expected a number, got %r; using %s", raw, default)
        return default


def _as_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["DEFAULT_WEIGHTS", "EngineConfig", "UserSettings"]
