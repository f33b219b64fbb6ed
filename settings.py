from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_API_KEY_ENV = "OPENWEATHER_API_KEY"
_BASE_URL_ENV = "OPENWEATHER_BASE_URL"
_UNITS_ENV = "OPENWEATHER_UNITS"
_TIMEOUT_ENV = "WEATHER_REQUEST_TIMEOUT"
_TEMPERATURE_LIMIT_ENV = "FIRE_RISK_TEMPERATURE_LIMIT"
_HUMIDITY_LIMIT_ENV = "FIRE_RISK_HUMIDITY_LIMIT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    base_url: str
    units: str
    request_timeout: float
    temperature_limit: float
    humidity_limit: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_float_env(name: str, default: float, positive: bool = False) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    if positive and parsed <= 0:
        return default
    return parsed


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_key=_read_optional_env(_API_KEY_ENV, None),
        base_url=_read_str_env(_BASE_URL_ENV, DEFAULT_BASE_URL).rstrip("/"),
        units=_read_str_env(_UNITS_ENV, "metric"),
        request_timeout=_read_float_env(_TIMEOUT_ENV, DEFAULT_TIMEOUT, positive=True),
        temperature_limit=_read_float_env(_TEMPERATURE_LIMIT_ENV, 30.0),
        humidity_limit=_read_float_env(_HUMIDITY_LIMIT_ENV, 40.0),
        log_level=_read_log_level("WARNING"),
    )
