from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models.readings import DEFAULT_THRESHOLDS, RiskThresholds
from settings import get_settings


@dataclass(frozen=True)
class CLIConfig:
    api_key: Optional[str]
    base_url: str
    units: str
    timeout: float
    thresholds: RiskThresholds


def _positive_or(value: Optional[float], default: float) -> float:
    if value is None:
        return default
    return value if value > 0 else default


def load_config(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> CLIConfig:
    settings = get_settings()
    url = base_url or settings.base_url
    return CLIConfig(
        api_key=(api_key or "").strip() or settings.api_key,
        base_url=url.rstrip("/"),
        units=settings.units,
        timeout=_positive_or(timeout, settings.request_timeout),
        thresholds=DEFAULT_THRESHOLDS.merged(
            settings.temperature_limit, settings.humidity_limit
        ),
    )
