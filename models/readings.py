"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class WeatherReading:
    """A single point-in-time weather observation for one location."""

    location_name: str
    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float


@dataclass(frozen=True, slots=True)
class RiskThresholds:
    """Limits above/below which a reading is flagged as high fire risk."""

    temperature_limit: float = 30.0
    humidity_limit: float = 40.0

    def merged(
        self,
        temperature_limit: Optional[float] = None,
        humidity_limit: Optional[float] = None,
    ) -> "RiskThresholds":
        """Copy with any given limit replacing this one; ``None`` keeps ours."""
        return RiskThresholds(
            temperature_limit=(
                self.temperature_limit if temperature_limit is None else temperature_limit
            ),
            humidity_limit=self.humidity_limit if humidity_limit is None else humidity_limit,
        )


DEFAULT_THRESHOLDS = RiskThresholds()


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Verdict and score for one reading.

    ``is_high_risk`` comes from the threshold comparison and ``risk_score``
    from the linear blend. The two are computed independently and can
    disagree for the same reading.
    """

    reading: WeatherReading
    thresholds: RiskThresholds
    is_high_risk: bool
    risk_score: int
