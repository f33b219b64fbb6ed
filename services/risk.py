"""Fire risk rules applied to weather readings."""

from __future__ import annotations

import logging
from typing import Optional

from models.readings import (
    DEFAULT_THRESHOLDS,
    RiskAssessment,
    RiskThresholds,
    WeatherReading,
)

logger = logging.getLogger(__name__)


def calculate_risk(
    reading: WeatherReading, thresholds: RiskThresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Return True when the reading is hotter and drier than the limits.

    Both comparisons are strict, so a reading sitting exactly on either
    limit is low risk. Inputs are not range checked.
    """
    return (
        reading.temperature_c > thresholds.temperature_limit
        and reading.humidity_pct < thresholds.humidity_limit
    )


def calculate_risk_score(reading: WeatherReading) -> int:
    """Blend temperature and humidity into a 0-100 score.

    The temperature term is only capped from above and the humidity term only
    floored from below, so extreme inputs (negative temperature or humidity)
    can push the result outside 0-100. Every step truncates toward zero.
    """
    temp_component = int(min(100, reading.temperature_c * 2))
    humidity_component = int(max(0, 100 - reading.humidity_pct))
    return int((temp_component + humidity_component) / 2)


class RiskEvaluator:
    """Applies one set of limits to readings and pairs the verdict with its score."""

    def __init__(self, thresholds: Optional[RiskThresholds] = None) -> None:
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    def evaluate(
        self,
        reading: WeatherReading,
        thresholds: Optional[RiskThresholds] = None,
    ) -> RiskAssessment:
        limits = thresholds or self.thresholds
        assessment = RiskAssessment(
            reading=reading,
            thresholds=limits,
            is_high_risk=calculate_risk(reading, limits),
            risk_score=calculate_risk_score(reading),
        )
        logger.debug(
            "Evaluated fire risk",
            extra={
                "location": reading.location_name,
                "is_high_risk": assessment.is_high_risk,
                "risk_score": assessment.risk_score,
                "temperature_limit": limits.temperature_limit,
                "humidity_limit": limits.humidity_limit,
            },
        )
        return assessment
