"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.readings import RiskAssessment, WeatherReading


class RiskLevel(str, Enum):
    """Fire risk verdict exposed via the API."""

    high = "high"
    low = "low"


class ThresholdsModel(BaseModel):
    """Limits actually applied to an assessment."""

    temperature_limit: float
    humidity_limit: float


class ThresholdsOverride(BaseModel):
    """Caller-supplied limits; omitted fields keep the configured ones."""

    model_config = ConfigDict(allow_inf_nan=False)

    temperature_limit: Optional[float] = Field(
        None, description="Temperature (°C) above which risk is high."
    )
    humidity_limit: Optional[float] = Field(
        None, description="Humidity (%) below which risk is high."
    )


class ReadingModel(BaseModel):
    """A weather reading supplied directly by the caller."""

    model_config = ConfigDict(allow_inf_nan=False)

    location_name: str = ""
    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float = 0.0

    def to_reading(self) -> WeatherReading:
        return WeatherReading(
            location_name=self.location_name,
            temperature_c=self.temperature_c,
            humidity_pct=self.humidity_pct,
            wind_speed_ms=self.wind_speed_ms,
        )


class EvaluateRequest(BaseModel):
    reading: ReadingModel
    thresholds: Optional[ThresholdsOverride] = None


class AssessmentResponse(BaseModel):
    """Reading plus both risk outputs; the two are not guaranteed to agree."""

    location_name: str
    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float
    is_high_risk: bool
    risk_level: RiskLevel
    risk_score: int
    thresholds: ThresholdsModel

    @classmethod
    def from_assessment(cls, assessment: RiskAssessment) -> "AssessmentResponse":
        reading = assessment.reading
        return cls(
            location_name=reading.location_name,
            temperature_c=reading.temperature_c,
            humidity_pct=reading.humidity_pct,
            wind_speed_ms=reading.wind_speed_ms,
            is_high_risk=assessment.is_high_risk,
            risk_level=RiskLevel.high if assessment.is_high_risk else RiskLevel.low,
            risk_score=assessment.risk_score,
            thresholds=ThresholdsModel(
                temperature_limit=assessment.thresholds.temperature_limit,
                humidity_limit=assessment.thresholds.humidity_limit,
            ),
        )
