"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas import AssessmentResponse, EvaluateRequest, ThresholdsOverride
from models.readings import DEFAULT_THRESHOLDS
from services.risk import RiskEvaluator
from services.weather_client import WeatherClient, WeatherFetchError, build_default_client
from settings import get_settings

router = APIRouter()


def get_client() -> WeatherClient:
    try:
        return build_default_client()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc


def get_evaluator() -> RiskEvaluator:
    settings = get_settings()
    return RiskEvaluator(
        DEFAULT_THRESHOLDS.merged(settings.temperature_limit, settings.humidity_limit)
    )


@router.get(
    "/risk",
    response_model=AssessmentResponse,
    summary="Fetch current weather for a city and evaluate its fire risk.",
)
def city_risk(
    city: str = Query(..., description="City name to look up."),
    temperature_limit: Optional[float] = Query(None, allow_inf_nan=False),
    humidity_limit: Optional[float] = Query(None, allow_inf_nan=False),
    client: WeatherClient = Depends(get_client),
    evaluator: RiskEvaluator = Depends(get_evaluator),
) -> AssessmentResponse:
    if not city.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="City name must not be empty.",
        )
    try:
        reading = client.fetch_reading(city)
    except WeatherFetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    thresholds = evaluator.thresholds.merged(temperature_limit, humidity_limit)
    return AssessmentResponse.from_assessment(evaluator.evaluate(reading, thresholds))


@router.post(
    "/risk/evaluate",
    response_model=AssessmentResponse,
    summary="Evaluate fire risk for a caller-supplied reading.",
)
def evaluate_reading(
    request: EvaluateRequest,
    evaluator: RiskEvaluator = Depends(get_evaluator),
) -> AssessmentResponse:
    overrides = request.thresholds or ThresholdsOverride()
    thresholds = evaluator.thresholds.merged(
        overrides.temperature_limit, overrides.humidity_limit
    )
    assessment = evaluator.evaluate(request.reading.to_reading(), thresholds)
    return AssessmentResponse.from_assessment(assessment)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
