"""Unit tests for the fire risk rules."""

from __future__ import annotations

import pytest

from models.readings import DEFAULT_THRESHOLDS, RiskThresholds, WeatherReading
from services.risk import RiskEvaluator, calculate_risk, calculate_risk_score


def _reading(temperature: float, humidity: float, wind: float = 3.0) -> WeatherReading:
    """Helper to build deterministic readings."""

    return WeatherReading(
        location_name="Cuiabá",
        temperature_c=temperature,
        humidity_pct=humidity,
        wind_speed_ms=wind,
    )


@pytest.mark.parametrize(
    ("temperature", "humidity", "expected"),
    [
        (35.0, 20.0, True),
        (30.1, 39.9, True),
        (25.0, 60.0, False),
        (35.0, 60.0, False),
        (25.0, 20.0, False),
        (30.0, 20.0, False),
        (35.0, 40.0, False),
        (45.0, -5.0, True),
    ],
)
def test_calculate_risk_with_default_thresholds(
    temperature: float, humidity: float, expected: bool
) -> None:
    assert calculate_risk(_reading(temperature, humidity)) is expected


def test_explicit_default_thresholds_match_implicit_defaults() -> None:
    for temperature, humidity in [(35.0, 20.0), (30.0, 40.0), (10.0, 90.0), (31.0, 39.0)]:
        reading = _reading(temperature, humidity)
        explicit = calculate_risk(reading, RiskThresholds(temperature_limit=30.0, humidity_limit=40.0))
        assert explicit == calculate_risk(reading)


def test_custom_thresholds() -> None:
    reading = _reading(25.0, 45.0)
    thresholds = RiskThresholds(temperature_limit=20.0, humidity_limit=50.0)

    assert calculate_risk(reading, thresholds) is True
    assert calculate_risk(reading) is False


@pytest.mark.parametrize(
    ("temperature", "humidity", "expected"),
    [
        (35.0, 20.0, 75),
        (25.0, 60.0, 45),
        (60.0, 0.0, 100),
        (0.0, 100.0, 0),
        (30.0, 40.0, 60),
        (20.7, 35.5, 52),
        (55.0, 130.0, 50),
    ],
)
def test_calculate_risk_score(temperature: float, humidity: float, expected: int) -> None:
    assert calculate_risk_score(_reading(temperature, humidity)) == expected


def test_risk_score_is_not_floored_for_negative_temperatures() -> None:
    # -30 °C gives a temperature term of -60; the humidity term caps at 0.
    assert calculate_risk_score(_reading(-30.0, 100.0)) == -30
    # Truncation toward zero, not floor: (-41 + 0) / 2 -> -20.
    assert calculate_risk_score(_reading(-20.5, 100.0)) == -20


def test_risk_score_exceeds_hundred_for_negative_humidity() -> None:
    assert calculate_risk_score(_reading(50.0, -50.0)) == 125


def test_risk_score_is_deterministic() -> None:
    reading = _reading(33.3, 27.7)
    assert calculate_risk_score(reading) == calculate_risk_score(_reading(33.3, 27.7))


def test_score_and_verdict_can_disagree() -> None:
    # Hot but humid: high score, yet the threshold rule says low risk.
    reading = _reading(45.0, 41.0)

    assert calculate_risk(reading) is False
    assert calculate_risk_score(reading) == 74


def test_evaluator_uses_defaults() -> None:
    evaluator = RiskEvaluator()

    assessment = evaluator.evaluate(_reading(35.0, 20.0))

    assert evaluator.thresholds == DEFAULT_THRESHOLDS
    assert assessment.is_high_risk is True
    assert assessment.risk_score == 75
    assert assessment.thresholds == DEFAULT_THRESHOLDS
    assert assessment.reading.location_name == "Cuiabá"


def test_evaluator_per_call_thresholds_override_instance_thresholds() -> None:
    evaluator = RiskEvaluator(RiskThresholds(temperature_limit=40.0, humidity_limit=10.0))
    reading = _reading(25.0, 45.0)

    assert evaluator.evaluate(reading).is_high_risk is False

    custom = RiskThresholds(temperature_limit=20.0, humidity_limit=50.0)
    assessment = evaluator.evaluate(reading, custom)

    assert assessment.is_high_risk is True
    assert assessment.thresholds == custom


def test_merged_thresholds_replace_only_given_limits() -> None:
    base = RiskThresholds(temperature_limit=28.0, humidity_limit=35.0)

    assert base.merged() == base
    assert base.merged(temperature_limit=20.0) == RiskThresholds(20.0, 35.0)
    assert base.merged(humidity_limit=0.0) == RiskThresholds(28.0, 0.0)
    assert DEFAULT_THRESHOLDS.merged(31.0, 39.0) == RiskThresholds(31.0, 39.0)
