from __future__ import annotations

from typing import Any, Iterable

import typer

from models.readings import RiskAssessment

HIGH_RISK_LABEL = "ALTO 🚨"
LOW_RISK_LABEL = "Baixo ✅"
FETCH_FAILED_MESSAGE = "Erro ao obter os dados climáticos."


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def risk_label(is_high_risk: bool) -> str:
    return HIGH_RISK_LABEL if is_high_risk else LOW_RISK_LABEL


def render_assessment(assessment: RiskAssessment, show_score: bool = False) -> None:
    reading = assessment.reading
    echo_heading(f"=== Dados Climáticos de {reading.location_name} ===")
    echo_key_values(
        [
            ("Temperatura", f"{reading.temperature_c} °C"),
            ("Umidade", f"{reading.humidity_pct} %"),
            ("Vento", f"{reading.wind_speed_ms} m/s"),
        ]
    )
    label = risk_label(assessment.is_high_risk)
    typer.secho(
        f"Risco de Incêndio: {label}",
        fg=typer.colors.RED if assessment.is_high_risk else typer.colors.GREEN,
    )
    if show_score:
        typer.echo(f"Pontuação de Risco: {assessment.risk_score}/100")


def render_fetch_failure() -> None:
    typer.secho(FETCH_FAILED_MESSAGE, fg=typer.colors.RED)
