from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.config import CLIConfig, load_config
from cli.render import render_assessment, render_fetch_failure
from logging_config import configure_logging
from models.readings import RiskThresholds
from services.risk import RiskEvaluator
from services.weather_client import WeatherClient

PROMPT_TEXT = (
    "Digite o nome da cidade para monitorar\n"
    "(deixe em branco ou pressione Ctrl-C para sair)"
)
GOODBYE_MESSAGE = "Programa encerrado."


@dataclass
class CLIState:
    config: CLIConfig
    evaluator: RiskEvaluator


app = typer.Typer(
    help="Check current weather for a city and flag its fire risk.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _open_client(ctx: typer.Context, state: CLIState) -> WeatherClient:
    config = state.config
    if not config.api_key:
        typer.secho(
            "No API key configured. Set OPENWEATHER_API_KEY or pass --api-key.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    client = WeatherClient(
        api_key=config.api_key,
        base_url=config.base_url,
        units=config.units,
        timeout=config.timeout,
    )
    ctx.call_on_close(client.close)
    return client


def _run_cycle(
    client: WeatherClient,
    evaluator: RiskEvaluator,
    city: str,
    thresholds: RiskThresholds,
    show_score: bool,
) -> bool:
    """Fetch, evaluate and display one city. Returns False when fetching failed."""
    reading = client.get_reading(city)
    if reading is None:
        render_fetch_failure()
        return False
    render_assessment(evaluator.evaluate(reading, thresholds), show_score=show_score)
    return True


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="OpenWeatherMap API key (defaults to OPENWEATHER_API_KEY env).",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Weather API base URL (defaults to OPENWEATHER_BASE_URL env).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the weather API before giving up.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or WARNING).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.upper() if log_level else None)
    config = load_config(api_key=api_key, base_url=base_url, timeout=timeout)
    ctx.obj = CLIState(config=config, evaluator=RiskEvaluator(config.thresholds))


@app.command("monitor")
def monitor_command(
    ctx: typer.Context,
    temperature_limit: Optional[float] = typer.Option(
        None, "--temperature-limit", help="Temperature (°C) above which risk is high."
    ),
    humidity_limit: Optional[float] = typer.Option(
        None, "--humidity-limit", help="Humidity (%) below which risk is high."
    ),
    show_score: bool = typer.Option(
        False, "--score/--no-score", help="Also display the 0-100 risk score."
    ),
) -> None:
    """Prompt for cities until a blank line or Ctrl-C."""
    state = _get_state(ctx)
    client = _open_client(ctx, state)
    thresholds = state.config.thresholds.merged(temperature_limit, humidity_limit)

    while True:
        try:
            city = typer.prompt(PROMPT_TEXT, default="", show_default=False)
        except typer.Abort:
            city = ""
        if not city.strip():
            typer.echo(GOODBYE_MESSAGE)
            break
        _run_cycle(client, state.evaluator, city, thresholds, show_score)
        typer.echo()


@app.command("check")
def check_command(
    ctx: typer.Context,
    city: str = typer.Argument(..., help="City to look up, e.g. 'Sao Paulo'."),
    temperature_limit: Optional[float] = typer.Option(
        None, "--temperature-limit", help="Temperature (°C) above which risk is high."
    ),
    humidity_limit: Optional[float] = typer.Option(
        None, "--humidity-limit", help="Humidity (%) below which risk is high."
    ),
    show_score: bool = typer.Option(
        False, "--score/--no-score", help="Also display the 0-100 risk score."
    ),
) -> None:
    """Check a single city once."""
    if not city.strip():
        raise typer.BadParameter("City name must not be empty.", param_hint="CITY")
    state = _get_state(ctx)
    client = _open_client(ctx, state)
    thresholds = state.config.thresholds.merged(temperature_limit, humidity_limit)
    if not _run_cycle(client, state.evaluator, city, thresholds, show_score):
        raise typer.Exit(code=1)
