from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer

from app.schemas import PredictionResponse
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_result
from logging_config import configure_logging
from services.predictor import build_default_predictor


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for querying the urban fusion engine.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Fusion API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the API to respond.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


def _predict_offline(
    lat: Optional[float], lon: Optional[float], timestamp: Optional[str]
) -> Dict[str, Any]:
    configure_logging()
    result = build_default_predictor().predict(lat=lat, lon=lon, timestamp=timestamp)
    return PredictionResponse.from_result(result).model_dump(mode="json")


@app.command("predict")
def predict_command(
    ctx: typer.Context,
    lat: Optional[float] = typer.Option(None, "--lat", help="Latitude in decimal degrees."),
    lon: Optional[float] = typer.Option(None, "--lon", help="Longitude in decimal degrees."),
    timestamp: Optional[str] = typer.Option(
        None, "--timestamp", "-t", help="ISO-8601 instant to evaluate (defaults to now)."
    ),
    offline: bool = typer.Option(
        False,
        "--offline/--online",
        help="Run the engine in-process instead of calling the API.",
    ),
) -> None:
    """Fetch a fused temperature estimate and 30-minute forecast for a point."""
    state = _get_state(ctx)
    if offline:
        payload = _predict_offline(lat, lon, timestamp)
    else:
        typer.echo(f"Requesting prediction from {state.config.base_url} ...")
        payload = state.client.predict(lat, lon, timestamp)
    render_result(payload)
