from __future__ import annotations

from typing import Any, Dict, Iterable

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_result(payload: Dict[str, Any]) -> None:
    center = payload.get("center") or {}
    echo_heading("Fused Estimate")
    echo_key_values(
        [
            ("center", f"{center.get('lat')}, {center.get('lon')}"),
            ("timestamp", payload.get("timestamp")),
            ("reference_temperature", payload.get("reference_temperature")),
            ("traffic_index", f"{payload.get('traffic_index')} ({payload.get('traffic_level')})"),
            ("sensor_average_temperature", payload.get("sensor_average_temperature")),
            ("fused_temperature", payload.get("fused_temperature")),
        ]
    )

    typer.echo()
    echo_heading(f"Forecast (+{payload.get('forecast_horizon_minutes')} min)")
    typer.echo(f"forecast_temperature: {payload.get('forecast_temperature')}")

    sensors = payload.get("sensors") or []
    typer.echo()
    echo_heading("Sensors")
    if not sensors:
        typer.echo("No sensors reported.")
        return
    for sensor in sensors:
        typer.echo(
            f"  - {sensor.get('id')}: {sensor.get('temperature')} C "
            f"at {sensor.get('lat'):.5f}, {sensor.get('lon'):.5f} "
            f"({sensor.get('distance_km')} km)"
        )
