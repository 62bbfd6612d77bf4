"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A geographic point in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class ReferenceReading:
    """Baseline temperature and congestion computed by the reference models."""

    baseline_temperature: float
    traffic_index: float


@dataclass(frozen=True, slots=True)
class SyntheticSensor:
    """A virtual sensor placed near the query point."""

    id: str
    name: str
    position: Coordinate
    temperature: float
    distance_km: float


@dataclass(frozen=True, slots=True)
class FusionResult:
    """Complete output of one prediction."""

    center: Coordinate
    reference_temperature: float
    traffic_index: float
    traffic_level: str
    sensors: Tuple[SyntheticSensor, ...]
    sensor_average_temperature: float
    fused_temperature: float
    forecast_temperature: float
    forecast_horizon_minutes: int
    timestamp: datetime
