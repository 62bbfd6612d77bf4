"""Reference temperature and traffic models.

Both models are pure functions of a location and a moment. They stand in
for the weather-observatory and traffic-detector feeds, which are reached
through the :class:`ReferenceProvider` interface so callers can swap in a
stub or a live source without touching the fusion math.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Protocol

from models.records import Coordinate, ReferenceReading
from services.config import ReferenceModelConfig
from services.seeding import clamp

DEFAULT_MODEL = ReferenceModelConfig()


def _utc_hour(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).hour


def baseline_temperature(
    lat: float,
    lon: float,
    moment: datetime,
    model: ReferenceModelConfig = DEFAULT_MODEL,
) -> float:
    """Diurnal sinusoid plus a linear spatial gradient, clamped to a plausible band."""
    hour = _utc_hour(moment)
    daily = 0.5 + 0.5 * math.sin((hour - model.diurnal_phase_hour) / 24 * 2 * math.pi)
    spatial = (model.reference_lat - lat) * model.lat_gradient + (
        lon - model.reference_lon
    ) * model.lon_gradient
    value = model.base_temperature + daily * model.diurnal_range - spatial
    return clamp(value, model.min_temperature, model.max_temperature)


def rush_factor(hour: int, model: ReferenceModelConfig = DEFAULT_MODEL) -> float:
    if hour in model.overnight_hours:
        return model.overnight_rush
    if hour in model.peak_hours:
        return model.peak_rush
    return model.default_rush


def traffic_index(
    lat: float,
    lon: float,
    moment: datetime,
    model: ReferenceModelConfig = DEFAULT_MODEL,
) -> float:
    """Congestion in ``[0, 1]``: hour-of-day regime plus a highway corridor band."""
    band = math.exp(-abs(lon - model.corridor_lon) * model.corridor_decay)
    rush = rush_factor(_utc_hour(moment), model)
    value = model.traffic_floor + model.corridor_weight * band + model.rush_weight * rush
    return clamp(value, 0.0, 1.0)


def traffic_level(index: float) -> str:
    if index > 0.65:
        return "HIGH"
    if index > 0.45:
        return "MEDIUM"
    return "LOW"


class ReferenceProvider(Protocol):
    def reading(self, coordinate: Coordinate, moment: datetime) -> ReferenceReading:
        ...


class ModelReferenceProvider:
    """Reference provider backed by the closed-form models above."""

    def __init__(self, model: ReferenceModelConfig = DEFAULT_MODEL) -> None:
        self.model = model

    def reading(self, coordinate: Coordinate, moment: datetime) -> ReferenceReading:
        return ReferenceReading(
            baseline_temperature=baseline_temperature(
                coordinate.lat, coordinate.lon, moment, self.model
            ),
            traffic_index=traffic_index(coordinate.lat, coordinate.lon, moment, self.model),
        )
