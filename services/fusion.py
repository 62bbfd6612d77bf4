"""Fixed-weight fusion of sensor readings with the reference model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from models.records import SyntheticSensor
from services.config import ConfigurationError

SENSOR_WEIGHT = 0.68
REFERENCE_WEIGHT = 0.25
TRAFFIC_CORRECTION_WEIGHT = 0.07
TRAFFIC_HEAT_FACTOR = 2.0


@dataclass(frozen=True)
class FusionSummary:
    sensor_average: float
    fused_temperature: float


class FusionEngine:
    """Pure fusion component that can be unit tested in isolation."""

    def fuse(
        self,
        sensors: Sequence[SyntheticSensor],
        reference_temperature: float,
        traffic_index: float,
    ) -> FusionSummary:
        if not sensors:
            raise ConfigurationError("Cannot fuse an empty sensor set.")

        average = sum(sensor.temperature for sensor in sensors) / len(sensors)
        fused = (
            SENSOR_WEIGHT * average
            + REFERENCE_WEIGHT * reference_temperature
            + TRAFFIC_CORRECTION_WEIGHT
            * (reference_temperature + traffic_index * TRAFFIC_HEAT_FACTOR)
        )
        return FusionSummary(
            sensor_average=round(average, 2),
            fused_temperature=round(fused, 2),
        )
