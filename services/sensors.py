"""Synthetic sensor generation around a query point."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Tuple

from models.records import Coordinate, SyntheticSensor
from services.config import EngineConfig
from services.random_source import RandomStream
from services.reference import ReferenceProvider
from services.seeding import seed_for

_EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: Coordinate, target: Coordinate) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lat2 = math.radians(origin.lat), math.radians(target.lat)
    d_lat = lat2 - lat1
    d_lon = math.radians(target.lon - origin.lon)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * _EARTH_RADIUS_KM * math.asin(math.sqrt(a))


class SensorGenerator:
    """Places a fixed number of virtual sensors near a coordinate.

    The layout is seeded from the coordinate, so the same point always gets
    the same sensors. Readings follow the reference models at each jittered
    position, plus an urban heat excess and a little noise.
    """

    def __init__(self, config: EngineConfig, provider: ReferenceProvider) -> None:
        self.config = config
        self.provider = provider

    def generate(self, center: Coordinate, moment: datetime) -> Tuple[SyntheticSensor, ...]:
        cfg = self.config
        stream = RandomStream(seed_for(center.lat, center.lon))
        sensors = []

        for index in range(cfg.sensor_count):
            d_lat = stream.centered(cfg.jitter_span)
            d_lon = stream.centered(cfg.jitter_span)
            position = Coordinate(lat=center.lat + d_lat, lon=center.lon + d_lon)

            reading = self.provider.reading(position, moment)
            temperature = (
                reading.baseline_temperature
                + cfg.urban_heat_offset
                + reading.traffic_index * cfg.traffic_heat_weight
                + stream.centered(cfg.noise_span)
            )

            number = index + 1
            sensors.append(
                SyntheticSensor(
                    id=f"S{number}",
                    name=f"Sensor {number}",
                    position=position,
                    temperature=round(temperature, 2),
                    distance_km=round(haversine_km(center, position), 3),
                )
            )

        return tuple(sensors)
