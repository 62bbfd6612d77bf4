"""Construction-time configuration for the prediction engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from models.records import Coordinate
from settings import Settings


class ConfigurationError(ValueError):
    """Raised when the engine is wired with values it cannot operate on."""


@dataclass(frozen=True)
class ReferenceModelConfig:
    """Constants of the baseline temperature and traffic formulas."""

    base_temperature: float = 23.5
    diurnal_range: float = 2.2
    diurnal_phase_hour: int = 6
    reference_lat: float = 22.5
    reference_lon: float = 114.2
    lat_gradient: float = 1.2
    lon_gradient: float = 0.6
    min_temperature: float = 18.0
    max_temperature: float = 33.0
    traffic_floor: float = 0.15
    corridor_lon: float = 114.18
    corridor_weight: float = 0.55
    corridor_decay: float = 20.0
    rush_weight: float = 0.3
    overnight_hours: range = range(0, 4)
    peak_hours: range = range(10, 14)
    overnight_rush: float = 0.2
    peak_rush: float = 0.8
    default_rush: float = 0.5


@dataclass(frozen=True)
class EngineConfig:
    """Fallback location, sensor layout and reading constants for one engine."""

    fallback: Coordinate = Coordinate(lat=22.4180, lon=114.2106)
    sensor_count: int = 5
    jitter_span: float = 0.015
    urban_heat_offset: float = 1.2
    traffic_heat_weight: float = 1.1
    noise_span: float = 0.9
    reference: ReferenceModelConfig = field(default_factory=ReferenceModelConfig)

    def __post_init__(self) -> None:
        if self.sensor_count < 1:
            raise ConfigurationError(
                f"sensor_count must be a positive integer, got {self.sensor_count}."
            )
        if not (-90.0 <= self.fallback.lat <= 90.0 and -180.0 <= self.fallback.lon <= 180.0):
            raise ConfigurationError(f"Fallback coordinate {self.fallback} is out of range.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "EngineConfig":
        return cls(
            fallback=Coordinate(lat=settings.fallback_lat, lon=settings.fallback_lon),
            sensor_count=settings.sensor_count,
        )
