"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from models.records import FusionResult


class TrafficLevel(str, Enum):
    """Coarse congestion bands derived from the traffic index."""

    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"


class CenterPoint(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class SensorReadingOut(BaseModel):
    """A synthetic sensor placed near the requested point."""

    id: str
    name: str
    lat: float
    lon: float
    temperature: float = Field(..., description="Reading in degrees Celsius.")
    distance_km: float = Field(..., ge=0, description="Distance from the requested point.")


class PredictionResponse(BaseModel):
    """Fused temperature estimate with its short-horizon forecast."""

    center: CenterPoint
    reference_temperature: float = Field(..., ge=18, le=33)
    traffic_index: float = Field(..., ge=0, le=1)
    traffic_level: TrafficLevel
    sensors: List[SensorReadingOut] = Field(default_factory=list)
    sensor_average_temperature: float
    fused_temperature: float
    forecast_temperature: float
    forecast_horizon_minutes: int = Field(..., gt=0)
    timestamp: datetime

    @classmethod
    def from_result(cls, result: FusionResult) -> "PredictionResponse":
        return cls(
            center=CenterPoint(lat=result.center.lat, lon=result.center.lon),
            reference_temperature=result.reference_temperature,
            traffic_index=result.traffic_index,
            traffic_level=TrafficLevel(result.traffic_level),
            sensors=[
                SensorReadingOut(
                    id=sensor.id,
                    name=sensor.name,
                    lat=sensor.position.lat,
                    lon=sensor.position.lon,
                    temperature=sensor.temperature,
                    distance_km=sensor.distance_km,
                )
                for sensor in result.sensors
            ],
            sensor_average_temperature=result.sensor_average_temperature,
            fused_temperature=result.fused_temperature,
            forecast_temperature=result.forecast_temperature,
            forecast_horizon_minutes=result.forecast_horizon_minutes,
            timestamp=result.timestamp,
        )
