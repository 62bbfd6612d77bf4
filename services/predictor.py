"""Prediction orchestration: seeding, sensors, fusion and forecast."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Optional, Union

from models.records import Coordinate, FusionResult
from services.config import EngineConfig
from services.forecast import ForecastProjector
from services.fusion import FusionEngine
from services.reference import ModelReferenceProvider, ReferenceProvider, traffic_level
from services.seeding import clamp, seed_for
from services.sensors import SensorGenerator
from settings import get_settings

logger = logging.getLogger(__name__)

CoordinateInput = Union[float, int, str, None]
TimestampInput = Union[datetime, str, None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PredictionService:
    """Coordinates the engine components for one request at a time.

    Holds only immutable collaborators; every call builds its own random
    stream, so a single instance can serve concurrent requests.
    """

    def __init__(
        self,
        config: EngineConfig,
        provider: Optional[ReferenceProvider] = None,
        fusion: Optional[FusionEngine] = None,
        projector: Optional[ForecastProjector] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.config = config
        self.provider = provider or ModelReferenceProvider(config.reference)
        self.generator = SensorGenerator(config, self.provider)
        self.fusion = fusion or FusionEngine()
        self.projector = projector or ForecastProjector()
        self._clock = clock

    def predict(
        self,
        lat: CoordinateInput = None,
        lon: CoordinateInput = None,
        timestamp: TimestampInput = None,
    ) -> FusionResult:
        """Produce a fused estimate and forecast; recoverable input never raises."""
        center = self._resolve_center(lat, lon)
        moment = self._resolve_moment(timestamp)

        reference = self.provider.reading(center, moment)
        reference_temperature = round(reference.baseline_temperature, 2)
        congestion = round(reference.traffic_index, 2)

        sensors = self.generator.generate(center, moment)
        summary = self.fusion.fuse(sensors, reference_temperature, congestion)
        forecast = self.projector.project(summary.fused_temperature, congestion)

        logger.debug(
            "Prediction computed",
            extra={
                "lat": center.lat,
                "lon": center.lon,
                "seed": seed_for(center.lat, center.lon),
                "sensor_count": len(sensors),
                "fused_temperature": summary.fused_temperature,
                "forecast_temperature": forecast,
            },
        )

        return FusionResult(
            center=center,
            reference_temperature=reference_temperature,
            traffic_index=congestion,
            traffic_level=traffic_level(congestion),
            sensors=sensors,
            sensor_average_temperature=summary.sensor_average,
            fused_temperature=summary.fused_temperature,
            forecast_temperature=forecast,
            forecast_horizon_minutes=self.projector.horizon_minutes,
            timestamp=moment,
        )

    def _resolve_center(self, lat: CoordinateInput, lon: CoordinateInput) -> Coordinate:
        fallback = self.config.fallback
        parsed_lat = self._parse_degrees(lat)
        parsed_lon = self._parse_degrees(lon)
        if parsed_lat is None:
            self._log_fallback("lat", lat, fallback.lat)
            parsed_lat = fallback.lat
        if parsed_lon is None:
            self._log_fallback("lon", lon, fallback.lon)
            parsed_lon = fallback.lon
        return Coordinate(
            lat=clamp(parsed_lat, -90.0, 90.0),
            lon=clamp(parsed_lon, -180.0, 180.0),
        )

    @staticmethod
    def _log_fallback(axis: str, value: CoordinateInput, substitute: float) -> None:
        logger.warning(
            "Invalid %s, using fallback value",
            axis,
            extra={
                "reason": "non-numeric or non-finite coordinate",
                "invalid_value": repr(value),
                axis: substitute,
            },
        )

    def _resolve_moment(self, timestamp: TimestampInput) -> datetime:
        if timestamp is None:
            return self._clock()
        try:
            if isinstance(timestamp, datetime):
                return self._as_utc(timestamp)
            return self._parse_timestamp(timestamp)
        except (ValueError, OverflowError):
            logger.warning(
                "Invalid timestamp, using current time",
                extra={"reason": "invalid timestamp", "invalid_value": str(timestamp)},
            )
            return self._clock()

    @staticmethod
    def _parse_degrees(value: CoordinateInput) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            parsed = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            return None
        return parsed if math.isfinite(parsed) else None

    @staticmethod
    def _as_utc(moment: datetime) -> datetime:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(timezone.utc)

    @classmethod
    def _parse_timestamp(cls, value: str) -> datetime:
        candidate = value.strip()
        if not candidate:
            raise ValueError("Timestamp is empty.")

        if candidate.endswith(("Z", "z")):
            candidate = candidate[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(candidate)
        except ValueError as exc:
            raise ValueError("Invalid timestamp format") from exc

        return cls._as_utc(parsed)


@lru_cache
def build_default_predictor() -> PredictionService:
    """Factory that wires the engine from environment settings."""
    config = EngineConfig.from_settings(get_settings())
    return PredictionService(config=config)
