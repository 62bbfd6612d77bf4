from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache


_FALLBACK_LAT_ENV = "FUSION_FALLBACK_LAT"
_FALLBACK_LON_ENV = "FUSION_FALLBACK_LON"
_SENSOR_COUNT_ENV = "FUSION_SENSOR_COUNT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_FALLBACK_LAT = 22.4180
DEFAULT_FALLBACK_LON = 114.2106
DEFAULT_SENSOR_COUNT = 5


@dataclass(frozen=True)
class Settings:
    fallback_lat: float
    fallback_lon: float
    sensor_count: int
    log_level: str


def _read_float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def _read_sensor_count(default: int) -> int:
    value = os.getenv(_SENSOR_COUNT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        return int(candidate)
    except ValueError:
        return default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        fallback_lat=_read_float_env(_FALLBACK_LAT_ENV, DEFAULT_FALLBACK_LAT),
        fallback_lon=_read_float_env(_FALLBACK_LON_ENV, DEFAULT_FALLBACK_LON),
        sensor_count=_read_sensor_count(DEFAULT_SENSOR_COUNT),
        log_level=_read_log_level("INFO"),
    )
