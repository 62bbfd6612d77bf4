"""Derive reproducible seeds from coordinates."""

from __future__ import annotations

import math

_RESOLUTION = 10_000
_LAT_PRIME = 73856093
_LON_PRIME = 19349663
_MASK = 0xFFFFFFFF


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _discretize(offset: float) -> int:
    # products such as 112.418 * 10_000 can land a hair below the integer
    return math.floor(round(offset * _RESOLUTION, 6))


def seed_for(lat: float, lon: float) -> int:
    """Return an unsigned 32-bit seed for ``(lat, lon)``.

    Coordinates are discretized to 1e-4 degrees, so inputs that differ only
    by floating-point noise map to the same seed.
    """
    a = _discretize(clamp(lat, -90.0, 90.0) + 90.0)
    b = _discretize(clamp(lon, -180.0, 180.0) + 180.0)
    return ((a * _LAT_PRIME) ^ (b * _LON_PRIME)) & _MASK
