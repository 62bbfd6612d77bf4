"""Short-horizon projection of the fused temperature."""

from __future__ import annotations

HORIZON_MINUTES = 30
BASE_DRIFT = 0.15
TRAFFIC_DRIFT = 0.25
PERSISTENCE = 0.92
SMOOTHING = 0.08


class ForecastProjector:
    """Smoothing-style extrapolation with a congestion-driven warming bias."""

    horizon_minutes = HORIZON_MINUTES

    def project(self, fused_now: float, traffic_index: float) -> float:
        drift = BASE_DRIFT + traffic_index * TRAFFIC_DRIFT
        projected = fused_now * PERSISTENCE + (fused_now + drift) * SMOOTHING
        return round(projected, 2)
