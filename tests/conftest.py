from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pytest

from models.records import Coordinate, ReferenceReading


class StubReferenceProvider:
    """Returns a fixed reading and records every coordinate it was asked about."""

    def __init__(self, baseline: float = 25.0, traffic: float = 0.5) -> None:
        self.baseline = baseline
        self.traffic = traffic
        self.calls: List[Coordinate] = []

    def reading(self, coordinate: Coordinate, moment: datetime) -> ReferenceReading:
        self.calls.append(coordinate)
        return ReferenceReading(baseline_temperature=self.baseline, traffic_index=self.traffic)


@pytest.fixture()
def stub_provider() -> StubReferenceProvider:
    return StubReferenceProvider()


@pytest.fixture()
def fixed_moment() -> datetime:
    return datetime(2024, 6, 1, 9, 15, tzinfo=timezone.utc)
