from __future__ import annotations

import pytest

from services.seeding import seed_for


def test_seed_ignores_floating_point_noise() -> None:
    assert seed_for(22.4180, 114.2106) == seed_for(22.41800001, 114.21060001)


def test_distinct_locations_get_distinct_seeds() -> None:
    assert seed_for(22.4180, 114.2106) != seed_for(22.5000, 114.3000)


@pytest.mark.parametrize(
    ("lat", "lon"),
    [(90.0, 180.0), (-90.0, -180.0), (0.0, 0.0), (22.4180, 114.2106), (-33.8688, 151.2093)],
)
def test_seed_fits_unsigned_32_bits(lat: float, lon: float) -> None:
    seed = seed_for(lat, lon)

    assert isinstance(seed, int)
    assert 0 <= seed < 2**32


def test_out_of_range_coordinates_are_clamped_before_seeding() -> None:
    assert seed_for(95.0, 200.0) == seed_for(90.0, 180.0)
    assert seed_for(-120.0, -500.0) == seed_for(-90.0, -180.0)


def test_seed_matches_reference_value() -> None:
    assert seed_for(22.418, 114.2106) == 2572231202
    # the same bit pattern as the signed 32-bit value -1722736094
    assert seed_for(22.418, 114.2106) == -1722736094 & 0xFFFFFFFF
