from __future__ import annotations

import pytest

from models.records import Coordinate
from services.config import ConfigurationError
from services.predictor import build_default_predictor
from settings import get_settings


@pytest.fixture(autouse=True)
def _clear_caches():
    get_settings.cache_clear()
    build_default_predictor.cache_clear()
    yield
    get_settings.cache_clear()
    build_default_predictor.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("FUSION_FALLBACK_LAT", "22.3")
    monkeypatch.setenv("FUSION_FALLBACK_LON", "114.17")
    monkeypatch.setenv("FUSION_SENSOR_COUNT", "3")
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    settings = get_settings()
    predictor = build_default_predictor()

    assert settings.log_level == "DEBUG"
    assert predictor.config.fallback == Coordinate(lat=22.3, lon=114.17)
    result = predictor.predict(None, None, "2024-06-01T09:15:00Z")
    assert result.center == Coordinate(lat=22.3, lon=114.17)
    assert len(result.sensors) == 3


@pytest.mark.parametrize("raw", ["", "  ", "five", "nan"])
def test_unparseable_values_use_defaults(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("FUSION_FALLBACK_LAT", raw)
    monkeypatch.setenv("FUSION_SENSOR_COUNT", raw)

    settings = get_settings()

    assert settings.fallback_lat == 22.4180
    assert settings.sensor_count == 5


def test_zero_sensor_count_fails_fast_at_startup(monkeypatch) -> None:
    monkeypatch.setenv("FUSION_SENSOR_COUNT", "0")

    with pytest.raises(ConfigurationError):
        build_default_predictor()
