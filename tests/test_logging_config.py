from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("services.predictor", logging.INFO, __file__, 1, "Prediction computed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extras_in_order() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    line = formatter.format(_record(seed=42, lat=22.418, fused_temperature=25.43, unrelated="x"))

    assert line == "Prediction computed | lat=22.418 seed=42 fused_temperature=25.43"


def test_formatter_skips_missing_and_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["reason"])

    assert formatter.format(_record(reason=None)) == "Prediction computed"
