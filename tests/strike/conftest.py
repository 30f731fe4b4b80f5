from __future__ import annotations

import logging

import pytest

from strike.core.models import Point
from strike.infra.config import StrikeConfig, set_strike_config


@pytest.fixture(autouse=True)
def default_strike_config() -> StrikeConfig:
    return set_strike_config(StrikeConfig())


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield root
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


@pytest.fixture
def quadrant_points() -> dict[int, Point]:
    return {
        0: Point(0, 5),
        1: Point(5, 2),
        2: Point(-3, 4),
        3: Point(-4, -1),
        4: Point(3, -1),
    }
