"""Missile strike hit detection against a quadrant-shaped target."""

from strike.core.hit_detection import detect_missile_hit
from strike.core.models import DISTANCE_ORDER, Point, Quadrant, compare_points
from strike.core.shot_resolution import SalvoReport, StrikeResult, resolve_salvo, resolve_strike
from strike.infra.config import StrikeConfig, get_strike_config
from strike.infra.logging import setup_logging

__version__ = "0.2.0"

__all__ = [
    "DISTANCE_ORDER",
    "Point",
    "Quadrant",
    "SalvoReport",
    "StrikeConfig",
    "StrikeResult",
    "compare_points",
    "detect_missile_hit",
    "get_strike_config",
    "resolve_salvo",
    "resolve_strike",
    "setup_logging",
]
