"""Missile hit detection against the quadrant-shaped target."""

from __future__ import annotations

import numpy as np

from strike.core.models import Point, Quadrant
from strike.infra.logging import get_logger

logger = get_logger(__name__)


def detect_missile_hit(strike_point: Point, target_radius: float) -> bool:
    """Return whether a strike point hits the target.

    The target sits on the Cartesian plane with a different shape in each
    quadrant:

    - first quadrant: rectangle of width ``r`` along the x axis and height
      ``r/2`` along the y axis;
    - second quadrant: circular sector of radius ``r``;
    - third quadrant: right triangle with legs ``r`` on the x axis and ``r/2``
      on the y axis;
    - fourth quadrant: nothing;
    - on an axis: rectangle ``-r <= x <= r``, ``-r/2 <= y <= r``.

    All boundaries are inclusive. Negative or NaN radii are not rejected;
    they follow IEEE-754 comparison rules.
    """
    radius = np.float32(target_radius)
    quadrant = strike_point.quadrant
    with np.errstate(over="ignore", invalid="ignore"):
        hit = _contains(strike_point, quadrant, radius)
    logger.debug("strike_detected quadrant=%d hit=%s", int(quadrant), hit)
    return hit


def _contains(strike_point: Point, quadrant: Quadrant, radius: np.float32) -> bool:
    x = strike_point.x
    y = strike_point.y
    half = radius / np.float32(2)

    if quadrant is Quadrant.FIRST:
        return bool(x <= radius and y <= half)

    if quadrant is Quadrant.SECOND:
        return bool(strike_point.distance <= radius)

    if quadrant is Quadrant.THIRD:
        return bool(y >= x / np.float32(-2) - half)

    if quadrant is Quadrant.FOURTH:
        return False

    return bool(-radius <= x <= radius and -half <= y <= radius)
