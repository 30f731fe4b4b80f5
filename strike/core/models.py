"""Core geometry models used by hit detection.

Point equality is based on coordinates, while the natural order of points is
ascending distance from the origin. The two are deliberately inconsistent::

    Point(1, 1).compare_to(Point(-1, -1))  # 0
    Point(1, 1) == Point(-1, -1)           # False

For that reason ``Point`` defines no ``<``/``>`` operators. Sort with
``DISTANCE_ORDER`` (or ``compare_points``) instead, and keep equality-keyed
containers (``set``, ``dict``) separate from distance ordering.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property, cmp_to_key

import numpy as np

GRID_SIZE = 1.0

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class Quadrant(IntEnum):
    """Quadrant of a point; AXIS when the point lies on a coordinate axis."""

    AXIS = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4


@dataclass(frozen=True, eq=False, repr=False)
class Point:
    """Immutable point on the Cartesian plane with float32 coordinates.

    ``quadrant`` and ``distance`` are computed on first access and cached on
    the instance. The cache write stores an identical value on every
    recomputation, so concurrent first reads cannot observe a partial value.
    """

    x: np.float32
    y: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    @cached_property
    def quadrant(self) -> Quadrant:
        """Quadrant of the point.

        >>> [Point(*xy).quadrant.value for xy in ((0, 0), (1, 0), (1, 1), (-1, 1), (-1, -1), (1, -1))]
        [0, 0, 1, 2, 3, 4]
        """
        if self.x > 0 and self.y > 0:
            return Quadrant.FIRST
        if self.x < 0 and self.y > 0:
            return Quadrant.SECOND
        if self.x < 0 and self.y < 0:
            return Quadrant.THIRD
        if self.x > 0 and self.y < 0:
            return Quadrant.FOURTH
        return Quadrant.AXIS

    @cached_property
    def distance(self) -> float:
        """Distance from the origin, computed in double precision."""
        x = float(self.x)
        y = float(self.y)
        return math.sqrt(x * x + y * y)

    def compare_to(self, other: Point) -> int:
        """Compare by distance from the origin; returns -1, 0 or 1."""
        if not isinstance(other, Point):
            raise TypeError(f"Cannot compare Point with {type(other).__name__}.")
        return compare_points(self, other)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return _same_float(self.x, other.x) and _same_float(self.y, other.y)

    def __hash__(self) -> int:
        """Grid-cell hash ``31*floor(x) + floor(y)``, wrapped to int32.

        CPython reserves -1, so ``hash()`` reports -2 where this method returns -1.
        """
        # Points in use usually have integer coordinates and sit close together.
        x_cell = _grid_cell(self.x / np.float32(GRID_SIZE))
        y_cell = _grid_cell(self.y / np.float32(GRID_SIZE))
        return _wrap_int32(31 * x_cell + y_cell)

    def __repr__(self) -> str:
        # numpy shortest round-trip formatting, e.g. 1e-05 rather than 1.0E-5.
        return f"{type(self).__name__}(\n    x={self.x!s},\n    y={self.y!s}\n)"


def compare_points(first: Point, second: Point) -> int:
    """Order two points by ascending distance; NaN distances sort last."""
    return _compare_distance(first.distance, second.distance)


DISTANCE_ORDER = cmp_to_key(compare_points)


def _compare_distance(left: float, right: float) -> int:
    left_nan = math.isnan(left)
    right_nan = math.isnan(right)
    if left_nan or right_nan:
        return int(left_nan) - int(right_nan)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _same_float(left: np.float32, right: np.float32) -> bool:
    """Representation equality: NaN equals NaN, 0.0 differs from -0.0."""
    if math.isnan(left) or math.isnan(right):
        return bool(math.isnan(left) and math.isnan(right))
    return bool(left == right) and math.copysign(1.0, left) == math.copysign(1.0, right)


def _grid_cell(value: np.float32) -> int:
    """Floor to an int32 grid cell; NaN maps to 0 and infinities clamp."""
    raw = float(value)
    if math.isnan(raw):
        return 0
    if raw >= _INT32_MAX:
        return _INT32_MAX
    if raw <= _INT32_MIN:
        return _INT32_MIN
    return math.floor(raw)


def _wrap_int32(value: int) -> int:
    return ((value - _INT32_MIN) % 2**32) + _INT32_MIN
