"""Strike outcome evaluation (hit/miss) for single strikes and salvos."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from strike.core.hit_detection import detect_missile_hit
from strike.core.models import Point
from strike.infra.config import get_strike_config
from strike.infra.logging import get_logger

logger = get_logger(__name__)


class StrikeResult(StrEnum):
    """Result of a single strike."""

    HIT = "HIT"
    MISS = "MISS"


@dataclass(frozen=True, slots=True)
class SalvoReport:
    """Ordered strike results of one salvo."""

    results: tuple[StrikeResult, ...]

    @property
    def hits(self) -> int:
        return sum(1 for result in self.results if result is StrikeResult.HIT)

    @property
    def misses(self) -> int:
        return len(self.results) - self.hits


def resolve_strike(strike_point: Point, target_radius: float | None = None) -> StrikeResult:
    """Resolve a strike; the radius defaults to the configured target radius."""
    radius = _resolve_radius(target_radius)
    return StrikeResult.HIT if detect_missile_hit(strike_point, radius) else StrikeResult.MISS


def resolve_salvo(points: Iterable[Point], target_radius: float | None = None) -> SalvoReport:
    """Resolve every strike of a salvo against the same target."""
    radius = _resolve_radius(target_radius)
    report = SalvoReport(results=tuple(resolve_strike(point, radius) for point in points))
    logger.info("salvo_resolved strikes=%d hits=%d", len(report.results), report.hits)
    return report


def _resolve_radius(target_radius: float | None) -> float:
    if target_radius is None:
        return get_strike_config().target_radius
    return target_radius
