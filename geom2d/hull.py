from __future__ import annotations

import logging
from collections.abc import Iterable

from geom2d.errors import (
    ValidationError,
    Violation
)
from geom2d.vector import Vector


logger = logging.getLogger(__name__)


def convex_hull(points: Iterable[Vector]) -> list[Vector]:
    """
    Vertices of the convex hull of `points`, counter-clockwise, starting
    at the lowest of the leftmost points.

    Duplicates and points lying on a hull edge are dropped, so the result
    never contains a zero-length edge.
    """
    points = list(points)
    for point in points:
        if not point.is_finite():
            raise ValidationError(
                Violation.non_finite, f"Cannot wrap a non-finite point {point!r}"
            )

    ordered = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(ordered) < 3:
        return ordered

    lower = _half_hull(ordered)
    upper = _half_hull(reversed(ordered))
    hull = lower[:-1] + upper[:-1]

    logger.debug("Convex hull kept %d of %d points", len(hull), len(points))
    return hull


def _half_hull(points: Iterable[Vector]) -> list[Vector]:
    chain: list[Vector] = []
    for point in points:
        while len(chain) >= 2 and (chain[-1] - chain[-2]).cross_product(point - chain[-2]) <= 0:
            chain.pop()
        chain.append(point)
    return chain
