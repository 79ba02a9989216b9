from __future__ import annotations

from collections.abc import (
    Iterable,
    Sequence
)
from typing import (
    Protocol,
    runtime_checkable
)

from geom2d.vector import Vector


@runtime_checkable
class Intersects(Protocol):
    """
    Anything that can tell whether it overlaps another shape.

    Implementations must be symmetric: `a.intersects(b) == b.intersects(a)`.
    Shapes that touch along an edge or at a corner intersect.

    `Aabb` and `Polygon` hand any shape kind they do not know back to that
    shape, so a new kind must test against both of them itself.
    """

    def intersects(self, other: Intersects, /) -> bool:
        ...


AXIS_X = Vector(1.0, 0.0)
AXIS_Y = Vector(0.0, 1.0)


def intervals_overlap(a_min: float, a_max: float, b_min: float, b_max: float) -> bool:
    return a_min <= b_max and b_min <= a_max


def project(vertices: Iterable[Vector], axis: Vector) -> tuple[float, float]:
    """
    Project every vertex onto `axis` and return the covered interval.

    With a unit `axis` a projection is never NaN: its two terms can only
    overflow when they share a sign.
    """
    projections = [vertex.dot_product(axis) for vertex in vertices]
    return min(projections), max(projections)


def edge_normals(vertices: Sequence[Vector]) -> Iterable[Vector]:
    """Raw normal of every edge, including the closing one"""
    count = len(vertices)
    for i in range(count):
        yield (vertices[(i + 1) % count] - vertices[i]).normal()


def unit_axes(normals: Iterable[Vector]) -> Iterable[Vector]:
    # a zero normal projects everything onto one point and never separates
    for normal in normals:
        if normal != Vector.ZERO:
            yield normal.unit()


def separating_axis_exists(
    axes: Iterable[Vector],
    first: Sequence[Vector],
    second: Sequence[Vector],
) -> bool:
    for axis in axes:
        if not intervals_overlap(*project(first, axis), *project(second, axis)):
            return True
    return False


def polygons_intersect(
    first: Sequence[Vector],
    second: Sequence[Vector],
    *,
    extra_axes: Iterable[Vector] = (),
) -> bool:
    """
    Separating axis test for two convex vertex loops.

    Edge normals are normalized before projecting, so loops spanning most
    of the float range do not overflow into NaN projections.
    """
    candidates = (
        unit_axes(edge_normals(first)),
        unit_axes(edge_normals(second)),
        unit_axes(extra_axes),
    )
    for axes in candidates:
        if separating_axis_exists(axes, first, second):
            return False
    return True
