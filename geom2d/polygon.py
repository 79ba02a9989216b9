from __future__ import annotations

import math
from collections.abc import (
    Iterable,
    Iterator
)

from geom2d.aabb import Aabb
from geom2d.angle import Angle
from geom2d.collision import (
    AXIS_X,
    AXIS_Y,
    Intersects,
    polygons_intersect
)
from geom2d.errors import (
    ValidationError,
    Violation
)
from geom2d.hull import convex_hull
from geom2d.vector import Vector


EPSILON = 1e-6


class Polygon:
    """
    A closed loop of at least three vertices, in winding order.

    The loop is assumed to be convex. This is not checked on construction
    (see `is_convex`); intersection results for concave loops are
    meaningless.
    """

    __slots__ = ("_vertices",)
    __match_args__ = ("vertices",)

    def __init__(self, vertices: Iterable[Vector], /) -> None:
        vertices = tuple(vertices)
        if len(vertices) < 3:
            raise ValidationError(
                Violation.too_few_vertices,
                f"Polygon needs at least 3 vertices, got {len(vertices)}",
            )
        for vertex in vertices:
            if not vertex.is_finite():
                raise ValidationError(
                    Violation.non_finite, f"Polygon vertex {vertex!r} is not finite"
                )
        # every edge needs a finite, non-zero normal to test against
        for i, vertex in enumerate(vertices):
            following = vertices[(i + 1) % len(vertices)]
            if vertex == following:
                raise ValidationError(
                    Violation.degenerate_edge,
                    f"Polygon vertices {i} and {(i + 1) % len(vertices)} coincide at {vertex}",
                )
            if not (following - vertex).is_finite():
                raise ValidationError(
                    Violation.non_finite,
                    f"Polygon edge from {vertex!r} to {following!r} is too long to represent",
                )
        self._vertices = vertices

    @classmethod
    def from_aabb(cls, aabb: Aabb, /) -> Polygon:
        return cls(aabb.corners())

    @classmethod
    def convex_hull(cls, points: Iterable[Vector], /) -> Polygon:
        """Smallest convex polygon around `points`, counter-clockwise"""
        return cls(convex_hull(points))

    @property
    def vertices(self) -> tuple[Vector, ...]:
        return self._vertices

    def edges(self) -> Iterator[tuple[Vector, Vector]]:
        count = len(self._vertices)
        for i in range(count):
            yield self._vertices[i], self._vertices[(i + 1) % count]

    def aabb(self) -> Aabb:
        return Aabb.from_points(self._vertices)

    def is_convex(self) -> bool:
        """
        Whether every turn along the loop goes the same way and the loop
        winds around exactly once, which rules out star shapes.
        """
        sign = 0.0
        winding = 0.0
        for (a, b), (_, c) in zip(self.edges(), self._shifted_edges()):
            incoming = (b - a).unit()
            outgoing = (c - b).unit()
            turn = incoming.cross_product(outgoing)
            winding += math.atan2(turn, incoming.dot_product(outgoing))
            if turn == 0.0:
                continue
            if sign == 0.0:
                sign = turn
            elif (turn > 0.0) != (sign > 0.0):
                return False
        return math.isclose(abs(winding), math.tau)

    def _shifted_edges(self) -> Iterator[tuple[Vector, Vector]]:
        edges = self.edges()
        first = next(edges)
        yield from edges
        yield first

    def translate(self, translation: Vector) -> Polygon:
        return Polygon(vertex + translation for vertex in self._vertices)

    def rotate_around_point(self, angle: Angle, point: Vector) -> Polygon:
        """Rotate counter-clockwise around `point`"""
        return Polygon((vertex - point).rotate(angle) + point for vertex in self._vertices)

    def contains_point(self, point: Vector, *, tolerance: float = EPSILON) -> bool:
        """
        Whether `point` lies inside the polygon or on its border.

        A point is inside a convex polygon when it lies on the same side of
        every edge. Points whose distance to an edge's line is at most
        `tolerance` count as lying on it.
        """
        side = 0.0
        for a, b in self.edges():
            # signed distance from the edge's line
            cross = (b - a).unit().cross_product(point - a)
            if abs(cross) <= tolerance:
                continue
            if side == 0.0:
                side = cross
            elif (cross > 0.0) != (side > 0.0):
                return False
        return True

    def intersects(self, other: Intersects, /) -> bool:
        match other:
            case Polygon():
                return polygons_intersect(self._vertices, other._vertices)
            case Aabb():
                return polygons_intersect(
                    self._vertices, other.corners(), extra_axes=(AXIS_X, AXIS_Y)
                )
            case Intersects():
                return other.intersects(self)
        raise TypeError(f"Cannot test {type(self).__name__} against {type(other).__name__}")

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self) -> int:
        return hash(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon({list(self._vertices)!r})"

    def __str__(self) -> str:
        return "Polygon(" + ", ".join(str(v) for v in self._vertices) + ")"


class PolygonBuilder:
    """
    Collects vertices one by one:

        PolygonBuilder().vertex(0, 0).vertex(1, 0).vertex(0, 1).build()
    """

    def __init__(self) -> None:
        self._vertices: list[Vector] = []

    def vertex(self, x: float, y: float) -> PolygonBuilder:
        self._vertices.append(Vector(x, y))
        return self

    def build(self) -> Polygon:
        return Polygon(self._vertices)
