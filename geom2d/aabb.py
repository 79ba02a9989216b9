from __future__ import annotations

from collections.abc import Iterable

from geom2d.collision import Intersects
from geom2d.errors import (
    ValidationError,
    Violation
)
from geom2d.vector import Vector


class Aabb:
    """
    Axis-aligned bounding box.

    `min` is the corner with the smallest coordinates on both axes. A box
    may be flat or even a single point: `min == max` is valid.
    """

    __slots__ = ("_min", "_max")
    __match_args__ = ("min", "max")

    def __init__(self, min: Vector, max: Vector, /) -> None:
        if not (min.is_finite() and max.is_finite()):
            raise ValidationError(
                Violation.non_finite, f"Aabb corners must be finite, got {min!r} and {max!r}"
            )
        if min.x > max.x or min.y > max.y:
            raise ValidationError(
                Violation.inverted_bounds, f"Aabb minimum {min} is not below maximum {max}"
            )
        self._min = min
        self._max = max

    @classmethod
    def from_corners(cls, p1: Vector, p2: Vector, /) -> Aabb:
        """Box spanned by any two opposite corners"""
        return cls(
            Vector(min(p1.x, p2.x), min(p1.y, p2.y)),
            Vector(max(p1.x, p2.x), max(p1.y, p2.y)),
        )

    @classmethod
    def from_points(cls, points: Iterable[Vector], /) -> Aabb:
        points = list(points)
        if not points:
            raise ValidationError(
                Violation.too_few_vertices, "Cannot bound an empty set of points"
            )
        return cls(
            Vector(min(p.x for p in points), min(p.y for p in points)),
            Vector(max(p.x for p in points), max(p.y for p in points)),
        )

    @property
    def min(self) -> Vector:
        return self._min

    @property
    def max(self) -> Vector:
        return self._max

    def corners(self) -> tuple[Vector, Vector, Vector, Vector]:
        """Counter-clockwise, starting at `min`"""
        return (
            self._min,
            Vector(self._max.x, self._min.y),
            self._max,
            Vector(self._min.x, self._max.y),
        )

    def center(self) -> Vector:
        return (self._min + self._max) * 0.5

    def size(self) -> Vector:
        return Vector(self.width(), self.height())

    def width(self) -> float:
        return self._max.x - self._min.x

    def height(self) -> float:
        return self._max.y - self._min.y

    def translate(self, vec: Vector) -> Aabb:
        return Aabb(self._min + vec, self._max + vec)

    def contains_point(self, vec: Vector) -> bool:
        return self._min.x <= vec.x <= self._max.x and self._min.y <= vec.y <= self._max.y

    def intersects(self, other: Intersects, /) -> bool:
        match other:
            case Aabb():
                return (
                    self._min.x <= other._max.x
                    and self._max.x >= other._min.x
                    and self._min.y <= other._max.y
                    and self._max.y >= other._min.y
                )
            case Intersects():
                return other.intersects(self)
        raise TypeError(f"Cannot test {type(self).__name__} against {type(other).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aabb):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"Aabb({self._min!r}, {self._max!r})"

    def __str__(self) -> str:
        return f"Aabb({self._min}, {self._max})"
