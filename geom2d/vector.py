from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from geom2d.angle import Angle
from geom2d.errors import (
    ValidationError,
    Violation
)


@dataclass(frozen=True, slots=True)
class Vector:
    """
    A point or displacement in the plane.

    Vectors are free values: arithmetic may produce NaN or infinite
    components. Shapes check `is_finite()` before accepting a vertex.
    """

    x: float
    y: float

    ZERO: ClassVar[Vector]

    @staticmethod
    def from_angle(angle: Angle) -> Vector:
        """Unit vector pointing at `angle`, measured counter-clockwise from +x"""
        return Vector(math.cos(angle.radians), math.sin(angle.radians))

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: float) -> Vector:
        return Vector(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Vector:
        return Vector(self.x / other, self.y / other)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def negative(self) -> Vector:
        return -self

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def dot_product(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross_product(self, other: Vector) -> float:
        """
        Signed area of the parallelogram spanned by both vectors.

        Positive when `other` lies counter-clockwise of `self`.
        """
        return self.x * other.y - self.y * other.x

    def normal(self) -> Vector:
        """Counter-clockwise perpendicular of the same length"""
        return Vector(-self.y, self.x)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Vector:
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise ValidationError(
                Violation.zero_magnitude, "The zero vector has no direction"
            )
        return self / magnitude

    def project_onto(self, other: Vector) -> Vector:
        if self == Vector.ZERO or other == Vector.ZERO:
            return Vector.ZERO
        return other * (self.dot_product(other) / other.magnitude_squared())

    def rotate(self, angle: Angle) -> Vector:
        """Rotate counter-clockwise around the origin"""
        cos = math.cos(angle.radians)
        sin = math.sin(angle.radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_clockwise(self, angle: Angle) -> Vector:
        cos = math.cos(angle.radians)
        sin = math.sin(angle.radians)
        return Vector(self.x * cos + self.y * sin, -self.x * sin + self.y * cos)

    def __str__(self) -> str:
        return f"<{self.x:.2f}; {self.y:.2f}>"


Vector.ZERO = Vector(0.0, 0.0)
