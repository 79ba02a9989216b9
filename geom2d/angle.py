from __future__ import annotations

import math
from typing import ClassVar

from geom2d.errors import (
    ValidationError,
    Violation
)


class Angle:
    """
    A finite rotation, stored in radians and normalized into [0; 2π).

    Normalizing keeps equal rotations equal: `Angle(-π/2) == Angle(3π/2)`.
    """

    __slots__ = ("_radians",)
    __match_args__ = ("radians",)

    ZERO: ClassVar[Angle]
    QUARTER_TURN: ClassVar[Angle]
    HALF_TURN: ClassVar[Angle]

    def __init__(self, radians: float, /) -> None:
        if not math.isfinite(radians):
            raise ValidationError(
                Violation.non_finite, f"Angle must be finite, got {radians!r}"
            )
        value = radians % math.tau
        # -1e-20 % tau rounds up to tau itself
        if value == math.tau:
            value = 0.0
        self._radians = value

    @classmethod
    def from_radians(cls, value: float) -> Angle:
        return cls(value)

    @classmethod
    def from_degrees(cls, value: float) -> Angle:
        if not math.isfinite(value):
            raise ValidationError(
                Violation.non_finite, f"Angle must be finite, got {value!r} degrees"
            )
        return cls(math.radians(value))

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def degrees(self) -> float:
        return math.degrees(self._radians)

    def __neg__(self) -> Angle:
        return Angle(-self._radians)

    def __add__(self, other: Angle) -> Angle:
        return Angle(self._radians + other._radians)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self._radians - other._radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self) -> int:
        return hash(self._radians)

    def __repr__(self) -> str:
        return f"Angle({self._radians!r})"

    def __str__(self) -> str:
        return f"{self.degrees:.2f}°"


Angle.ZERO = Angle(0.0)
Angle.QUARTER_TURN = Angle(math.pi / 2)
Angle.HALF_TURN = Angle(math.pi)
