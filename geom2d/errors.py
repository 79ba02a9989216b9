from enum import Enum


class Violation(Enum):
    non_finite = "non_finite"
    inverted_bounds = "inverted_bounds"
    too_few_vertices = "too_few_vertices"
    degenerate_edge = "degenerate_edge"
    zero_magnitude = "zero_magnitude"


class ValidationError(ValueError):
    """
    Raised when a value would break an invariant of a geometric type.

    Only constructors (and `Vector.unit`) raise this. Once an instance
    exists, every operation on it is total.
    """

    def __init__(self, violation: Violation, message: str) -> None:
        super().__init__(message)
        self.violation = violation

    def __repr__(self) -> str:
        return f"ValidationError({self.violation.value!r}, {str(self)!r})"
