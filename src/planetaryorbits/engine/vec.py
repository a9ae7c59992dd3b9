import math
from dataclasses import dataclass
from typing import Optional, Tuple


class DegenerateScalarError(ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0

    # ---------------------------
    # arithmetic (always returns a new vector)
    # ---------------------------

    def add(self, other: "Vector2D") -> "Vector2D":
        """Elementwise self + other."""
        return Vector2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2D") -> "Vector2D":
        """Elementwise self - other (vector from other to self)."""
        return Vector2D(self.x - other.x, self.y - other.y)

    def multiply(self, scalar: float) -> "Vector2D":
        """Scale by scalar."""
        return Vector2D(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> "Vector2D":
        """Divide by scalar.

        Raises:
            DegenerateScalarError: if scalar is zero. Callers decide how to
                handle a degenerate scalar instead of receiving inf/nan.
        """
        if scalar == 0:
            raise DegenerateScalarError(f"cannot divide {self} by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    # ---------------------------
    # properties
    # ---------------------------

    def magnitude(self) -> float:
        """Euclidean norm |v|."""
        return math.hypot(self.x, self.y)

    def magnitude_sqr(self) -> float:
        """Squared norm |v|², no square root."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> Optional["Vector2D"]:
        """
        Unit vector in the direction of self.
        Returns None if |v| is exactly zero.
        """
        n = self.magnitude()
        if n == 0:
            return None
        return Vector2D(self.x / n, self.y / n)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ZERO = Vector2D(0.0, 0.0)
