"""
Immutable 2D vector / point value.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2:
    """
    A point or displacement in the plane.

    All operations return new instances; a Vector2 is never modified.
    """
    x: float
    y: float

    ZERO: ClassVar[Vector2]

    @classmethod
    def from_iterable(cls, xy: Iterable[float]) -> Vector2:
        """Build a vector from any (x, y) pair, e.g. a tuple or a numpy row."""
        x, y = xy
        return cls(float(x), float(y))

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> Vector2:
        if scalar == 0.0: raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector2(self.x / scalar, self.y / scalar)

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise about the origin by `angle` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a
        )

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector2:
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.multiply(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return self.divide(scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @staticmethod
    def dot_product(a: Vector2, b: Vector2) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        """Euclidean distance between two points."""
        dx = a.x - b.x
        dy = a.y - b.y
        return math.sqrt(dx * dx + dy * dy)

    @staticmethod
    def midpoint(a: Vector2, b: Vector2) -> Vector2:
        return a.add(b).divide(2.0)

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def normalize(self) -> Vector2:
        """Unit vector with the same direction. Raises ZeroDivisionError for the zero vector."""
        return self.divide(self.magnitude())

    def cross(self, other: Vector2) -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> Vector2:
        """Counter-clockwise quarter turn."""
        return Vector2(-self.y, self.x)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


Vector2.ZERO = Vector2(0.0, 0.0)
