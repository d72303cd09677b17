"""
Rectangle given by two points on its symmetry axis and one side length.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from planegeometry.model.ellipse import Circle
from planegeometry.model.geometry_utils import polygon_to_polyline
from planegeometry.model.shape import PointMap, Shape, ShapeKind
from planegeometry.model.vector import Vector2

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Attributes:
        point_a: Midpoint of one side.
        point_b: Midpoint of the opposite side.
        side1: Length of the sides perpendicular to the A -> B axis.

    The second side is not stored: it is derived from `side1` and |AB|.
    """
    point_a: Vector2
    point_b: Vector2
    side1: float

    kind = ShapeKind.RECTANGLE

    def points(self) -> tuple[Vector2, ...]:
        return self.point_a, self.point_b

    def center(self) -> Vector2:
        return Vector2.midpoint(self.point_a, self.point_b)

    def first_side(self) -> float:
        return self.side1

    def second_side(self) -> float:
        distance = Vector2.distance(self.point_a, self.point_b)
        return math.sqrt(self.side1 * self.side1 + distance * distance)

    def diagonal(self) -> float:
        side1 = self.first_side()
        side2 = self.second_side()
        return math.sqrt(side1 * side1 + side2 * side2)

    def axis_direction(self) -> Vector2:
        """Unit vector from point A to point B; the x axis when they coincide."""
        axis = self.point_b - self.point_a
        if axis == Vector2.ZERO:
            return Vector2(1.0, 0.0)
        return axis.normalize()

    def vertices(self) -> List[Vector2]:
        """
        The four corners, sorted counter-clockwise by their angle seen from point A.

        Corners sit at half the second side along the A -> B axis and half the
        first side along its perpendicular. Angles are compared in [-pi, pi]
        (atan2) and ties keep construction order.
        """
        center = self.center()
        u = self.axis_direction() * (self.second_side() / 2)
        n = self.axis_direction().perpendicular() * (self.first_side() / 2)

        corners = [
            center - u - n,
            center - u + n,
            center + u + n,
            center + u - n,
        ]

        def angle_from_a(p: Vector2) -> float:
            return math.atan2(p.y - self.point_a.y, p.x - self.point_a.x)

        return sorted(corners, key=angle_from_a)

    def perimeter(self) -> float:
        return 2 * (self.first_side() + self.second_side())

    def area(self) -> float:
        return self.first_side() * self.second_side()

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        # Sides are straight, sampling resolution does not apply
        return polygon_to_polyline(self.vertices())

    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Rectangle:
        return Rectangle(
            point_a=point_map(self.point_a),
            point_b=point_map(self.point_b),
            side1=self.side1 * magnitude
        )


@dataclass(frozen=True, init=False, repr=False)
class Square(Rectangle):
    """
    Rectangle whose side equals the distance between its two axis points.

    Both sides are re-derived from |AB| on construction, so every transform
    (which rebuilds the square from its mapped points) keeps them equal.
    The constructor takes no side, so `dataclasses.replace()` raises
    TypeError here; build a new Square from two points instead.
    """

    kind = ShapeKind.SQUARE

    def __init__(self, point_a: Vector2, point_b: Vector2) -> None:
        super().__init__(
            point_a=point_a,
            point_b=point_b,
            side1=Vector2.distance(point_a, point_b)
        )

    def __repr__(self) -> str:
        return f"Square(point_a={self.point_a!r}, point_b={self.point_b!r})"

    def side(self) -> float:
        return self.side1

    def second_side(self) -> float:
        return self.side1

    def circumscribed_circle(self) -> Circle:
        return Circle(self.center(), self.diagonal() / 2)

    def inscribed_circle(self) -> Circle:
        return Circle(self.center(), self.side() / 2)

    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Square:
        # side follows from the mapped points; magnitude is implied by them
        return Square(point_map(self.point_a), point_map(self.point_b))
