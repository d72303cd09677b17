"""
Ellipse described by its two foci and the perifocal distance.

A circle is the same representation with coincident foci; every formula
below reduces to the circular case on its own (focal distance 0, both
semi-axes equal to the radius) without checking for it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from planegeometry.model.geometry_utils import ellipse_to_polyline
from planegeometry.model.shape import PointMap, Shape, ShapeKind
from planegeometry.model.vector import Vector2

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


@dataclass(frozen=True)
class Ellipse(Shape):
    """
    Attributes:
        focus1: First focus.
        focus2: Second focus.
        perifocal_distance: Distance from a focus to the nearest vertex on the major axis.
    """
    focus1: Vector2
    focus2: Vector2
    perifocal_distance: float

    kind = ShapeKind.ELLIPSE

    def focuses(self) -> tuple[Vector2, Vector2]:
        return self.focus1, self.focus2

    def points(self) -> tuple[Vector2, ...]:
        return self.focus1, self.focus2

    def center(self) -> Vector2:
        return Vector2.midpoint(self.focus1, self.focus2)

    def focal_distance(self) -> float:
        """Distance from either focus to the center."""
        return Vector2.distance(self.focus1, self.center())

    def major_semi_axis(self) -> float:
        return self.focal_distance() + self.perifocal_distance

    def minor_semi_axis(self) -> float:
        c = self.focal_distance()
        a = self.major_semi_axis()
        return math.sqrt(a**2 - c**2)

    def eccentricity(self) -> float:
        return self.focal_distance() / self.major_semi_axis()

    def major_axis_direction(self) -> Vector2:
        """Unit vector from focus1 to focus2; the x axis when the foci coincide."""
        axis = self.focus2 - self.focus1
        if axis == Vector2.ZERO:
            return Vector2(1.0, 0.0)
        return axis.normalize()

    def perimeter(self) -> float:
        """Ramanujan's approximation."""
        a = self.major_semi_axis()
        b = self.minor_semi_axis()
        return 4 * (math.pi * a * b + (a - b)**2) / (a + b)

    def area(self) -> float:
        return math.pi * self.major_semi_axis() * self.minor_semi_axis()

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        return ellipse_to_polyline(
            center=self.center(),
            a=self.major_semi_axis(),
            b=self.minor_semi_axis(),
            direction=self.major_axis_direction(),
            n_segments=n_segments
        )

    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Ellipse:
        return Ellipse(
            focus1=point_map(self.focus1),
            focus2=point_map(self.focus2),
            perifocal_distance=self.perifocal_distance * magnitude
        )


@dataclass(frozen=True, init=False, repr=False)
class Circle(Ellipse):
    """
    Ellipse whose foci both sit at the center; the perifocal distance is the radius.

    The constructor takes (center, radius), so `dataclasses.replace()` raises
    TypeError here; use the transforms or build a new Circle instead.
    """

    kind = ShapeKind.CIRCLE

    def __init__(self, center: Vector2, radius: float) -> None:
        super().__init__(focus1=center, focus2=center, perifocal_distance=radius)

    def __repr__(self) -> str:
        return f"Circle(center={self.focus1!r}, radius={self.perifocal_distance!r})"

    def radius(self) -> float:
        return self.perifocal_distance

    def points(self) -> tuple[Vector2, ...]:
        return (self.focus1,)

    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Circle:
        return Circle(point_map(self.focus1), self.perifocal_distance * magnitude)
