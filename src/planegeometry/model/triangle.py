"""
Triangle given by its three vertices, with its classical centers and circles.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from planegeometry.errors import DegenerateShapeError
from planegeometry.model.ellipse import Circle
from planegeometry.model.geometry_utils import polygon_to_polyline
from planegeometry.model.shape import PointMap, Shape, ShapeKind
from planegeometry.model.vector import Vector2

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Triangle(Shape):
    """
    Attributes:
        a: First vertex.
        b: Second vertex.
        c: Third vertex.

    The vertices are expected to be non-collinear. Quantities that divide
    by the (doubled) area raise `DegenerateShapeError` otherwise.
    """
    a: Vector2
    b: Vector2
    c: Vector2

    kind = ShapeKind.TRIANGLE

    def vertices(self) -> List[Vector2]:
        """Vertices in construction order."""
        return [self.a, self.b, self.c]

    def points(self) -> tuple[Vector2, ...]:
        return self.a, self.b, self.c

    def sides(self) -> tuple[float, float, float]:
        """Side lengths opposite to A, B and C: (|BC|, |CA|, |AB|)."""
        return (
            Vector2.distance(self.b, self.c),
            Vector2.distance(self.c, self.a),
            Vector2.distance(self.a, self.b),
        )

    def center(self) -> Vector2:
        """Centroid."""
        return Vector2(
            (self.a.x + self.b.x + self.c.x) / 3,
            (self.a.y + self.b.y + self.c.y) / 3
        )

    def perimeter(self) -> float:
        return sum(self.sides())

    def area(self) -> float:
        return abs((self.b - self.a).cross(self.c - self.a)) / 2.0

    def _require_area(self, quantity: str) -> float:
        area = self.area()
        if area == 0.0:
            logger.debug(f"{quantity} requested for degenerate triangle {self!r}")
            raise DegenerateShapeError(f"{quantity} is undefined for a triangle with collinear vertices")
        return area

    def _circumcenter(self) -> Vector2:
        A, B, C = self.a, self.b, self.c
        x_ab, y_ab = A.x - B.x, A.y - B.y
        x_bc, y_bc = B.x - C.x, B.y - C.y
        x_ca, y_ca = C.x - A.x, C.y - A.y

        # Signed doubled area
        z = x_ab * y_ca - y_ab * x_ca
        if z == 0.0:
            raise DegenerateShapeError("Circumcenter is undefined for a triangle with collinear vertices")

        z1 = A.x * A.x + A.y * A.y
        z2 = B.x * B.x + B.y * B.y
        z3 = C.x * C.x + C.y * C.y
        zx = y_ab * z3 + y_bc * z1 + y_ca * z2
        zy = x_ab * z3 + x_bc * z1 + x_ca * z2
        return Vector2(-zx / 2 / z, zy / 2 / z)

    def _circumradius(self) -> float:
        area = self._require_area("Circumradius")
        ab, bc, ca = (
            Vector2.distance(self.a, self.b),
            Vector2.distance(self.b, self.c),
            Vector2.distance(self.c, self.a),
        )
        return ab * bc * ca / 4 / area

    def circumscribed_circle(self) -> Circle:
        return Circle(self._circumcenter(), self._circumradius())

    def inscribed_circle(self) -> Circle:
        """
        Incircle: center is the side-weighted mean of the vertices,
        radius sqrt((p - a)(p - b)(p - c) / p) with p the semiperimeter.
        """
        self._require_area("Incircle")
        side_a, side_b, side_c = self.sides()
        total = side_a + side_b + side_c
        p = total / 2

        # Clamp rounding noise below zero for very flat triangles
        radius = math.sqrt(max(0.0, (p - side_a) * (p - side_b) * (p - side_c) / p))
        x = (side_a * self.a.x + side_b * self.b.x + side_c * self.c.x) / total
        y = (side_a * self.a.y + side_b * self.b.y + side_c * self.c.y) / total
        return Circle(Vector2(x, y), radius)

    def orthocenter(self) -> Vector2:
        """
        Intersection of the altitudes from A and B, solved with Cramer's rule:
        (P - A) . (C - B) = 0 and (P - B) . (C - A) = 0.
        """
        cb = self.c - self.b
        ca = self.c - self.a
        val_cb = Vector2.dot_product(cb, self.a)
        val_ca = Vector2.dot_product(ca, self.b)

        det = cb.x * ca.y - ca.x * cb.y
        if det == 0.0:
            raise DegenerateShapeError("Orthocenter is undefined for a triangle with collinear vertices")
        det_x = val_cb * ca.y - val_ca * cb.y
        det_y = cb.x * val_ca - ca.x * val_cb
        return Vector2(det_x / det, det_y / det)

    def nine_points_circle(self) -> Circle:
        center = Vector2.midpoint(self.orthocenter(), self._circumcenter())
        return Circle(center, self._circumradius() / 2)

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        return polygon_to_polyline(self.vertices())

    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Triangle:
        return Triangle(point_map(self.a), point_map(self.b), point_map(self.c))
