from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Callable, ClassVar, Optional, TYPE_CHECKING

from planegeometry.model.validation import validate_coefficient
from planegeometry.model.vector import Vector2

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)

PointMap = Callable[[Vector2], Vector2]


class ShapeKind(StrEnum):
    """Registry keys of the concrete shape variants."""
    ELLIPSE = "ellipse"
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class Shape(ABC):
    """
    Abstract base class for planar shapes.

    Shapes are immutable values. The transforms below are implemented once
    for every kind: they map the stored points and hand the result to
    `_transformed`, where each kind rebuilds itself through its own
    constructor, so coincident foci of a circle or equal sides of a square
    are re-derived rather than carried over.
    """

    kind: ClassVar[ShapeKind]

    @abstractmethod
    def center(self) -> Vector2:
        """Barycenter of the shape; pivot of `translate` and `scale`."""
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def points(self) -> tuple[Vector2, ...]:
        """Stored defining points in construction order."""
        pass

    @abstractmethod
    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        """Closed (N, 2) outline of the shape."""
        pass

    @abstractmethod
    def _transformed(self, point_map: PointMap, magnitude: float = 1.0) -> Shape:
        """
        Rebuild the shape with every stored point passed through `point_map`
        and every length field multiplied by `magnitude`.
        """
        pass

    def translate(self, new_center: Vector2) -> Shape:
        """
        Rigid displacement moving the center onto `new_center`.

        The center is recomputed from the moved points, so it matches
        `new_center` up to one rounding step rather than bit for bit.
        """
        offset = new_center - self.center()
        logger.debug(f"Translating {self.kind} by ({offset.x:g}, {offset.y:g})")
        return self._transformed(lambda p: p + offset)

    def rotate(self, angle: float) -> Shape:
        """Rotate every stored point about the origin (not the center) by `angle` radians."""
        logger.debug(f"Rotating {self.kind} by {angle:g} rad")
        return self._transformed(lambda p: p.rotate(angle))

    def scale(self, factor: float) -> Shape:
        """
        Scale about the shape's own center.

        Point coordinates are multiplied by the signed factor, lengths by its
        absolute value: a negative factor reflects the shape through its
        center while keeping sizes positive.

        Raises:
            InvalidCoefficientError: If `factor` is zero.
        """
        validate_coefficient(factor)
        logger.debug(f"Scaling {self.kind} by {factor:g}")
        pivot = self.center()
        at_origin = self.translate(Vector2.ZERO)
        scaled = at_origin._transformed(lambda p: p * factor, abs(factor))
        return scaled.translate(pivot)
