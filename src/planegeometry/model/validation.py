"""
Input validation for raw shape parameters.

Shape constructors trust their arguments; these checks are applied by the
construction layer (`registry.create_shape`) and by `Shape.scale` before a
value reaches the formulas.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from planegeometry.errors import (
    CollinearPointsError,
    GeometryValidationError,
    InsufficientPointsError,
    InvalidCoefficientError,
)
from planegeometry.model.vector import Vector2

logger = logging.getLogger(__name__)


def validate_points(points: Sequence[Vector2], minimum: int = 2) -> None:
    """
    Ensure at least `minimum` points are given.

    Raises:
        InsufficientPointsError: If fewer points are given.
    """
    if len(points) < minimum:
        raise InsufficientPointsError(
            f"At least {minimum} points are required, got {len(points)}"
        )


def validate_coefficient(coefficient: float) -> None:
    """
    Raises:
        InvalidCoefficientError: If the coefficient is zero.
    """
    if coefficient == 0:
        raise InvalidCoefficientError("Coefficient cannot be zero")


def validate_positive(value: float, name: str) -> None:
    """Reject lengths that are not finite and strictly positive."""
    if not math.isfinite(value) or value <= 0.0:
        raise GeometryValidationError(f"{name} must be a positive finite number, got {value!r}")


def validate_non_collinear(a: Vector2, b: Vector2, c: Vector2) -> None:
    """
    Raises:
        CollinearPointsError: If the three points lie on one line.
    """
    if (b - a).cross(c - a) == 0.0:
        logger.debug(f"Rejected collinear points {a}, {b}, {c}")
        raise CollinearPointsError(f"Points {tuple(a)}, {tuple(b)}, {tuple(c)} are collinear")
