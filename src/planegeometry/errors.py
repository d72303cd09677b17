"""Typed errors raised by the geometry package."""
from __future__ import annotations


class GeometryError(Exception):
    """Base error of the package."""


class GeometryValidationError(GeometryError, ValueError):
    """Invalid raw input (point count, coefficients, lengths)."""


class InsufficientPointsError(GeometryValidationError):
    """Fewer points than the shape requires."""


class InvalidCoefficientError(GeometryValidationError):
    """Scale coefficient that would collapse the shape."""


class CollinearPointsError(GeometryValidationError):
    """Triangle vertices lying on one line."""


class DegenerateShapeError(GeometryError, ArithmeticError):
    """A derived quantity is undefined for a degenerate shape."""
