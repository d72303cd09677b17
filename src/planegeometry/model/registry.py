"""
Construction of shapes from raw coordinates.

Concrete shapes register themselves under their `ShapeKind`; callers that
hold plain numbers (parsed input, JSON, numpy rows) go through
`create_shape`, which validates the input before calling the constructor.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from planegeometry.errors import GeometryValidationError
from planegeometry.model.ellipse import Circle, Ellipse
from planegeometry.model.rectangle import Rectangle, Square
from planegeometry.model.shape import Shape, ShapeKind
from planegeometry.model.triangle import Triangle
from planegeometry.model.validation import (
    validate_non_collinear,
    validate_points,
    validate_positive,
)
from planegeometry.model.vector import Vector2

logger = logging.getLogger(__name__)

Builder = Callable[[Sequence[Vector2], Sequence[float]], Shape]

_REGISTRY: dict[ShapeKind, Builder] = {}


def register_shape(kind: ShapeKind) -> Callable[[Builder], Builder]:
    """
    Decorator registering a builder function for `kind`.

    Builders are plain functions taking the parsed points and scalars, not
    shape classes: `Circle` and `Square` do not share their parent's
    constructor signature.
    """
    def decorator(builder: Builder) -> Builder:
        if kind in _REGISTRY:
            raise ValueError(f"A builder is already registered for '{kind}'")
        _REGISTRY[kind] = builder
        return builder
    return decorator


def create_shape(
    kind: ShapeKind | str,
    points: Iterable[Iterable[float]],
    *scalars: float
) -> Shape:
    """
    Validate raw input and build the requested shape.

    Args:
        kind: Shape kind or its string value (e.g. "triangle").
        points: (x, y) pairs; tuples, lists, Vector2 or numpy rows.
        *scalars: Extra lengths required by the kind
            (perifocal distance, radius or first side).

    Returns:
        The constructed shape.

    Raises:
        KeyError: If no builder is registered for `kind`.
        GeometryValidationError: If the input cannot describe the shape.
    """
    try:
        key = ShapeKind(kind)
    except ValueError:
        raise KeyError(f"No shape registered for kind '{kind}'") from None
    builder = _REGISTRY.get(key)
    if builder is None:
        raise KeyError(f"No shape registered for kind '{kind}'")

    vectors = [p if isinstance(p, Vector2) else Vector2.from_iterable(p) for p in points]
    shape = builder(vectors, scalars)
    logger.debug(f"Created {shape!r}")
    return shape


def list_kinds() -> list[str]:
    return [str(kind) for kind in _REGISTRY]


def _expect_points(kind: ShapeKind, points: Sequence[Vector2], count: int) -> None:
    validate_points(points, minimum=count)
    if len(points) > count:
        raise GeometryValidationError(
            f"'{kind}' expects {count} point(s), got {len(points)}"
        )


def _expect_scalars(kind: ShapeKind, scalars: Sequence[float], count: int) -> None:
    if len(scalars) != count:
        raise GeometryValidationError(
            f"'{kind}' expects {count} length argument(s), got {len(scalars)}"
        )


@register_shape(ShapeKind.ELLIPSE)
def _build_ellipse(points: Sequence[Vector2], scalars: Sequence[float]) -> Ellipse:
    _expect_points(ShapeKind.ELLIPSE, points, 2)
    _expect_scalars(ShapeKind.ELLIPSE, scalars, 1)
    validate_positive(scalars[0], "perifocal distance")
    return Ellipse(points[0], points[1], float(scalars[0]))


@register_shape(ShapeKind.CIRCLE)
def _build_circle(points: Sequence[Vector2], scalars: Sequence[float]) -> Circle:
    _expect_points(ShapeKind.CIRCLE, points, 1)
    _expect_scalars(ShapeKind.CIRCLE, scalars, 1)
    validate_positive(scalars[0], "radius")
    return Circle(points[0], float(scalars[0]))


@register_shape(ShapeKind.RECTANGLE)
def _build_rectangle(points: Sequence[Vector2], scalars: Sequence[float]) -> Rectangle:
    _expect_points(ShapeKind.RECTANGLE, points, 2)
    _expect_scalars(ShapeKind.RECTANGLE, scalars, 1)
    validate_positive(scalars[0], "side")
    return Rectangle(points[0], points[1], float(scalars[0]))


@register_shape(ShapeKind.SQUARE)
def _build_square(points: Sequence[Vector2], scalars: Sequence[float]) -> Square:
    _expect_points(ShapeKind.SQUARE, points, 2)
    _expect_scalars(ShapeKind.SQUARE, scalars, 0)
    validate_positive(Vector2.distance(points[0], points[1]), "side")
    return Square(points[0], points[1])


@register_shape(ShapeKind.TRIANGLE)
def _build_triangle(points: Sequence[Vector2], scalars: Sequence[float]) -> Triangle:
    _expect_points(ShapeKind.TRIANGLE, points, 3)
    _expect_scalars(ShapeKind.TRIANGLE, scalars, 0)
    validate_non_collinear(points[0], points[1], points[2])
    return Triangle(points[0], points[1], points[2])
