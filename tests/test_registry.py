import numpy as np
import pytest

from planegeometry import (
    Circle,
    CollinearPointsError,
    Ellipse,
    GeometryValidationError,
    InsufficientPointsError,
    Rectangle,
    ShapeKind,
    Square,
    Triangle,
    Vector2,
    create_shape,
    list_kinds,
    register_shape,
)


def test_all_kinds_are_registered():
    assert sorted(list_kinds()) == ["circle", "ellipse", "rectangle", "square", "triangle"]


def test_create_triangle_from_tuples():
    triangle = create_shape("triangle", [(0, 0), (4, 0), (0, 3)])
    assert isinstance(triangle, Triangle)
    assert triangle.area() == 6.0
    assert triangle.a == Vector2(0.0, 0.0)


@pytest.mark.parametrize(
    "kind, points, scalars, expected_type",
    [
        (ShapeKind.ELLIPSE, [(-3, 0), (3, 0)], (2.0,), Ellipse),
        (ShapeKind.CIRCLE, [(1, 1)], (2.0,), Circle),
        (ShapeKind.RECTANGLE, [(-1, 0), (1, 0)], (2.0,), Rectangle),
        (ShapeKind.SQUARE, np.array([[0.0, 0.0], [2.0, 0.0]]), (), Square),
        ("triangle", [Vector2(0.0, 0.0), (1, 0), [0, 1]], (), Triangle),
    ],
)
def test_create_each_kind(kind, points, scalars, expected_type):
    shape = create_shape(kind, points, *scalars)
    assert type(shape) is expected_type
    assert shape.kind == ShapeKind(kind)


@pytest.mark.parametrize(
    "kind, points, scalars",
    [
        ("ellipse", [(0, 0), (2, 0), (9, 9)], (1.0,)),
        ("circle", [(0, 0), (1, 1)], (1.0,)),
        ("square", [(0, 0), (2, 0), (2, 2)], ()),
        ("triangle", [(0, 0), (1, 0), (0, 1), (1, 1)], ()),
    ],
)
def test_extra_points_are_rejected(kind, points, scalars):
    with pytest.raises(GeometryValidationError, match="point"):
        create_shape(kind, points, *scalars)


def test_unknown_kind_raises_key_error():
    with pytest.raises(KeyError):
        create_shape("hexagon", [(0, 0), (1, 0)])


@pytest.mark.parametrize(
    "kind, points, scalars",
    [
        ("ellipse", [(0, 0)], (1.0,)),
        ("rectangle", [(0, 0)], (1.0,)),
        ("square", [(0, 0)], ()),
        ("triangle", [(0, 0), (1, 0)], ()),
        ("circle", [], (1.0,)),
    ],
)
def test_too_few_points(kind, points, scalars):
    with pytest.raises(InsufficientPointsError):
        create_shape(kind, points, *scalars)


def test_collinear_triangle_is_rejected():
    with pytest.raises(CollinearPointsError):
        create_shape("triangle", [(0, 0), (1, 1), (2, 2)])


@pytest.mark.parametrize(
    "kind, points, scalars",
    [
        ("circle", [(0, 0)], (-1.0,)),
        ("circle", [(0, 0)], (float("nan"),)),
        ("ellipse", [(0, 0), (1, 0)], (0.0,)),
        ("rectangle", [(0, 0), (1, 0)], ()),
        ("rectangle", [(0, 0), (1, 0)], (1.0, 2.0)),
        ("square", [(1, 1), (1, 1)], ()),
        ("triangle", [(0, 0), (1, 0), (0, 1)], (3.0,)),
    ],
)
def test_invalid_lengths_are_rejected(kind, points, scalars):
    with pytest.raises(GeometryValidationError):
        create_shape(kind, points, *scalars)


def test_registering_a_kind_twice_fails():
    with pytest.raises(ValueError):
        register_shape(ShapeKind.CIRCLE)(lambda points, scalars: None)
    assert type(create_shape("circle", [(0, 0)], 1.0)) is Circle
