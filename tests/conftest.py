import logging

import pytest

from planegeometry import Circle, Ellipse, Rectangle, Square, Triangle, Vector2


def make_shapes():
    """One instance of every shape kind, deliberately off the origin."""
    return [
        Ellipse(Vector2(1.0, 2.0), Vector2(4.0, 6.0), 1.5),
        Circle(Vector2(-2.0, 3.0), 2.5),
        Rectangle(Vector2(-1.0, 1.0), Vector2(3.0, 2.0), 2.0),
        Square(Vector2(2.0, -1.0), Vector2(4.0, 0.5)),
        Triangle(Vector2(0.5, 0.0), Vector2(5.0, 1.0), Vector2(2.0, 4.0)),
    ]


@pytest.fixture(params=make_shapes(), ids=lambda s: s.kind.value)
def shape(request):
    return request.param


@pytest.fixture
def right_triangle():
    return Triangle(Vector2(0.0, 0.0), Vector2(4.0, 0.0), Vector2(0.0, 3.0))


@pytest.fixture
def scalene_triangle():
    return Triangle(Vector2(0.0, 0.0), Vector2(5.0, 1.0), Vector2(2.0, 4.0))


@pytest.fixture
def clean_package_logger():
    logger = logging.getLogger("planegeometry")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
