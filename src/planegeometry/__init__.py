"""2D Euclidean geometry: vectors and immutable planar shapes."""
from planegeometry.errors import (
    CollinearPointsError,
    DegenerateShapeError,
    GeometryError,
    GeometryValidationError,
    InsufficientPointsError,
    InvalidCoefficientError,
)
from planegeometry.logging_config import setup_logging
from planegeometry.model import (
    Circle,
    Ellipse,
    Rectangle,
    Shape,
    ShapeKind,
    Square,
    Triangle,
    Vector2,
    create_shape,
    list_kinds,
    register_shape,
)

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "CollinearPointsError",
    "DegenerateShapeError",
    "Ellipse",
    "GeometryError",
    "GeometryValidationError",
    "InsufficientPointsError",
    "InvalidCoefficientError",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Square",
    "Triangle",
    "Vector2",
    "create_shape",
    "list_kinds",
    "register_shape",
    "setup_logging",
]
