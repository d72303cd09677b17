"""
The MODEL layer contains the pure geometry: vector arithmetic, the shape
hierarchy and the construction/validation helpers.
It performs no I/O and holds no mutable state.
"""
from planegeometry.model.vector import Vector2
from planegeometry.model.shape import Shape, ShapeKind
from planegeometry.model.ellipse import Ellipse, Circle
from planegeometry.model.rectangle import Rectangle, Square
from planegeometry.model.triangle import Triangle
from planegeometry.model.registry import create_shape, list_kinds, register_shape

__all__ = [
    "Vector2",
    "Shape",
    "ShapeKind",
    "Ellipse",
    "Circle",
    "Rectangle",
    "Square",
    "Triangle",
    "create_shape",
    "list_kinds",
    "register_shape",
]
