from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from planegeometry import config
from planegeometry.model.vector import Vector2


def close_ring(pts: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Append the first point if the ring is not already closed."""
    if not np.allclose(pts[0], pts[-1]):
        pts = np.vstack((pts, pts[0]))
    return pts


def ellipse_to_polyline(
    center: Vector2,
    a: float,
    b: float,
    direction: Vector2,
    n_segments: Optional[int] = None
) -> npt.NDArray[np.float64]:
    """
    Discretize an ellipse in XY into an (N,2) polyline (closed).

    Args:
        center: Center of the ellipse.
        a: Semi-major axis length.
        b: Semi-minor axis length.
        direction: Unit vector along the major axis.
        n_segments: Number of segments to use for discretization.
            Defaults to `config.DEFAULT_POLYLINE_SEGMENTS`.

    Returns:
        An array of shape (n + 1, 2) containing the (x, y) coordinates of the points along the ellipse.
    """
    if n_segments is None:
        n_segments = config.DEFAULT_POLYLINE_SEGMENTS
    if n_segments < 3:
        raise ValueError(f"n_segments must be at least 3, got {n_segments}")

    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    u = direction.to_array()
    n = direction.perpendicular().to_array()
    pts = (
        center.to_array()
        + np.outer(a * np.cos(theta), u)
        + np.outer(b * np.sin(theta), n)
    )
    return close_ring(pts)


def polygon_to_polyline(vertices: Sequence[Vector2]) -> npt.NDArray[np.float64]:
    """
    Convert an ordered vertex list into a closed (N,2) polyline.

    Args:
        vertices: Polygon corners in traversal order.

    Returns:
        An array of shape (len(vertices) + 1, 2); the first vertex is repeated at the end.
    """
    pts = np.array([v.to_array() for v in vertices], dtype=np.float64)
    return close_ring(pts)


def polyline_length(pts: npt.NDArray[np.float64]) -> float:
    """Total length of a polyline given as an (N,2) array."""
    return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))
