from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

Coord = Tuple[float, float]

COORD_TOLERANCE = 0.001
EDGE_TOLERANCE = 0.1

LABEL_POSITIONS = (
    "above",
    "below",
    "left",
    "right",
    "above left",
    "above right",
    "below left",
    "below right",
)


def coords_equal(a: Coord, b: Coord, tol: float = COORD_TOLERANCE) -> bool:
    return abs(a[0] - b[0]) < tol and abs(a[1] - b[1]) < tol


def bounding_box(points: Iterable[Coord]) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` of ``points``."""

    arr = np.asarray(list(points), dtype=float).reshape(-1, 2)
    if arr.shape[0] == 0:
        raise ValueError("bounding box of an empty point set")
    mins = arr.min(axis=0)
    maxs = arr.max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])


def label_position(point: Coord, all_points: Sequence[Coord]) -> str:
    """Pick a label anchor for ``point`` relative to the figure's bounding box.

    Points on the left/right extremes get ``left``/``right``, then points on
    the bottom/top extremes get ``below``/``above``; interior points are
    classified by quadrant around the box center, with ties falling to the
    lower/left side.
    """

    x, y = point
    min_x, min_y, max_x, max_y = bounding_box(all_points or [point])
    if abs(x - min_x) < EDGE_TOLERANCE:
        return "left"
    if abs(x - max_x) < EDGE_TOLERANCE:
        return "right"
    if abs(y - min_y) < EDGE_TOLERANCE:
        return "below"
    if abs(y - max_y) < EDGE_TOLERANCE:
        return "above"

    center_x = 0.5 * (min_x + max_x)
    center_y = 0.5 * (min_y + max_y)
    if x > center_x:
        return "above right" if y > center_y else "below right"
    return "above left" if y > center_y else "below left"


def distance(a: Coord, b: Coord) -> float:
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def ray_angle(vertex: Coord, point: Coord) -> float:
    """Direction of the ray ``vertex -> point`` in degrees, in ``(-180, 180]``."""

    return float(np.degrees(np.arctan2(point[1] - vertex[1], point[0] - vertex[0])))
