"""Point markers, their text labels and canonical coordinate declarations."""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..drawing import ExtractionContext
from ..numbers import parse_coordinate
from ..primitives import Point

logger = logging.getLogger(__name__)

_COORDINATE_DECL_RE = re.compile(r"\\coordinate\s*\(([^)]+)\)\s*at\s*\(([^)]+)\)\s*;")
_POINT_MARKER_RE = re.compile(
    r"\\draw\s*\[fill=[^\]]+\]\s*\(([^)]+)\)\s*circle\s*\(([^)]+)\);"
)
# Angle values are printed with the same node syntax; \textrm{\degre} tells them apart.
_POINT_LABEL_RE = re.compile(
    r"\\draw\[color=[^\]]+\]\s*\([^)]+\)\s*node\s*\{\$(?!.*\\textrm\{\\degre\})([^$]+)\$\}"
)


def _register(ctx: ExtractionContext, label: str, coords: Tuple[float, float], fragment: str) -> List[Point]:
    point = ctx.registry.register(label, coords[0], coords[1])
    if point is None:
        ctx.warn("points", fragment, f"duplicate point label {label!r}")
        return []
    return [point]


def extract_points(text: str, ctx: ExtractionContext) -> List[Point]:
    """Register every labelled point of ``text`` and return the new points.

    The Nth point marker is paired with the Nth label node. Exports that
    emit markers and labels in different orders will mispair.
    """

    points: List[Point] = []

    for match in _COORDINATE_DECL_RE.finditer(text):
        coords = parse_coordinate(match.group(2))
        if coords is None:
            ctx.warn("points", match.group(0), "coordinate declaration without a numeric pair")
            continue
        points.extend(_register(ctx, match.group(1).strip(), coords, match.group(0)))

    markers: List[Tuple[Tuple[float, float], str]] = []
    for match in _POINT_MARKER_RE.finditer(text):
        coords = parse_coordinate(match.group(1))
        if coords is None:
            # Markers drawn at a named coordinate, e.g. ``(A)``, carry no position.
            if "," in match.group(1):
                ctx.warn("points", match.group(0), "point marker without a numeric pair")
            continue
        markers.append((coords, match.group(0)))

    labels = [match.group(1).strip() for match in _POINT_LABEL_RE.finditer(text)]
    if markers and len(markers) != len(labels):
        logger.debug("Pairing %d point marker(s) with %d label(s)", len(markers), len(labels))

    for (coords, fragment), label in zip(markers, labels):
        points.extend(_register(ctx, label, coords, fragment))
    return points
