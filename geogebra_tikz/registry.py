"""Run-scoped label <-> coordinate registry."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .geometry import coords_equal
from .numbers import parse_coordinate, round_value
from .primitives import CoordinateRef, InlineCoord, Point, PointRef, RawCoord

logger = logging.getLogger(__name__)


class PointRegistry:
    """Labelled points of one conversion run, in registration order."""

    def __init__(self, rounding: bool = True) -> None:
        self.rounding = rounding
        self._points: Dict[str, Point] = {}

    def __contains__(self, label: object) -> bool:
        return label in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points.values())

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> List[Point]:
        return list(self._points.values())

    def get(self, label: str) -> Optional[Point]:
        return self._points.get(label)

    def register(
        self,
        label: str,
        x: float,
        y: float,
        *,
        show_marker: bool = True,
        show_label: bool = True,
    ) -> Optional[Point]:
        """Add a point; returns ``None`` when ``label`` is already taken."""

        if label in self._points:
            logger.debug("Point %s already registered; ignoring duplicate", label)
            return None
        point = Point(
            label,
            round_value(x, self.rounding),
            round_value(y, self.rounding),
            show_marker=show_marker,
            show_label=show_label,
        )
        self._points[label] = point
        return point

    def match(self, x: float, y: float) -> Optional[Point]:
        for point in self._points.values():
            if coords_equal(point.coords, (x, y)):
                return point
        return None

    def resolve(self, raw: str) -> CoordinateRef:
        """Resolve coordinate text such as ``(1.5,2)`` or ``(A)``.

        Returns the first registered point within tolerance, else an inline
        coordinate; text without a numeric pair passes through untouched.
        """

        text = raw.strip()
        inner = text[1:-1].strip() if text.startswith("(") and text.endswith(")") else text
        if inner in self._points:
            return PointRef(inner)
        parsed = parse_coordinate(text)
        if parsed is None:
            return RawCoord(text if text.startswith("(") else f"({text})")
        x = round_value(parsed[0], self.rounding)
        y = round_value(parsed[1], self.rounding)
        point = self.match(x, y)
        if point is not None:
            return PointRef(point.label)
        return InlineCoord(x, y)
