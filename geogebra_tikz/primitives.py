"""Primitive records shared by the markup and construction front ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# "" means a solid stroke.
LINE_STYLES = ("", "dashed", "dotted", "dash dot")


@dataclass(frozen=True)
class Point:
    label: str
    x: float
    y: float
    show_marker: bool = True
    show_label: bool = True

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PointRef:
    """Reference to a registered point, by label."""

    label: str


@dataclass(frozen=True)
class InlineCoord:
    x: float
    y: float


@dataclass(frozen=True)
class RawCoord:
    """Coordinate text that could not be parsed; emitted verbatim."""

    text: str


CoordinateRef = Union[PointRef, InlineCoord, RawCoord]


@dataclass(frozen=True)
class Length:
    value: float
    unit: str = ""


@dataclass(frozen=True)
class Rotation:
    angle: float
    pivot: CoordinateRef


@dataclass(frozen=True)
class Segment:
    a: CoordinateRef
    b: CoordinateRef
    line_style: str = ""


@dataclass(frozen=True)
class Circle:
    center: CoordinateRef
    radius: Length
    line_style: str = ""


@dataclass(frozen=True)
class Ellipse:
    center: CoordinateRef
    x_radius: Length
    y_radius: Length
    line_style: str = ""
    rotation: Optional[Rotation] = None


@dataclass(frozen=True)
class Arc:
    start_angle: float
    end_angle: float
    radius: float
    line_style: str = ""
    shift: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class Sector:
    shift: Tuple[float, float]
    start_angle: float
    end_angle: float
    radius: float
    line_style: str = ""


@dataclass(frozen=True)
class AngleMark:
    center: CoordinateRef
    start_angle: float
    end_angle: float
    radius: float


@dataclass(frozen=True)
class PolygonFill:
    vertices: Tuple[CoordinateRef, ...]
    opacity: float


@dataclass(frozen=True)
class FunctionPlot:
    """``plot(\\x,{expression})`` over ``domain``; ``options`` exclude the domain."""

    options: str
    domain: Tuple[str, str]
    expression: str


@dataclass(frozen=True)
class ClipRect:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class FunctionScope:
    clip: ClipRect
    plots: Tuple[FunctionPlot, ...]


@dataclass(frozen=True)
class ParametricPlot:
    x_expr: str
    y_expr: str
    line_style: str = ""


@dataclass(frozen=True)
class TextLabel:
    coords: str
    options: str
    content: str


@dataclass(frozen=True)
class AngleLabel:
    color: Optional[str]
    coords: str
    content: str


Primitive = Union[
    Segment,
    Circle,
    Ellipse,
    Arc,
    Sector,
    AngleMark,
    PolygonFill,
    FunctionPlot,
    ParametricPlot,
    TextLabel,
    AngleLabel,
]
