"""Segments, circles, ellipses, arcs, sectors and angle marks."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..drawing import ExtractionContext
from ..numbers import parse_length
from ..primitives import AngleMark, Arc, Circle, Ellipse, Length, Rotation, Sector, Segment
from .strokes import is_style_only, line_style

_SEGMENT_RE = re.compile(r"\\draw\s*(\[[^\]]+\])?\s*\(([^)]+)\)\s*--\s*\(([^)]+)\);")
_CIRCLE_RE = re.compile(r"\\draw\s*(?:\[([^\]]*)\])?\s*\(([^)]+)\)\s*circle\s*\(([^)]+)\);")
_ELLIPSE_RE = re.compile(r"\\draw\s*(?:\[([^\]]*)\])?\s*\(([^)]+)\)\s*ellipse\s*\(([^)]+)\);")
_ROTATE_RE = re.compile(r"rotate around=\{([^:]+):\(([^)]+)\)\}")
_SHIFT_RE = re.compile(r"shift=\{\(([^,]+),([^)]+)\)\}")

# Polar plot of radius r; GeoGebra uses ``variable=\t``, the emitter the default ``\x``.
_POLAR_PLOT = (
    r"plot\[domain=([^:]+):([^,\]]+)(?:,variable=\\[tx])?\]"
    r"\(\{1\*([^*]+)\*cos\(\\[tx] r\)\+0\*[^*]+\*sin\(\\[tx] r\)\},"
    r"\{0\*[^*]+\*cos\(\\[tx] r\)\+1\*[^*]+\*sin\(\\[tx] r\)\}\)"
)
_ARC_RE = re.compile(r"\\draw\s*(\[[^\]]*\])?\s*" + _POLAR_PLOT + r"\s*;")
_SECTOR_RE = re.compile(
    r"\\draw\s*\[shift=\{\(([^,]+),([^)]+)\)\}([^\]]*)\]\s*\(0,0\)\s*--\s*"
    + _POLAR_PLOT
    + r"\s*--\s*cycle\s*;"
)
_ANGLE_MARK_RE = re.compile(
    r"\\(?:draw|fill)\s*\[shift=\{\(([^)]*)\)\}[^\]]*\]\s*\(0,0\)\s*--\s*"
    r"\(([^:]+):([^)]+)\)\s*arc\s*\(([^:]+):([^:]+):([^)]+)\)\s*--\s*cycle\s*;"
)


def _length(ctx: ExtractionContext, text: str) -> Length:
    value, unit = parse_length(text)
    return Length(ctx.round(value), unit)


def _shift(ctx: ExtractionContext, options: str) -> Optional[Tuple[float, float]]:
    match = _SHIFT_RE.search(options)
    if not match:
        return None
    return (ctx.number(match.group(1)), ctx.number(match.group(2)))


def extract_segments(text: str, ctx: ExtractionContext) -> List[Segment]:
    segments: List[Segment] = []
    for match in _SEGMENT_RE.finditer(text):
        segments.append(
            Segment(
                ctx.registry.resolve(match.group(2)),
                ctx.registry.resolve(match.group(3)),
                line_style(match.group(1)),
            )
        )
    return segments


def extract_circles(text: str, ctx: ExtractionContext) -> List[Circle]:
    circles: List[Circle] = []
    for match in _CIRCLE_RE.finditer(text):
        options = match.group(1)
        # Filled dots are point markers, not circles.
        if options is not None and "line" not in options and not is_style_only(options):
            continue
        try:
            radius = _length(ctx, match.group(3))
        except ValueError as exc:
            ctx.warn("circles", match.group(0), str(exc))
            continue
        circles.append(Circle(ctx.registry.resolve(match.group(2)), radius, line_style(options)))
    return circles


def extract_ellipses(text: str, ctx: ExtractionContext) -> List[Ellipse]:
    ellipses: List[Ellipse] = []
    for match in _ELLIPSE_RE.finditer(text):
        options = match.group(1) or ""
        radii = match.group(3).split(" and ")
        try:
            if len(radii) != 2:
                raise ValueError("ellipse needs two radii")
            x_radius = _length(ctx, radii[0])
            y_radius = _length(ctx, radii[1])
            rotation = None
            rotate = _ROTATE_RE.search(options)
            if rotate:
                rotation = Rotation(
                    ctx.number(rotate.group(1)),
                    ctx.registry.resolve(f"({rotate.group(2)})"),
                )
        except ValueError as exc:
            ctx.warn("ellipses", match.group(0), str(exc))
            continue
        ellipses.append(
            Ellipse(
                ctx.registry.resolve(match.group(2)),
                x_radius,
                y_radius,
                line_style(options),
                rotation,
            )
        )
    return ellipses


def extract_arcs(text: str, ctx: ExtractionContext) -> List[Arc]:
    arcs: List[Arc] = []
    for match in _ARC_RE.finditer(text):
        options = match.group(1) or ""
        try:
            arcs.append(
                Arc(
                    start_angle=ctx.number(match.group(2)),
                    end_angle=ctx.number(match.group(3)),
                    radius=ctx.number(match.group(4)),
                    line_style=line_style(options),
                    shift=_shift(ctx, options),
                )
            )
        except ValueError as exc:
            ctx.warn("arcs", match.group(0), str(exc))
    return arcs


def extract_sectors(text: str, ctx: ExtractionContext) -> List[Sector]:
    sectors: List[Sector] = []
    for match in _SECTOR_RE.finditer(text):
        try:
            sectors.append(
                Sector(
                    shift=(ctx.number(match.group(1)), ctx.number(match.group(2))),
                    start_angle=ctx.number(match.group(4)),
                    end_angle=ctx.number(match.group(5)),
                    radius=ctx.number(match.group(6)),
                    line_style=line_style(match.group(3)),
                )
            )
        except ValueError as exc:
            ctx.warn("sectors", match.group(0), str(exc))
    return sectors


def extract_angle_marks(text: str, ctx: ExtractionContext) -> List[AngleMark]:
    marks: List[AngleMark] = []
    for match in _ANGLE_MARK_RE.finditer(text):
        try:
            marks.append(
                AngleMark(
                    center=ctx.registry.resolve(f"({match.group(1)})"),
                    start_angle=ctx.number(match.group(2)),
                    end_angle=ctx.number(match.group(5)),
                    radius=ctx.number(match.group(3)),
                )
            )
        except ValueError as exc:
            ctx.warn("angle marks", match.group(0), str(exc))
    return marks
