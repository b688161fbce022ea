"""Canonical TikZ emitter shared by both front ends."""

from __future__ import annotations

from typing import Callable, List, Optional, Set, Tuple

from ..drawing import Drawing
from ..geometry import label_position
from ..numbers import format_number, format_pair
from ..options import ConvertOptions
from ..primitives import (
    AngleMark,
    CoordinateRef,
    InlineCoord,
    Length,
    PointRef,
    RawCoord,
)

ANGLE_FILL = "gray!30"
POLYGON_FILL = "gray!20"
MARKER_RADIUS = "1pt"
PARAMETRIC_OPTIONS = "smooth, samples=100, domain=0:1, variable=\\t"

Block = List[str]


def generate_tikz_code(drawing: Drawing, options: Optional[ConvertOptions] = None) -> str:
    """Render ``drawing`` as a ``tikzpicture`` in the fixed section order."""

    options = options or ConvertOptions()
    emitters: List[Callable[[Drawing], Block]] = [
        _emit_coordinates,
        _emit_function_scope,
        _emit_parametric_plots,
        _emit_angle_marks,
        _emit_polygons,
        _emit_sectors,
        _emit_circles,
        _emit_ellipses,
        _emit_arcs,
        _emit_segments,
    ]
    if options.points:
        emitters.append(_emit_point_markers)
    if options.labels:
        emitters.append(_emit_point_labels)
    emitters.extend([_emit_angle_labels, _emit_text_labels])

    lines: List[str] = ["\\begin{tikzpicture}[scale=1]"]
    first = True
    for emit in emitters:
        block = emit(drawing)
        if not block:
            continue
        if not first:
            lines.append("")
        lines.extend(block)
        first = False
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def render_ref(ref: CoordinateRef) -> str:
    if isinstance(ref, PointRef):
        return f"({ref.label})"
    if isinstance(ref, InlineCoord):
        return format_pair(ref.x, ref.y)
    if isinstance(ref, RawCoord):
        return ref.text
    raise TypeError(f"unsupported coordinate reference {ref!r}")


def _length(value: Length) -> str:
    return f"{format_number(value.value)}{value.unit}"


def _style_prefix(line_style: str) -> str:
    return f"[{line_style}]" if line_style else ""


def _polar_plot(start: float, end: float, radius: float) -> str:
    r = format_number(radius)
    return (
        f"plot[domain={format_number(start)}:{format_number(end)}]"
        f"({{1*{r}*cos(\\x r)+0*{r}*sin(\\x r)}},{{0*{r}*cos(\\x r)+1*{r}*sin(\\x r)}})"
    )


def _section(title: str, body: Block) -> Block:
    if not body:
        return []
    return [f"  % {title}"] + body


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _emit_coordinates(drawing: Drawing) -> Block:
    return _section(
        "coordinates",
        [
            f"  \\coordinate ({point.label}) at {format_pair(point.x, point.y)};"
            for point in drawing.registry
        ],
    )


def _emit_function_scope(drawing: Drawing) -> Block:
    scope = drawing.function_scope
    if scope is None or not scope.plots:
        return []
    clip = scope.clip
    body = [
        "  \\begin{scope}",
        f"    \\clip{format_pair(clip.x1, clip.y1)} rectangle {format_pair(clip.x2, clip.y2)};",
    ]
    for plot in scope.plots:
        start, end = plot.domain
        body.append(
            f"    \\draw[{plot.options},domain={start}:{end}] plot(\\x,{{{plot.expression}}});"
        )
    body.append("  \\end{scope}")
    return _section("function plots", body)


def _emit_parametric_plots(drawing: Drawing) -> Block:
    body: Block = []
    for plot in drawing.parametric_plots:
        opts = f"{plot.line_style}, {PARAMETRIC_OPTIONS}" if plot.line_style else PARAMETRIC_OPTIONS
        body.append(f"  \\draw[{opts}] plot")
        body.append(f"    ({{{plot.x_expr}}},")
        body.append(f"     {{{plot.y_expr}}});")
    return _section("parametric curves", body)


def _angle_fill(mark: AngleMark) -> str:
    start = format_number(mark.start_angle)
    end = format_number(mark.end_angle)
    radius = format_number(mark.radius)
    return (
        f"  \\fill [shift={{{render_ref(mark.center)}}}, {ANGLE_FILL}] (0,0) -- "
        f"({start}:{radius}) arc ({start}:{end}:{radius}) -- cycle;"
    )


def _emit_angle_marks(drawing: Drawing) -> Block:
    return _section("angle marks", [_angle_fill(mark) for mark in drawing.angle_marks])


def _emit_polygons(drawing: Drawing) -> Block:
    body: Block = []
    for polygon in drawing.polygons:
        if polygon.opacity <= 0:
            continue
        path = " -- ".join(render_ref(vertex) for vertex in polygon.vertices)
        body.append(
            f"  \\fill[{POLYGON_FILL}, fill opacity={format_number(polygon.opacity)}] {path} -- cycle;"
        )
    return _section("polygons", body)


def _emit_sectors(drawing: Drawing) -> Block:
    body: Block = []
    for sector in drawing.sectors:
        tokens = [f"shift={{{format_pair(*sector.shift)}}}"]
        if sector.line_style:
            tokens.append(sector.line_style)
        body.append(
            f"  \\draw [{', '.join(tokens)}] (0,0) -- "
            f"{_polar_plot(sector.start_angle, sector.end_angle, sector.radius)} -- cycle;"
        )
    return _section("sectors", body)


def _emit_circles(drawing: Drawing) -> Block:
    body = [
        f"  \\draw{_style_prefix(circle.line_style)} {render_ref(circle.center)} "
        f"circle ({_length(circle.radius)});"
        for circle in drawing.circles
    ]
    return _section("circles", body)


def _emit_ellipses(drawing: Drawing) -> Block:
    body: Block = []
    for ellipse in drawing.ellipses:
        tokens: List[str] = []
        if ellipse.line_style:
            tokens.append(ellipse.line_style)
        if ellipse.rotation is not None:
            tokens.append(
                f"rotate around={{{format_number(ellipse.rotation.angle)}:"
                f"{render_ref(ellipse.rotation.pivot)}}}"
            )
        opts = f"[{', '.join(tokens)}]" if tokens else ""
        body.append(
            f"  \\draw{opts} {render_ref(ellipse.center)} ellipse "
            f"({_length(ellipse.x_radius)} and {_length(ellipse.y_radius)});"
        )
    return _section("ellipses", body)


def _emit_arcs(drawing: Drawing) -> Block:
    body: Block = []
    for arc in drawing.arcs:
        tokens: List[str] = []
        if arc.line_style:
            tokens.append(arc.line_style)
        if arc.shift is not None:
            tokens.append(f"shift={{{format_pair(*arc.shift)}}}")
        tokens.append("smooth")
        body.append(
            f"  \\draw[{', '.join(tokens)}] {_polar_plot(arc.start_angle, arc.end_angle, arc.radius)};"
        )
    return _section("arcs", body)


def _emit_segments(drawing: Drawing) -> Block:
    body: Block = []
    drawn: Set[Tuple[str, ...]] = set()
    for segment in drawing.segments:
        a = render_ref(segment.a)
        b = render_ref(segment.b)
        key = tuple(sorted((a, b)))
        if key in drawn:
            continue
        drawn.add(key)
        body.append(f"  \\draw{_style_prefix(segment.line_style)} {a} -- {b};")
    return _section("segments", body)


def _emit_point_markers(drawing: Drawing) -> Block:
    body = [
        f"  \\draw[fill=black] ({point.label}) circle ({MARKER_RADIUS});"
        for point in drawing.registry
        if point.show_marker
    ]
    return _section("point markers", body)


def _emit_point_labels(drawing: Drawing) -> Block:
    everything = [point.coords for point in drawing.registry]
    body = [
        f"  \\node[{label_position(point.coords, everything)}] at ({point.label}) {{${point.label}$}};"
        for point in drawing.registry
        if point.show_label
    ]
    return _section("point labels", body)


def _emit_angle_labels(drawing: Drawing) -> Block:
    body = [
        f"  \\draw {label.coords} node {{${label.content}^{{\\circ}}$}};"
        for label in drawing.angle_labels
    ]
    return _section("angle labels", body)


def _emit_text_labels(drawing: Drawing) -> Block:
    body = [
        f"  \\draw {label.coords} node[{label.options}] {{{label.content}}};"
        for label in drawing.text_labels
    ]
    return _section("text labels", body)
