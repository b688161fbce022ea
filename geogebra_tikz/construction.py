"""Front end for GeoGebra construction XML (``geogebra.xml``).

Elements carry geometry and visibility, commands carry the dependency graph.
Entities are derived by joining every visible element to the command that
produced it, so the output only contains what the author actually sees.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .drawing import Drawing, ExtractionContext
from .errors import FormatError
from .geometry import distance, ray_angle
from .logging_utils import apply_debug_logging
from .options import ConvertOptions
from .primitives import AngleMark, Circle, Length, PointRef, PolygonFill, Segment
from .tikz_codegen import generate_tikz_code

logger = logging.getLogger(__name__)

ANGLE_MARK_RADIUS = 0.4

LINE_TYPES: Dict[int, str] = {
    10: "dashed",
    15: "dashed",
    20: "dotted",
    30: "dash dot",
}


@dataclass
class ElementInfo:
    type: str
    label: str
    visible: bool = False
    show_label: bool = False
    x: Optional[float] = None
    y: Optional[float] = None
    value: Optional[float] = None
    alpha: float = 0.0
    line_type: int = 0

    @property
    def has_coords(self) -> bool:
        return self.x is not None and self.y is not None

    @property
    def line_style(self) -> str:
        return LINE_TYPES.get(self.line_type, "")


@dataclass
class CommandInfo:
    name: str
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)


def _construction_root(xml_text: str) -> ET.Element:
    if "<construction" not in xml_text:
        raise FormatError("no construction block found")
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise FormatError(f"invalid construction XML: {exc}") from exc
    construction = root if root.tag == "construction" else root.find(".//construction")
    if construction is None:
        raise FormatError("no construction block found")
    return construction


def _float_attr(node: Optional[ET.Element], name: str) -> Optional[float]:
    if node is None or node.get(name) is None:
        return None
    value = float(node.get(name))
    return value if math.isfinite(value) else None


def _parse_element(node: ET.Element) -> ElementInfo:
    info = ElementInfo(type=node.get("type", ""), label=node.get("label", ""))

    show = node.find("show")
    if show is not None:
        info.visible = show.get("object") == "true"
        info.show_label = show.get("label") == "true"

    coords = node.find("coords")
    if coords is not None:
        x = _float_attr(coords, "x")
        y = _float_attr(coords, "y")
        z = _float_attr(coords, "z") or 1.0
        if x is not None and y is not None and math.isfinite(x / z) and math.isfinite(y / z):
            info.x = x / z
            info.y = y / z

    info.value = _float_attr(node.find("value"), "val")
    alpha = _float_attr(node.find("objColor"), "alpha")
    if alpha is not None:
        info.alpha = alpha
    line = node.find("lineStyle")
    if line is not None and line.get("type") is not None:
        info.line_type = int(line.get("type"))
    return info


def _indexed_args(node: Optional[ET.Element]) -> List[str]:
    if node is None:
        return []
    indexed = []
    for key, value in node.attrib.items():
        if key.startswith("a") and key[1:].isdigit():
            indexed.append((int(key[1:]), value))
    return [value for _, value in sorted(indexed)]


def parse_elements(construction: ET.Element, ctx: ExtractionContext) -> Dict[str, ElementInfo]:
    elements: Dict[str, ElementInfo] = {}
    for node in construction.findall("element"):
        try:
            info = _parse_element(node)
        except ValueError as exc:
            ctx.warn("elements", ET.tostring(node, encoding="unicode")[:120], str(exc))
            continue
        if not info.label:
            continue
        elements[info.label] = info
    return elements


def parse_commands(construction: ET.Element) -> List[CommandInfo]:
    return [
        CommandInfo(
            name=node.get("name", ""),
            inputs=_indexed_args(node.find("input")),
            outputs=_indexed_args(node.find("output")),
        )
        for node in construction.findall("command")
    ]


def _is_point(elements: Dict[str, ElementInfo], label: str) -> bool:
    info = elements.get(label)
    return info is not None and info.type == "point" and info.has_coords


def _circle_radius(elements: Dict[str, ElementInfo], center: ElementInfo, radius_input: str) -> Optional[float]:
    through = elements.get(radius_input)
    if through is not None and through.has_coords:
        radius = distance((center.x, center.y), (through.x, through.y))
    elif through is not None and through.value is not None:
        radius = through.value
    else:
        try:
            radius = float(radius_input)
        except ValueError:
            return None
    return radius if math.isfinite(radius) else None


def extract_construction(xml_text: str, options: Optional[ConvertOptions] = None) -> Drawing:
    construction = _construction_root(xml_text)
    ctx = ExtractionContext.create(options)
    elements = parse_elements(construction, ctx)
    commands = parse_commands(construction)

    by_output: Dict[str, CommandInfo] = {}
    for command in commands:
        for label in command.outputs:
            if label:
                by_output[label] = command

    # Polygon(...) also outputs its edges; drawing them again would double the outline.
    polygon_edges: Set[str] = set()
    for command in commands:
        if command.name == "Polygon":
            polygon_edges.update(label for label in command.outputs[1:] if label)

    referenced: Set[str] = set()
    segments = []
    circles = []
    polygons = []
    angles = []

    for label, info in elements.items():
        if not info.visible:
            continue
        command = by_output.get(label)
        if command is None:
            continue
        if info.type == "segment" and command.name == "Segment" and label not in polygon_edges:
            if len(command.inputs) >= 2:
                segments.append((command.inputs[0], command.inputs[1], info.line_style))
                referenced.update(command.inputs[:2])
        elif info.type == "conic" and command.name == "Circle" and len(command.inputs) >= 2:
            if not _is_point(elements, command.inputs[0]):
                ctx.warn("circles", label, f"circle centre {command.inputs[0]!r} is not a point")
                continue
            center = elements[command.inputs[0]]
            radius = _circle_radius(elements, center, command.inputs[1])
            if radius is None:
                ctx.warn("circles", label, f"cannot determine radius from {command.inputs[1]!r}")
                continue
            circles.append((command.inputs[0], radius, info.line_style))
            referenced.add(command.inputs[0])
        elif info.type == "polygon" and command.name == "Polygon":
            vertices = [name for name in command.inputs if _is_point(elements, name)]
            if len(vertices) < 3:
                ctx.warn("polygons", label, "polygon with fewer than three point vertices")
                continue
            polygons.append((vertices, info.alpha))
            referenced.update(vertices)
        elif info.type == "angle" and command.name == "Angle" and len(command.inputs) >= 3:
            legs = command.inputs[:3]
            if not all(_is_point(elements, name) for name in legs):
                ctx.warn("angles", label, "angle defined by non-point inputs")
                continue
            angles.append(tuple(legs))
            referenced.update(legs)

    for label, info in elements.items():
        if info.type == "point" and (info.visible or info.show_label):
            referenced.add(label)

    registry = ctx.registry
    for label in sorted(referenced):
        if not _is_point(elements, label):
            continue
        info = elements[label]
        registry.register(
            label,
            info.x,
            info.y,
            show_marker=info.visible,
            show_label=info.visible or info.show_label,
        )

    drawing = Drawing(registry=registry, warnings=ctx.warnings)

    for a, b, style in segments:
        if a not in registry or b not in registry:
            ctx.warn("segments", f"{a}-{b}", "segment endpoint is not a point")
            continue
        drawing.segments.append(Segment(PointRef(a), PointRef(b), style))

    for center, radius, style in circles:
        drawing.circles.append(Circle(PointRef(center), Length(ctx.round(radius)), style))

    for vertices, alpha in polygons:
        drawing.polygons.append(
            PolygonFill(tuple(PointRef(name) for name in vertices), ctx.round(alpha))
        )

    for a, vertex, c in angles:
        origin = registry.get(vertex).coords
        start = ctx.round(ray_angle(origin, registry.get(a).coords))
        end = ctx.round(ray_angle(origin, registry.get(c).coords))
        if end <= start:
            end += 360
        drawing.angle_marks.append(AngleMark(PointRef(vertex), start, end, ANGLE_MARK_RADIUS))

    logger.info("Extracted %s from construction", drawing.summary())
    return drawing


def convert_construction(xml_text: str, options: Optional[ConvertOptions] = None) -> str:
    options = options or ConvertOptions()
    return generate_tikz_code(extract_construction(xml_text, options), options)


apply_debug_logging(globals(), logger=logger, skip={"parse_elements", "parse_commands"})
