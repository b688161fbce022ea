"""Per-run containers: the extraction context and the assembled drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import MalformedSubPatternWarning
from .numbers import parse_number, round_text, round_value
from .options import ConvertOptions
from .primitives import (
    AngleLabel,
    AngleMark,
    Arc,
    Circle,
    Ellipse,
    FunctionScope,
    ParametricPlot,
    PolygonFill,
    Sector,
    Segment,
    TextLabel,
)
from .registry import PointRegistry

logger = logging.getLogger(__name__)


@dataclass
class ExtractionContext:
    registry: PointRegistry
    options: ConvertOptions
    warnings: List[MalformedSubPatternWarning] = field(default_factory=list)

    @classmethod
    def create(cls, options: Optional[ConvertOptions] = None) -> "ExtractionContext":
        options = options or ConvertOptions()
        return cls(PointRegistry(rounding=options.round), options)

    @property
    def rounding(self) -> bool:
        return self.options.round

    def number(self, text: str) -> float:
        return round_value(parse_number(text), self.rounding)

    def round(self, value: float) -> float:
        return round_value(value, self.rounding)

    def text(self, value_text: str) -> str:
        return round_text(value_text, self.rounding)

    def warn(self, family: str, fragment: str, message: str) -> None:
        warning = MalformedSubPatternWarning(family, fragment, message)
        logger.debug("Skipping %s", warning)
        self.warnings.append(warning)


@dataclass
class Drawing:
    registry: PointRegistry
    function_scope: Optional[FunctionScope] = None
    parametric_plots: List[ParametricPlot] = field(default_factory=list)
    angle_marks: List[AngleMark] = field(default_factory=list)
    polygons: List[PolygonFill] = field(default_factory=list)
    sectors: List[Sector] = field(default_factory=list)
    circles: List[Circle] = field(default_factory=list)
    ellipses: List[Ellipse] = field(default_factory=list)
    arcs: List[Arc] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    angle_labels: List[AngleLabel] = field(default_factory=list)
    text_labels: List[TextLabel] = field(default_factory=list)
    warnings: List[MalformedSubPatternWarning] = field(default_factory=list)

    def summary(self) -> str:
        plots = len(self.function_scope.plots) if self.function_scope else 0
        return (
            f"{len(self.registry)} point(s), {len(self.segments)} segment(s), "
            f"{len(self.circles)} circle(s), {len(self.ellipses)} ellipse(s), "
            f"{len(self.arcs)} arc(s), {len(self.sectors)} sector(s), "
            f"{len(self.angle_marks)} angle mark(s), {len(self.polygons)} polygon(s), "
            f"{plots} function plot(s), {len(self.parametric_plots)} parametric plot(s), "
            f"{len(self.angle_labels) + len(self.text_labels)} label(s)"
        )
