"""Front end for GeoGebra's TikZ export."""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..drawing import Drawing, ExtractionContext
from ..errors import FormatError
from ..logging_utils import debug_log_call
from ..options import ConvertOptions
from ..tikz_codegen import generate_tikz_code
from .labels import extract_angle_labels, extract_text_labels
from .plots import extract_function_scope, extract_parametric_plots
from .points import extract_points
from .shapes import (
    extract_angle_marks,
    extract_arcs,
    extract_circles,
    extract_ellipses,
    extract_sectors,
    extract_segments,
)

logger = logging.getLogger(__name__)

_ENVIRONMENT_RE = re.compile(r"\\begin\{tikzpicture\}(.*?)\\end\{tikzpicture\}", re.DOTALL)


@debug_log_call(logger)
def extract_markup(source_text: str, options: Optional[ConvertOptions] = None) -> Drawing:
    """Extract every recognised primitive from the first ``tikzpicture``."""

    match = _ENVIRONMENT_RE.search(source_text)
    if not match:
        raise FormatError("no drawing environment found")
    body = match.group(1)

    ctx = ExtractionContext.create(options)
    # Points first: the shape extractors resolve against the registry.
    extract_points(body, ctx)
    drawing = Drawing(registry=ctx.registry, warnings=ctx.warnings)
    drawing.function_scope = extract_function_scope(body, ctx)
    drawing.parametric_plots = extract_parametric_plots(body, ctx)
    drawing.angle_marks = extract_angle_marks(body, ctx)
    drawing.sectors = extract_sectors(body, ctx)
    drawing.circles = extract_circles(body, ctx)
    drawing.ellipses = extract_ellipses(body, ctx)
    drawing.arcs = extract_arcs(body, ctx)
    drawing.segments = extract_segments(body, ctx)
    drawing.angle_labels = extract_angle_labels(body, ctx)
    drawing.text_labels = extract_text_labels(body, ctx)

    logger.info("Extracted %s", drawing.summary())
    if drawing.warnings:
        logger.info("Skipped %d malformed fragment(s)", len(drawing.warnings))
    return drawing


@debug_log_call(logger, log_result=False)
def convert_markup(source_text: str, options: Optional[ConvertOptions] = None) -> str:
    options = options or ConvertOptions()
    return generate_tikz_code(extract_markup(source_text, options), options)
