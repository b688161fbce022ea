"""Function plots (clipped scope), the parabola shortcut and parametric curves."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..drawing import ExtractionContext
from ..numbers import format_number, parse_number, round_value
from ..primitives import ClipRect, FunctionPlot, FunctionScope, ParametricPlot
from .strokes import line_style

FUNCTION_PLOT_OPTIONS = "smooth,samples=500"
LN_DOMAIN_FLOOR = "0.001"

_CLIP_RE = re.compile(r"\\clip\s*\(([^,]+),([^)]+)\)\s*rectangle\s*\(([^,]+),([^)]+)\);")
_FUNCTION_RE = re.compile(r"\\draw\[([^\]]*)\]\s*plot\s*\(\\x,\{([^}]*)\}\)")
_QUADRATIC_RE = re.compile(r"\\draw\s*\[([^\]]+)\]\s*plot\s*\(\\x,\{\(\\x\)\^2/2/([^}]+)\}\)")
_QUADRATIC_EXPR_RE = re.compile(r"^\s*\(\\x\)\^2/2/")
_DOMAIN_RE = re.compile(r"domain=([^:,]+):([^,\])]+)")
_QUADRATIC_ROTATE_RE = re.compile(r"rotate around=\{([^:]+):\(([^,]+),([^)]+)\)\}")
_XSHIFT_RE = re.compile(r"xshift=([^,]+?)cm")
_YSHIFT_RE = re.compile(r"yshift=([^,]+?)cm")
_LN_RE = re.compile(r"ln\s*\(", re.IGNORECASE)

_PARAMETRIC_RE = re.compile(r"\\draw\[([^\]]*)\]\s*plot\[parametric\]\s*function\{([^}]+)\};")
_CANONICAL_PARAMETRIC_RE = re.compile(r"\\draw\[([^\]]*)\]\s*plot\s*\(\{([^}]*)\},\s*\{([^}]*)\}\);")
_LONG_DECIMAL_RE = re.compile(r"\d+\.\d{4,}")
_POWER_RE = re.compile(r"t\*\*\((\d+)\)")
_COMPLEMENT_POWER_RE = re.compile(r"\(1-t\)\*\*\((\d+)\)")
_BARE_T_RE = re.compile(r"([ (+\-*/,])t(?!\w)")
_LEADING_T_RE = re.compile(r"^t(?!\w)")


def _clip(text: str, ctx: ExtractionContext) -> Optional[ClipRect]:
    match = _CLIP_RE.search(text)
    if not match:
        return None
    try:
        return ClipRect(*(ctx.number(match.group(idx)) for idx in range(1, 5)))
    except ValueError as exc:
        ctx.warn("function plots", match.group(0), str(exc))
        return None


def _domain(options: str, ctx: ExtractionContext, expression: str = "") -> Tuple[str, str]:
    match = _DOMAIN_RE.search(options)
    if not match:
        raise ValueError("plot without a domain")
    start, end = match.group(1).strip(), match.group(2).strip()
    if _LN_RE.search(expression):
        try:
            if abs(parse_number(start)) < 0.001:
                start = LN_DOMAIN_FLOOR
        except ValueError:
            pass
    return _domain_bound(start, ctx), _domain_bound(end, ctx)


def _domain_bound(value_text: str, ctx: ExtractionContext) -> str:
    # Symbolic bounds such as ``pi`` are kept as written.
    try:
        return ctx.text(value_text)
    except ValueError:
        return value_text


def _generic_plots(text: str, ctx: ExtractionContext) -> List[FunctionPlot]:
    plots: List[FunctionPlot] = []
    for match in _FUNCTION_RE.finditer(text):
        options, expression = match.group(1), match.group(2)
        if _QUADRATIC_EXPR_RE.match(expression):
            continue
        try:
            domain = _domain(options, ctx, expression)
        except ValueError as exc:
            ctx.warn("function plots", match.group(0), str(exc))
            continue
        style = line_style(options)
        plot_options = f"{style},{FUNCTION_PLOT_OPTIONS}" if style else FUNCTION_PLOT_OPTIONS
        plots.append(FunctionPlot(plot_options, domain, expression))
    return plots


def extract_quadratic_plots(text: str, ctx: ExtractionContext) -> List[FunctionPlot]:
    """Parabolas GeoGebra exports as ``(\\x)^2/2/k`` with rotation and shift."""

    plots: List[FunctionPlot] = []
    for match in _QUADRATIC_RE.finditer(text):
        options = match.group(1)
        try:
            domain = _domain(options, ctx)
            denominator = ctx.text(match.group(2))
            plot_options = FUNCTION_PLOT_OPTIONS
            rotate = _QUADRATIC_ROTATE_RE.search(options)
            if rotate:
                angle, cx, cy = (ctx.text(rotate.group(idx)) for idx in range(1, 4))
                plot_options += f",rotate around={{{angle}:({cx},{cy})}}"
            xshift = _XSHIFT_RE.search(options)
            yshift = _YSHIFT_RE.search(options)
            dx = ctx.text(xshift.group(1)) if xshift else "0"
            dy = ctx.text(yshift.group(1)) if yshift else "0"
            if _nonzero(dx) or _nonzero(dy):
                plot_options += f",xshift={dx}cm,yshift={dy}cm"
        except ValueError as exc:
            ctx.warn("quadratic plots", match.group(0), str(exc))
            continue
        plots.append(FunctionPlot(plot_options, domain, f"(\\x)^2/2/{denominator}"))
    return plots


def _nonzero(value_text: str) -> bool:
    try:
        return parse_number(value_text) != 0
    except ValueError:
        return True


def extract_function_scope(text: str, ctx: ExtractionContext) -> Optional[FunctionScope]:
    """Collect function plots under the source's clip rectangle.

    Without a ``\\clip`` there is no scope to draw into and nothing is
    extracted.
    """

    clip = _clip(text, ctx)
    if clip is None:
        return None
    plots = _generic_plots(text, ctx)
    plots.extend(extract_quadratic_plots(text, ctx))
    if not plots:
        return None
    return FunctionScope(clip, tuple(plots))


def _round_long_decimals(expr: str, ctx: ExtractionContext) -> str:
    if not ctx.rounding:
        return expr
    return _LONG_DECIMAL_RE.sub(
        lambda m: format_number(round_value(float(m.group(0)))), expr
    )


def rewrite_parameter(expr: str) -> str:
    """Rewrite gnuplot-style ``t``/``**`` into TikZ's ``\\t``/``^``."""

    expr = _POWER_RE.sub(r"\\t^\1", expr)
    expr = _COMPLEMENT_POWER_RE.sub(r"(1-\\t)^\1", expr)
    expr = _BARE_T_RE.sub(r"\1\\t", expr)
    return _LEADING_T_RE.sub(r"\\t", expr)


def _parametric(x_expr: str, y_expr: str, options: str, ctx: ExtractionContext) -> ParametricPlot:
    x_expr = rewrite_parameter(_round_long_decimals(x_expr.strip(), ctx))
    y_expr = rewrite_parameter(_round_long_decimals(y_expr.strip(), ctx))
    return ParametricPlot(x_expr, y_expr, line_style(options))


def extract_parametric_plots(text: str, ctx: ExtractionContext) -> List[ParametricPlot]:
    found: List[Tuple[int, ParametricPlot]] = []
    for match in _PARAMETRIC_RE.finditer(text):
        parts = match.group(2).split(",")
        if len(parts) < 2:
            ctx.warn("parametric plots", match.group(0), "expected two comma-separated expressions")
            continue
        found.append((match.start(), _parametric(parts[0], parts[1], match.group(1), ctx)))
    for match in _CANONICAL_PARAMETRIC_RE.finditer(text):
        found.append((match.start(), _parametric(match.group(2), match.group(3), match.group(1), ctx)))
    found.sort(key=lambda item: item[0])
    return [plot for _, plot in found]
