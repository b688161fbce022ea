"""GeoGebra TikZ export → primitive extraction."""

from .converter import convert_markup, extract_markup
from .plots import rewrite_parameter
from .strokes import line_style

__all__ = [
    "convert_markup",
    "extract_markup",
    "line_style",
    "rewrite_parameter",
]
