from .options import ConvertOptions
from .errors import FormatError, MalformedSubPatternWarning
from .primitives import (
    Point,
    PointRef,
    InlineCoord,
    RawCoord,
    Segment,
    Circle,
    Ellipse,
    Arc,
    Sector,
    AngleMark,
    PolygonFill,
    FunctionPlot,
    FunctionScope,
    ParametricPlot,
    TextLabel,
    AngleLabel,
)
from .registry import PointRegistry
from .drawing import Drawing, ExtractionContext
from .markup import convert_markup, extract_markup
from .construction import convert_construction, extract_construction
from .container import decode_container
from .convert import convert_source
from .tikz_codegen import generate_tikz_code, generate_tikz_document, wrap_output

__all__ = [
    'ConvertOptions',
    'FormatError',
    'MalformedSubPatternWarning',
    'Point',
    'PointRef',
    'InlineCoord',
    'RawCoord',
    'Segment',
    'Circle',
    'Ellipse',
    'Arc',
    'Sector',
    'AngleMark',
    'PolygonFill',
    'FunctionPlot',
    'FunctionScope',
    'ParametricPlot',
    'TextLabel',
    'AngleLabel',
    'PointRegistry',
    'Drawing',
    'ExtractionContext',
    'convert_markup',
    'extract_markup',
    'convert_construction',
    'extract_construction',
    'decode_container',
    'convert_source',
    'generate_tikz_code',
    'generate_tikz_document',
    'wrap_output',
]
