"""Primitive drawing → TikZ code generation helpers."""

from .generator import generate_tikz_code, render_ref
from .templates import generate_tikz_document, wrap_output

__all__ = [
    "generate_tikz_code",
    "generate_tikz_document",
    "render_ref",
    "wrap_output",
]
