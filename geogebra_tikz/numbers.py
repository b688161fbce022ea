"""Rounding and number formatting shared by every extractor and the emitter."""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

import numpy as np

DECIMALS = 3
_SCALE = 10 ** DECIMALS

_PAIR_RE = re.compile(r"\(([^,()]+),([^()]+)\)")
_LENGTH_RE = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([A-Za-z]*)\s*$"
)


def round_value(value: float, enabled: bool = True) -> float:
    """Round ``value`` half away from zero to three decimals."""

    value = float(value)
    if not enabled or not math.isfinite(value):
        return value
    scaled = math.floor(abs(value) * _SCALE + 0.5) / _SCALE
    if scaled == 0:
        return 0.0
    return math.copysign(scaled, value)


def format_number(value: float) -> str:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    if value == 0:
        return "0"
    return np.format_float_positional(value, trim="-")


def parse_number(text: str) -> float:
    """Parse a finite float; ``NaN`` and overflowing literals are rejected."""

    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def parse_coordinate(text: str) -> Optional[Tuple[float, float]]:
    """Return the ``(x, y)`` pair inside ``text`` or ``None`` when absent."""

    candidate = text.strip()
    if not candidate.startswith("("):
        candidate = f"({candidate})"
    match = _PAIR_RE.search(candidate)
    if not match:
        return None
    try:
        return parse_number(match.group(1)), parse_number(match.group(2))
    except ValueError:
        return None


def format_pair(x: float, y: float) -> str:
    return f"({format_number(x)},{format_number(y)})"


def format_coordinate(raw: str, rounding: bool = True) -> str:
    """Normalise a textual ``(x,y)`` pair; anything else passes through."""

    parsed = parse_coordinate(raw)
    if parsed is None:
        return raw
    x, y = parsed
    return format_pair(round_value(x, rounding), round_value(y, rounding))


def round_text(text: str, rounding: bool = True) -> str:
    """Round a bare numeric string; unrounded text is only stripped."""

    if not rounding:
        return text.strip()
    return format_number(round_value(parse_number(text)))


def parse_length(text: str) -> Tuple[float, str]:
    """Split ``1.5cm`` into ``(1.5, "cm")``."""

    match = _LENGTH_RE.match(text)
    if not match:
        raise ValueError(f"not a length: {text!r}")
    return parse_number(match.group(1)), match.group(2)
