from __future__ import annotations

import re
from typing import List, Tuple

from ..drawing import ExtractionContext
from ..numbers import format_coordinate, parse_coordinate
from ..primitives import AngleLabel, TextLabel

_TEXT_LABEL_RE = re.compile(r"\\draw\s*\(([^)]+)\)\s*node\s*\[([^\]]+)\]\s*\{([^}]+)\};")
_ANGLE_LABEL_RE = re.compile(
    r"\\draw\[color=([^\]]+)\]\s*\(([^)]+)\)\s*node\s*\{\$([^}]+)\\textrm\{\\degre\}\$\};"
)
_CANONICAL_ANGLE_LABEL_RE = re.compile(r"\\draw\s*\(([^)]+)\)\s*node\s*\{\$([^$]*?)\^\{\\circ\}\$\};")


def _label_position(raw: str, fragment: str, family: str, ctx: ExtractionContext):
    position = f"({raw})"
    if parse_coordinate(position) is None:
        ctx.warn(family, fragment, "label position is not a finite numeric pair")
        return None
    return format_coordinate(position, ctx.rounding)


def extract_text_labels(text: str, ctx: ExtractionContext) -> List[TextLabel]:
    labels: List[TextLabel] = []
    for match in _TEXT_LABEL_RE.finditer(text):
        coords = _label_position(match.group(1), match.group(0), "text labels", ctx)
        if coords is not None:
            labels.append(TextLabel(coords, match.group(2), match.group(3)))
    return labels


def extract_angle_labels(text: str, ctx: ExtractionContext) -> List[AngleLabel]:
    found: List[Tuple[int, AngleLabel]] = []
    for match in _ANGLE_LABEL_RE.finditer(text):
        coords = _label_position(match.group(2), match.group(0), "angle labels", ctx)
        if coords is not None:
            found.append((match.start(), AngleLabel(match.group(1), coords, match.group(3).strip())))
    for match in _CANONICAL_ANGLE_LABEL_RE.finditer(text):
        coords = _label_position(match.group(1), match.group(0), "angle labels", ctx)
        if coords is not None:
            found.append((match.start(), AngleLabel(None, coords, match.group(2).strip())))
    found.sort(key=lambda item: item[0])
    return [label for _, label in found]
