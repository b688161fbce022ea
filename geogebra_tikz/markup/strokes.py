from __future__ import annotations

from typing import Optional

DASH_DOT_PATTERN = "dash pattern=on 1pt off 1pt on 1pt off 4pt"
DASHED_PATTERN = "dash pattern=on 1pt off 1pt"

CANONICAL_STYLES = ("dashed", "dotted", "dash dot")


def line_style(options: Optional[str]) -> str:
    """Collapse a TikZ option list to its dash category.

    Width and colour never survive; the more specific pattern wins.
    """

    if not options:
        return ""
    if DASH_DOT_PATTERN in options or "dash dot" in options:
        return "dash dot"
    if DASHED_PATTERN in options:
        return "dashed"
    if "dotted" in options:
        return "dotted"
    if "dash" in options:
        return "dashed"
    return ""


def is_style_only(options: str) -> bool:
    """True for option lists the emitter writes for plain strokes, e.g. ``dashed``."""

    return options.strip() in CANONICAL_STYLES
