from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConvertOptions:
    """Switches shared by both conversion front ends."""

    round: bool = True
    points: bool = True
    labels: bool = True
