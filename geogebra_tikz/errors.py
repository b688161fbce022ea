from __future__ import annotations

from dataclasses import dataclass


class FormatError(ValueError):
    """Raised when an input lacks a required block or uses an unsupported encoding."""


@dataclass
class MalformedSubPatternWarning:
    family: str
    fragment: str
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return f"{self.family}: {self.message} ({self.fragment.strip()!r})"
