"""Input-kind dispatch used by the command-line front end."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .construction import convert_construction
from .container import decode_container
from .markup import convert_markup
from .options import ConvertOptions

logger = logging.getLogger(__name__)


def detect_kind(content: Union[str, bytes]) -> str:
    if isinstance(content, (bytes, bytearray)):
        return "container"
    if "<geogebra" in content and "<construction" in content:
        return "construction"
    return "markup"


def convert_source(content: Union[str, bytes], options: Optional[ConvertOptions] = None) -> str:
    """Convert archive bytes, construction XML or exported markup to a fragment."""

    kind = detect_kind(content)
    logger.debug("Converting %s input", kind)
    if kind == "container":
        return convert_construction(decode_container(content), options)
    if kind == "construction":
        return convert_construction(content, options)
    return convert_markup(content, options)
