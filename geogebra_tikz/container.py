"""Minimal reader for the zip container of ``.ggb`` files."""

from __future__ import annotations

import logging
import struct
import zlib

from .errors import FormatError
from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)

ENTRY_NAME = "geogebra.xml"

EOCD_SIGNATURE = b"PK\x05\x06"
CENTRAL_SIGNATURE = 0x02014B50
EOCD_SIZE = 22
MAX_COMMENT_LENGTH = 0xFFFF
CENTRAL_HEADER_SIZE = 46
LOCAL_HEADER_SIZE = 30

METHOD_STORED = 0
METHOD_DEFLATE = 8


def _u16(data: bytes, offset: int) -> int:
    return struct.unpack_from("<H", data, offset)[0]


def _u32(data: bytes, offset: int) -> int:
    return struct.unpack_from("<I", data, offset)[0]


def _find_eocd(data: bytes) -> int:
    """Offset of the end-of-central-directory record, searched from the end."""

    last = len(data) - EOCD_SIZE
    if last < 0:
        raise FormatError("not a packaged construction: file too short")
    lower = max(0, last - MAX_COMMENT_LENGTH)
    pos = data.rfind(EOCD_SIGNATURE, lower, last + len(EOCD_SIGNATURE))
    if pos < 0:
        raise FormatError("not a packaged construction: no end-of-central-directory record")
    return pos


def _inflate(payload: bytes, method: int) -> bytes:
    if method == METHOD_STORED:
        return payload
    if method == METHOD_DEFLATE:
        try:
            return zlib.decompress(payload, -zlib.MAX_WBITS)
        except zlib.error as exc:
            raise FormatError(f"corrupt deflate stream in {ENTRY_NAME}: {exc}") from exc
    raise FormatError(f"unsupported compression method {method} for {ENTRY_NAME}")


def _read_local_entry(data: bytes, local_offset: int, compressed_size: int) -> bytes:
    if local_offset + LOCAL_HEADER_SIZE > len(data):
        raise FormatError(f"local header of {ENTRY_NAME} lies outside the file")
    name_len = _u16(data, local_offset + 26)
    extra_len = _u16(data, local_offset + 28)
    start = local_offset + LOCAL_HEADER_SIZE + name_len + extra_len
    payload = data[start:start + compressed_size]
    if len(payload) != compressed_size:
        raise FormatError(f"{ENTRY_NAME} is truncated")
    return payload


@debug_log_call(logger, log_result=False)
def decode_container(data: bytes) -> str:
    """Return the text of the ``geogebra.xml`` entry packed in ``data``."""

    data = bytes(data)
    eocd = _find_eocd(data)
    entry_count = _u16(data, eocd + 10)
    pos = _u32(data, eocd + 16)
    logger.debug("Central directory at %d with %d entr(y/ies)", pos, entry_count)

    for _ in range(entry_count):
        if pos + CENTRAL_HEADER_SIZE > len(data) or _u32(data, pos) != CENTRAL_SIGNATURE:
            break
        method = _u16(data, pos + 10)
        compressed_size = _u32(data, pos + 20)
        name_len = _u16(data, pos + 28)
        extra_len = _u16(data, pos + 30)
        comment_len = _u16(data, pos + 32)
        local_offset = _u32(data, pos + 42)
        name = data[pos + CENTRAL_HEADER_SIZE:pos + CENTRAL_HEADER_SIZE + name_len].decode(
            "utf-8", errors="replace"
        )
        if name == ENTRY_NAME:
            payload = _read_local_entry(data, local_offset, compressed_size)
            raw = _inflate(payload, method)
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FormatError(f"{ENTRY_NAME} is not valid UTF-8") from exc
        pos += CENTRAL_HEADER_SIZE + name_len + extra_len + comment_len

    raise FormatError(f"no {ENTRY_NAME} entry in the packaged construction")
