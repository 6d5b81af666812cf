# python/micropng/chunks.py
# PNG chunk framing: length + tag + payload + CRC-32, all big-endian
# Also builds the IHDR payload and maps channel counts to PNG colour types
# RELEVANT FILES: python/micropng/encoder.py, tests/test_chunks.py

from __future__ import annotations

import struct
import zlib

from . import _validate
from .errors import ValidationError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

BIT_DEPTH = 8
COLOR_TYPE_RGB = 2
COLOR_TYPE_RGBA = 6
COMPRESSION_DEFLATE = 0
FILTER_METHOD_ADAPTIVE = 0
INTERLACE_NONE = 0

_IHDR = struct.Struct(">IIBBBBB")
_U32 = struct.Struct(">I")


def _tag_bytes(tag: str | bytes) -> bytes:
    if isinstance(tag, str):
        try:
            tag = tag.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ValidationError(f"chunk tag must be ASCII, got {tag!r}") from exc
    if len(tag) != 4 or not tag.isalpha():
        raise ValidationError(f"chunk tag must be 4 ASCII letters, got {tag!r}")
    return bytes(tag)


def chunk_crc(tag: str | bytes, payload: bytes) -> int:
    """CRC-32 over tag + payload, as stored in the chunk trailer."""
    t = _tag_bytes(tag)
    return zlib.crc32(payload, zlib.crc32(t)) & 0xFFFFFFFF


def png_chunk(tag: str | bytes, payload: bytes) -> bytes:
    """Frame ``payload`` as a PNG chunk of type ``tag``."""
    t = _tag_bytes(tag)
    data = bytes(payload)
    return _U32.pack(len(data)) + t + data + _U32.pack(chunk_crc(t, data))


def color_type_for(channels: int) -> int:
    """3 channels -> truecolour (2), 4 channels -> truecolour with alpha (6)."""
    c = _validate.channels(channels)
    return COLOR_TYPE_RGB if c == 3 else COLOR_TYPE_RGBA


def ihdr_payload(width: int, height: int, channels: int) -> bytes:
    w, h = _validate.size_wh(width, height)
    return _IHDR.pack(
        w,
        h,
        BIT_DEPTH,
        color_type_for(channels),
        COMPRESSION_DEFLATE,
        FILTER_METHOD_ADAPTIVE,
        INTERLACE_NONE,
    )


__all__ = [
    "PNG_SIGNATURE",
    "chunk_crc",
    "png_chunk",
    "color_type_for",
    "ihdr_payload",
]
