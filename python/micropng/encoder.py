# python/micropng/encoder.py
# PNG container encoder: compress the filtered stream, frame IHDR/IDAT/IEND, persist
# Public entry points encode_png() and save_png() live here
# RELEVANT FILES: python/micropng/serializer.py, python/micropng/chunks.py, python/micropng/config.py, tests/test_encoder.py

from __future__ import annotations

import errno
import logging
import os
import uuid
import zlib
from pathlib import Path

from . import _validate
from .chunks import PNG_SIGNATURE, ihdr_payload, png_chunk
from .config import ConfigSource, load_encoder_config
from .errors import CodecError, ValidationError
from .serializer import filtered_length, serialize

logger = logging.getLogger(__name__)


def compress(filtered: bytes, level: int = -1) -> bytes:
    """zlib-wrap ``filtered``; compressor failures surface as CodecError."""
    lvl = _validate.compression_level(level)
    try:
        return zlib.compress(filtered, lvl)
    except (zlib.error, MemoryError) as exc:
        raise CodecError(f"zlib compression failed: {exc}") from exc


def encode(width: int, height: int, channels: int, filtered: bytes, *, compression_level: int = -1) -> bytes:
    """Assemble signature + IHDR + IDAT + IEND around an already filtered stream."""
    ihdr = ihdr_payload(width, height, channels)
    if not isinstance(filtered, (bytes, bytearray, memoryview)):
        raise ValidationError(f"filtered stream must be bytes-like, got {type(filtered).__name__}")
    expected = filtered_length(width, height, channels)
    if len(filtered) != expected:
        raise ValidationError(
            f"filtered stream is {len(filtered)} bytes, expected {expected} for {width}x{height}x{channels}"
        )

    compressed = compress(filtered, compression_level)
    out = b"".join(
        (
            PNG_SIGNATURE,
            png_chunk(b"IHDR", ihdr),
            png_chunk(b"IDAT", compressed),
            png_chunk(b"IEND", b""),
        )
    )
    logger.debug(
        "encoded %dx%d PNG: %d filtered bytes -> %d compressed, %d total",
        width, height, len(filtered), len(compressed), len(out),
    )
    return out


def write_file(path, data: bytes, *, atomic: bool = True) -> Path:
    """Write ``data`` to ``path`` in a single write.

    With ``atomic`` the bytes land in a temporary sibling file that is renamed
    over ``path`` once fully written, so a failed write never leaves a
    truncated PNG behind. OSError propagates unchanged.
    """
    dest = _validate.png_path(path)
    if not atomic:
        with open(dest, "wb") as f:
            f.write(data)
        logger.debug("wrote %d bytes to %s", len(data), dest)
        return dest

    if not dest.name:
        raise IsADirectoryError(errno.EISDIR, "destination is a directory", str(dest))
    # replace the link target, not the link, as a direct write would
    target = Path(os.path.realpath(dest)) if dest.is_symlink() else dest

    # O_EXCL with mode 0o666 so the final file gets the usual umask-derived permissions
    tmp_name = target.with_name(f".{target.name}.{uuid.uuid4().hex}.tmp")
    fd = os.open(tmp_name, os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0), 0o666)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logger.debug("wrote %d bytes to %s", len(data), dest)
    return dest


def encode_png(image, config: ConfigSource = None) -> bytes:
    """Encode an image (rows of RGB/RGBA pixels) into PNG file bytes."""
    cfg = load_encoder_config(config)
    img = serialize(image, check_values=cfg.check_values)
    return encode(img.width, img.height, img.channels, img.data, compression_level=cfg.compression_level)


def save_png(path, image, config: ConfigSource = None) -> Path:
    """Encode ``image`` and write it to ``path``.

    Nothing is written when validation or compression fails.

    Raises:
        ValidationError: the image cannot be encoded.
        CodecError: zlib failed.
        OSError: the destination cannot be written.
    """
    dest = _validate.png_path(path)
    cfg = load_encoder_config(config)
    data = encode_png(image, cfg)
    return write_file(dest, data, atomic=cfg.atomic_write)


__all__ = ["compress", "encode", "write_file", "encode_png", "save_png"]
