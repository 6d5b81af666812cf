# python/micropng/serializer.py
# Pixel serializer: flattens a scanline grid into the filtered PNG byte stream
# Every scanline is prefixed with filter type 0 (None); channel values pass through unchanged
# RELEVANT FILES: python/micropng/_validate.py, python/micropng/encoder.py, tests/test_serializer.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, NamedTuple

import numpy as np

from . import _validate
from .errors import ValidationError

logger = logging.getLogger(__name__)

FILTER_NONE = 0


class SerializedImage(NamedTuple):
    """Image dimensions plus the filtered byte stream ready for compression."""

    width: int
    height: int
    channels: int
    data: bytes


def filtered_length(width: int, height: int, channels: int) -> int:
    """Size of the filtered stream: one filter byte plus the raw channels per row."""
    return height * (1 + width * channels)


def _length(obj: Any, what: str) -> int:
    if isinstance(obj, (str, bytes)) and what != "pixel":
        raise ValidationError(f"{what} must be a sequence, got {type(obj).__name__}")
    try:
        return len(obj)
    except TypeError as exc:
        raise ValidationError(f"{what} must be a sequence, got {type(obj).__name__}") from exc


def _serialize_array(image: np.ndarray) -> SerializedImage:
    arr = _validate.pixel_array(image)
    height, width, channels = arr.shape
    rows = np.zeros((height, 1 + width * channels), dtype=np.uint8)
    rows[:, 0] = FILTER_NONE
    rows[:, 1:] = arr.reshape(height, width * channels)
    return SerializedImage(width, height, channels, rows.tobytes())


def serialize(image, *, check_values: bool = True) -> SerializedImage:
    """Flatten ``image`` into ``(width, height, channels, filtered_bytes)``.

    ``image`` is a sequence of scanlines, each a sequence of pixels, each a
    sequence of 3 (RGB) or 4 (RGBA) integers in [0, 255]. A NumPy array of
    shape (H, W, 3|4) with an integer dtype is accepted as well.

    Raises:
        ValidationError: empty image, ragged rows, mixed or unsupported
            channel counts, or channel values that do not fit in a byte.
    """
    if isinstance(image, np.ndarray):
        result = _serialize_array(image)
    else:
        if not isinstance(image, Sequence):
            raise ValidationError(f"image must be a sequence of scanlines, got {type(image).__name__}")
        height = len(image)
        if height == 0:
            raise ValidationError("image must contain at least one scanline")
        width = _length(image[0], "scanline")
        if width == 0:
            raise ValidationError("scanlines must contain at least one pixel")
        channels = _validate.channels(_length(image[0][0], "pixel"))

        out = bytearray()
        for y, row in enumerate(image):
            n = _length(row, "scanline")
            if n != width:
                raise ValidationError(f"scanline {y} has {n} pixels, expected {width}")
            out.append(FILTER_NONE)
            for x, pixel in enumerate(row):
                c = _length(pixel, "pixel")
                if c != channels:
                    raise ValidationError(
                        f"pixel at row {y}, column {x} has {c} channels, expected {channels}"
                    )
                if check_values:
                    out.extend(_validate.channel_value(v, y, x) for v in pixel)
                    continue
                try:
                    out.extend(pixel)
                except (TypeError, ValueError) as exc:
                    raise ValidationError(f"pixel at row {y}, column {x} does not fit in bytes: {exc}") from exc
        result = SerializedImage(width, height, channels, bytes(out))

    logger.debug(
        "serialized %dx%d image with %d channels into %d bytes",
        result.width, result.height, result.channels, len(result.data),
    )
    return result


__all__ = ["SerializedImage", "serialize", "filtered_length", "FILTER_NONE"]
