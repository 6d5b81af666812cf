# python/micropng/_validate.py
# Input validation shared by the serializer, chunk builder and encoder
# Everything here fails fast with ValidationError before any bytes are produced
# RELEVANT FILES: python/micropng/errors.py, python/micropng/serializer.py, tests/test_serializer.py, tests/test_chunks.py

from __future__ import annotations

import numbers
import os
from pathlib import Path
from typing import Tuple

import numpy as np

from .errors import ValidationError

# PNG stores dimensions as u32 but limits them to 2**31 - 1
MAX_DIM = 2**31 - 1
SUPPORTED_CHANNELS = (3, 4)


def _as_int(name: str, v) -> int:
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise ValidationError(f"{name} must be an integer, got {type(v).__name__}")
    return int(v)


def size_wh(width, height) -> Tuple[int, int]:
    w = _as_int("width", width)
    h = _as_int("height", height)
    if w <= 0 or h <= 0:
        raise ValidationError(f"width and height must be > 0, got {w}x{h}")
    if w > MAX_DIM or h > MAX_DIM:
        raise ValidationError(f"width/height must be <= {MAX_DIM}")
    return w, h


def channels(n) -> int:
    c = _as_int("channels", n)
    if c not in SUPPORTED_CHANNELS:
        raise ValidationError(f"pixels must have 3 (RGB) or 4 (RGBA) channels, got {c}")
    return c


def compression_level(level) -> int:
    lvl = _as_int("compression_level", level)
    if lvl != -1 and not (0 <= lvl <= 9):
        raise ValidationError(f"compression_level must be -1 or within [0, 9], got {lvl}")
    return lvl


def channel_value(v, row: int, col: int) -> int:
    """Check a single channel value; no clamping is applied."""
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise ValidationError(
            f"channel value at row {row}, column {col} must be an integer, got {type(v).__name__}"
        )
    if not (0 <= v <= 255):
        raise ValidationError(f"channel value {v} at row {row}, column {col} is outside [0, 255]")
    return int(v)


def pixel_array(arr: np.ndarray) -> np.ndarray:
    """Validate an (H, W, 3|4) integer array and return it as C-contiguous uint8."""
    if arr.ndim != 3:
        raise ValidationError(f"image array must have shape (H, W, 3|4), got {arr.shape}")
    h, w, c = arr.shape
    if h == 0 or w == 0:
        raise ValidationError(f"image must have at least one row and one pixel per row, got {arr.shape}")
    channels(c)
    if arr.dtype.kind not in "ui":
        raise ValidationError(f"image array must have an integer dtype, got {arr.dtype}")
    if arr.dtype != np.uint8:
        lo, hi = int(arr.min()), int(arr.max())
        if lo < 0 or hi > 255:
            raise ValidationError(f"channel values must be within [0, 255], got range [{lo}, {hi}]")
        arr = arr.astype(np.uint8)
    return np.ascontiguousarray(arr)


def png_path(p) -> Path:
    if not isinstance(p, (str, os.PathLike)):
        raise TypeError(f"path must be str or os.PathLike, got {type(p).__name__}")
    s = os.fspath(p)
    if isinstance(s, bytes):
        s = os.fsdecode(s)
    if not s:
        raise ValidationError("path must not be empty")
    return Path(s)
