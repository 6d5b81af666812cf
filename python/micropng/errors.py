# python/micropng/errors.py
# Exception types raised by the encoder
# Subclass the matching built-ins so callers catching ValueError/RuntimeError keep working
# RELEVANT FILES: python/micropng/_validate.py, python/micropng/encoder.py, tests/test_api.py

from __future__ import annotations


class MicroPngError(Exception):
    """Base class for all micropng errors."""


class ValidationError(MicroPngError, ValueError):
    """Image, dimensions or parameters cannot be encoded as PNG."""


class ConfigError(ValidationError):
    """Invalid encoder configuration."""


class CodecError(MicroPngError, RuntimeError):
    """The zlib compressor failed."""


__all__ = ["MicroPngError", "ValidationError", "ConfigError", "CodecError"]
