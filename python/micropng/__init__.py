# python/micropng/__init__.py
# Public API for the minimal PNG encoder
# Encodes RGB/RGBA scanline grids (or (H, W, 3|4) NumPy arrays) to PNG bytes or files
# RELEVANT FILES: python/micropng/encoder.py, python/micropng/serializer.py, tests/test_api.py
from .chunks import PNG_SIGNATURE, chunk_crc, color_type_for, ihdr_payload, png_chunk
from .config import EncoderConfig, load_encoder_config
from .encoder import compress, encode, encode_png, save_png, write_file
from .errors import CodecError, ConfigError, MicroPngError, ValidationError
from .serializer import SerializedImage, filtered_length, serialize

__version__ = "0.1.0"

__all__ = [
    # Encoding
    "encode_png",
    "save_png",
    "serialize",
    "encode",
    "compress",
    "write_file",
    "SerializedImage",
    "filtered_length",
    # Chunks
    "PNG_SIGNATURE",
    "png_chunk",
    "chunk_crc",
    "ihdr_payload",
    "color_type_for",
    # Configuration
    "EncoderConfig",
    "load_encoder_config",
    # Errors
    "MicroPngError",
    "ValidationError",
    "ConfigError",
    "CodecError",
    "__version__",
]
