"""Domain layer - Symbologies, bitmaps, scaling and color normalization

Pure business logic with no knowledge of HTTP or of the encoder libraries.
"""

from barcode_server.domain.bitmap import BLACK, WHITE, Bitmap, ImageBitmap, ModuleBitmap, Rgb
from barcode_server.domain.color_depth import TruecolorBuffer, to_truecolor
from barcode_server.domain.errors import (
    EncodingError,
    GenerateCodeError,
    InvalidSizeFormat,
    InvalidSizeValue,
    ScalingError,
    SerializationError,
    UnsupportedSymbology,
)
from barcode_server.domain.scaling import ScaledBitmap, parse_size, scale, scale_to
from barcode_server.domain.server_config import DEFAULT_MAX_DIMENSION, DEFAULT_PORT, ServerConfig
from barcode_server.domain.value_objects import EncodeJob, Size, Symbology

__all__ = [
    # Value objects
    "Symbology",
    "Size",
    "EncodeJob",
    # Bitmaps
    "Bitmap",
    "ModuleBitmap",
    "ImageBitmap",
    "ScaledBitmap",
    "Rgb",
    "BLACK",
    "WHITE",
    # Pipeline stages
    "parse_size",
    "scale",
    "scale_to",
    "TruecolorBuffer",
    "to_truecolor",
    # Errors
    "GenerateCodeError",
    "UnsupportedSymbology",
    "EncodingError",
    "InvalidSizeFormat",
    "InvalidSizeValue",
    "ScalingError",
    "SerializationError",
    # Configuration
    "ServerConfig",
    "DEFAULT_PORT",
    "DEFAULT_MAX_DIMENSION",
]
