"""Output ports - Interfaces for external dependencies"""

from barcode_server.port.output.image_serializer import ImageFormat, ImageSerializer
from barcode_server.port.output.symbol_encoder import SymbolEncoder

__all__ = [
    # Symbol Encoder
    "SymbolEncoder",
    # Image Serializer
    "ImageSerializer",
    "ImageFormat",
]
