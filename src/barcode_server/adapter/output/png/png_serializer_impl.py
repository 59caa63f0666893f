"""PNG serializer implementation using Pillow"""

import io

from PIL import Image
from returns.result import Failure, Result, Success

from barcode_server.domain import SerializationError, TruecolorBuffer
from barcode_server.logging import get_logger
from barcode_server.port.output import ImageFormat, ImageSerializer

logger = get_logger(__name__)


class PngSerializerImpl(ImageSerializer):
    """
    Implementation of ImageSerializer writing 24-bit RGB PNG files.

    No metadata chunks are written, so the output depends only on the pixels.
    """

    def __init__(self, compress_level: int = 6):
        if not 0 <= compress_level <= 9:
            raise ValueError(f"compress_level must be between 0 and 9, got {compress_level}")
        self.compress_level = compress_level

    @property
    def format(self) -> ImageFormat:
        return ImageFormat.PNG

    def serialize(self, buffer: TruecolorBuffer) -> Result[bytes, SerializationError]:
        """
        Encode buffer as PNG.

        Args:
            buffer: 24-bit RGB pixels

        Returns:
            Success(PNG bytes) or Failure(SerializationError)
        """
        try:
            img = Image.frombytes("RGB", (buffer.width, buffer.height), buffer.pixels)
            out = io.BytesIO()
            self.write(img, out)
            return Success(out.getvalue())

        except Exception as e:
            logger.warning("PNG serialization failed: %s", e)
            return Failure(SerializationError(f"Failed to write PNG image: {e}"))

    def write(self, img: Image.Image, sink: io.BufferedIOBase) -> None:
        """Write img to a binary sink"""
        img.save(sink, format="PNG", compress_level=self.compress_level)
