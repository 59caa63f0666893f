"""Image serializer port - Interface for writing truecolor buffers"""

from abc import ABC, abstractmethod
from enum import Enum

from returns.result import Result

from barcode_server.domain import SerializationError, TruecolorBuffer


class ImageFormat(str, Enum):
    """Output image container"""

    PNG = "png"

    @property
    def media_type(self) -> str:
        return f"image/{self.value}"


class ImageSerializer(ABC):
    """
    Writes a TruecolorBuffer into a lossless image container.

    Serialization is deterministic: the same buffer always yields the same
    bytes.
    """

    @property
    @abstractmethod
    def format(self) -> ImageFormat:
        """Container produced by this serializer"""
        pass

    @abstractmethod
    def serialize(self, buffer: TruecolorBuffer) -> Result[bytes, SerializationError]:
        """
        Serialize buffer.

        Args:
            buffer: Pixels to write

        Returns:
            Success(image bytes) or Failure(SerializationError) on write failure
        """
        pass
