"""Symbol encoder port - Interface for symbology encoders"""

from abc import ABC, abstractmethod

from returns.result import Result

from barcode_server.domain import Bitmap, EncodingError, Symbology


class SymbolEncoder(ABC):
    """
    Encodes a payload into the natural-size bitmap of one symbology.

    Implementations are pure: the same payload always yields the same bitmap,
    and no state is shared between calls. 1-D symbologies produce a bitmap one
    pixel high with one column per module; 2-D symbologies produce one pixel
    per module. Neither includes a quiet zone.
    """

    @property
    @abstractmethod
    def symbology(self) -> Symbology:
        """Symbology produced by this encoder"""
        pass

    @abstractmethod
    def encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        """
        Encode payload.

        Args:
            payload: Data to encode

        Returns:
            Success(Bitmap) or Failure(EncodingError) if the symbology
            rejects the payload
        """
        pass
