"""Common behavior of the symbol encoder adapters"""

from abc import abstractmethod

from returns.result import Failure, Result

from barcode_server.domain import Bitmap, EncodingError
from barcode_server.logging import get_logger
from barcode_server.port.output import SymbolEncoder

logger = get_logger(__name__)


class BaseSymbolEncoder(SymbolEncoder):
    """
    Symbol encoder that rejects empty payloads and wraps library errors.

    Subclasses implement ``_encode`` and may return their own Failure values
    for rule violations; any exception raised by the underlying encoder
    library is converted into an EncodingError carrying its message.
    """

    def encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        if not payload:
            return Failure(self.error("content must not be empty"))

        try:
            return self._encode(payload)
        except Exception as e:
            logger.debug("%s encoder raised %s: %s", self.symbology, type(e).__name__, e)
            return Failure(self.error(f"encoding failed: {e}"))

    def error(self, message: str) -> EncodingError:
        """EncodingError prefixed with the symbology identifier"""
        return EncodingError(f"{self.symbology}: {message}", symbology=self.symbology.value)

    @abstractmethod
    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        """Encode a non-empty payload"""
        pass
