"""Encoder dispatcher - maps each symbology to its encoder"""

from typing import Dict, Iterable

from returns.result import Result

from barcode_server.domain import Bitmap, EncodingError, Symbology
from barcode_server.port.output import SymbolEncoder


class EncoderDispatcher:
    """
    Closed table from Symbology to SymbolEncoder.

    The table must cover every Symbology exactly once; this is checked at
    construction so a missing encoder fails at startup rather than per request.
    """

    def __init__(self, encoders: Iterable[SymbolEncoder]):
        table: Dict[Symbology, SymbolEncoder] = {}
        for encoder in encoders:
            if encoder.symbology in table:
                raise ValueError(f"Duplicate encoder for symbology: {encoder.symbology}")
            table[encoder.symbology] = encoder

        missing = [s.value for s in Symbology if s not in table]
        if missing:
            raise ValueError(f"No encoder registered for: {', '.join(missing)}")

        self._encoders = table

    @property
    def symbologies(self) -> list[Symbology]:
        return list(self._encoders)

    def encoder_for(self, symbology: Symbology) -> SymbolEncoder:
        """Encoder registered for symbology"""
        return self._encoders[symbology]

    def encode(self, symbology: Symbology, payload: str) -> Result[Bitmap, EncodingError]:
        """
        Encode payload with the encoder of symbology.

        Args:
            symbology: Target symbology
            payload: Data to encode

        Returns:
            Success(Bitmap) at the symbology's natural size or Failure(EncodingError)
        """
        return self.encoder_for(symbology).encode(payload)
