"""1-D symbol encoders using the python-barcode library

python-barcode computes the bar patterns; these adapters add the payload rules
of each symbology and turn the module string returned by ``build()`` into a
one-pixel-high ModuleBitmap.
"""

from typing import Final

import barcode as pybarcode
from barcode.base import Barcode
from returns.result import Failure, Result, Success

from barcode_server.adapter.output.encoders.base import BaseSymbolEncoder
from barcode_server.adapter.output.encoders.full_ascii import expand_full_ascii
from barcode_server.domain import Bitmap, EncodingError, ModuleBitmap, Symbology

CODE128_MAX_LENGTH: Final[int] = 80


def _module_bitmap(code: Barcode) -> ModuleBitmap:
    """One-row bitmap from a python-barcode instance"""
    return ModuleBitmap.from_bits("".join(code.build()))


def gs1_check_digit(digits: str) -> int:
    """
    GS1 mod-10 check digit.

    Weights alternate 3, 1, 3, ... starting from the rightmost digit.
    """
    total = sum(int(digit) * (3 if i % 2 == 0 else 1) for i, digit in enumerate(reversed(digits)))
    return (10 - total % 10) % 10


class EanEncoderImpl(BaseSymbolEncoder):
    """
    EAN-8 / EAN-13 encoder.

    7 or 8 digits encode as EAN-8, 12 or 13 digits as EAN-13. When the check
    digit is omitted it is computed, when present it must match.
    """

    _variants = {7: "ean8", 12: "ean13"}

    @property
    def symbology(self) -> Symbology:
        return Symbology.EAN

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        if not (payload.isascii() and payload.isdigit()):
            return Failure(self.error("content must contain only digits"))

        length = len(payload)
        if length not in (7, 8, 12, 13):
            return Failure(self.error(f"invalid ean code data: expected 7, 8, 12 or 13 digits, got {length}"))

        data_length = 7 if length in (7, 8) else 12
        data = payload[:data_length]

        if length > data_length:
            expected = gs1_check_digit(data)
            if int(payload[-1]) != expected:
                return Failure(self.error(f"checksum mismatch: expected {expected}, got {payload[-1]}"))

        code_class = pybarcode.get_barcode_class(self._variants[data_length])
        return Success(_module_bitmap(code_class(data, writer=None)))


class Code39EncoderImpl(BaseSymbolEncoder):
    """Code 39 encoder, full-ASCII mode with mod-43 check character"""

    @property
    def symbology(self) -> Symbology:
        return Symbology.CODE39

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        try:
            extended = "".join(expand_full_ascii(payload))
        except ValueError as e:
            return Failure(self.error(str(e)))

        code_class = pybarcode.get_barcode_class("code39")
        return Success(_module_bitmap(code_class(extended, writer=None, add_checksum=True)))


class Code128EncoderImpl(BaseSymbolEncoder):
    """Code 128 encoder with automatic code set selection"""

    @property
    def symbology(self) -> Symbology:
        return Symbology.CODE128

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        if len(payload) > CODE128_MAX_LENGTH:
            return Failure(
                self.error(f"content length should be between 1 and {CODE128_MAX_LENGTH} characters")
            )

        if not payload.isascii():
            return Failure(self.error("content must contain only ASCII characters"))

        code_class = pybarcode.get_barcode_class("code128")
        return Success(_module_bitmap(code_class(payload, writer=None)))
