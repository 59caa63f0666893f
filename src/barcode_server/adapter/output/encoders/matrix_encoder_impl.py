"""2-D symbol encoders: QR (qrcode library) and Aztec (aztec_code_generator)"""

from typing import Any, Final

import qrcode
import qrcode.constants
import qrcode.image.pil
from aztec_code_generator import AztecCode
from qrcode.exceptions import DataOverflowError
from returns.result import Failure, Result, Success

from barcode_server.adapter.output.encoders.base import BaseSymbolEncoder
from barcode_server.domain import Bitmap, EncodingError, ImageBitmap, ModuleBitmap, Symbology

AZTEC_DEFAULT_EC_PERCENT: Final[int] = 33

QR_ERROR_CORRECTION = {
    "L": qrcode.constants.ERROR_CORRECT_L,  # 7%
    "M": qrcode.constants.ERROR_CORRECT_M,  # 15%
    "Q": qrcode.constants.ERROR_CORRECT_Q,  # 25%
    "H": qrcode.constants.ERROR_CORRECT_H,  # 30%
}


class QrEncoderImpl(BaseSymbolEncoder):
    """
    QR code encoder.

    Version and encoding mode (numeric, alphanumeric, byte) are chosen
    automatically by the qrcode library. The natural bitmap is the 1-bit
    image rendered with one pixel per module and no quiet zone.
    """

    def __init__(self, error_correction: str = "M"):
        if error_correction not in QR_ERROR_CORRECTION:
            raise ValueError(f"Invalid QR error correction level: {error_correction}")
        self.error_correction = error_correction

    @property
    def symbology(self) -> Symbology:
        return Symbology.QR

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        qr = qrcode.QRCode(
            version=None,  # Smallest version that fits
            error_correction=QR_ERROR_CORRECTION[self.error_correction],
            box_size=1,
            border=0,
        )
        qr.add_data(payload)

        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError):
            # qrcode 8.x reports overflow as "Invalid version (was 41, ...)"
            return Failure(self.error("content too long for a QR code"))

        img = qr.make_image(
            image_factory=qrcode.image.pil.PilImage,
            fill_color="black",
            back_color="white",
        )
        return Success(ImageBitmap(img.get_image()))


def _is_dark(cell: Any) -> bool:
    # Older aztec_code_generator releases store '#' / ' ' characters
    if isinstance(cell, str):
        return cell == "#"
    return bool(cell)


class AztecEncoderImpl(BaseSymbolEncoder):
    """
    Aztec code encoder.

    Layer count is chosen automatically. Payloads must be ISO-8859-1 text,
    which is the character set the encoder works in without ECI.
    """

    def __init__(self, ec_percent: int = AZTEC_DEFAULT_EC_PERCENT):
        if not 5 <= ec_percent <= 95:
            raise ValueError(f"Aztec error correction percentage must be between 5 and 95, got {ec_percent}")
        self.ec_percent = ec_percent

    @property
    def symbology(self) -> Symbology:
        return Symbology.AZTEC

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        try:
            payload.encode("iso-8859-1")
        except UnicodeEncodeError:
            return Failure(self.error("content must be ISO-8859-1 text"))

        code = AztecCode(payload, ec_percent=self.ec_percent)
        matrix = code.matrix

        if not matrix or not matrix[0]:
            return Failure(self.error("encoder produced an empty matrix"))

        return Success(ModuleBitmap([_is_dark(cell) for cell in row] for row in matrix))
