"""Output adapters - Infrastructure implementations of output ports"""

from barcode_server.adapter.output.encoders import (
    AztecEncoderImpl,
    Code39EncoderImpl,
    Code93EncoderImpl,
    Code128EncoderImpl,
    EanEncoderImpl,
    QrEncoderImpl,
)
from barcode_server.adapter.output.png import PngSerializerImpl

__all__ = [
    "EanEncoderImpl",
    "Code39EncoderImpl",
    "Code93EncoderImpl",
    "Code128EncoderImpl",
    "AztecEncoderImpl",
    "QrEncoderImpl",
    "PngSerializerImpl",
]
