"""Adapter layer - Infrastructure implementations"""

from barcode_server.adapter.output import (
    AztecEncoderImpl,
    Code39EncoderImpl,
    Code93EncoderImpl,
    Code128EncoderImpl,
    EanEncoderImpl,
    PngSerializerImpl,
    QrEncoderImpl,
)

__all__ = [
    "EanEncoderImpl",
    "Code39EncoderImpl",
    "Code93EncoderImpl",
    "Code128EncoderImpl",
    "AztecEncoderImpl",
    "QrEncoderImpl",
    "PngSerializerImpl",
]
