"""Symbol encoder adapters, one per symbology"""

from barcode_server.adapter.output.encoders.code93_encoder_impl import Code93EncoderImpl
from barcode_server.adapter.output.encoders.linear_encoder_impl import (
    Code39EncoderImpl,
    Code128EncoderImpl,
    EanEncoderImpl,
)
from barcode_server.adapter.output.encoders.matrix_encoder_impl import AztecEncoderImpl, QrEncoderImpl

__all__ = [
    "EanEncoderImpl",
    "Code39EncoderImpl",
    "Code93EncoderImpl",
    "Code128EncoderImpl",
    "AztecEncoderImpl",
    "QrEncoderImpl",
]
