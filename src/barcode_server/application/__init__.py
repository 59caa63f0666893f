"""Application layer - Use case implementations

This layer orchestrates domain objects and interacts with encoders and
serializers through ports.
"""

from barcode_server.application.encoder_dispatcher import EncoderDispatcher
from barcode_server.application.generate_code_impl import GenerateCodeImpl

__all__ = [
    "EncoderDispatcher",
    "GenerateCodeImpl",
]
