"""Input ports - Use case interfaces"""

from barcode_server.port.input.generate_code import (
    GenerateCode,
    GenerateCodeRequest,
    GenerateCodeResponse,
)

__all__ = [
    # Generate Code
    "GenerateCode",
    "GenerateCodeRequest",
    "GenerateCodeResponse",
]
