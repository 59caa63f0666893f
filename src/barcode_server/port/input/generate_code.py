"""Generate code use case - Render a barcode image for a request"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from returns.result import Result

from barcode_server.domain import GenerateCodeError, Size, Symbology


@dataclass(frozen=True)
class GenerateCodeRequest:
    """
    Raw request parameters, as received at the HTTP boundary.

    Attributes:
        symbology: Symbology identifier (e.g. "qr")
        data: Payload to encode
        size: Size specifier of the form "<width>x<height>"
    """

    symbology: str
    data: str
    size: str


@dataclass(frozen=True)
class GenerateCodeResponse:
    """
    Rendered image.

    Attributes:
        symbology: Symbology that was encoded
        size: Dimensions of the image
        image: Serialized image bytes
        content_type: MIME type of ``image``
    """

    symbology: Symbology
    size: Size
    image: bytes
    content_type: str = "image/png"


class GenerateCode(ABC):
    """
    Use case: Render a barcode or 2-D code as an image.

    Flow (each step short-circuits on failure):
    1. Resolve symbology identifier
    2. Encode payload with the symbology's encoder
    3. Parse size specifier
    4. Scale bitmap to the requested size
    5. Normalize to 24-bit RGB
    6. Serialize to PNG
    """

    @abstractmethod
    async def execute(self, request: GenerateCodeRequest) -> Result[GenerateCodeResponse, GenerateCodeError]:
        """
        Execute the generate code use case.

        Args:
            request: Generate code request

        Returns:
            Success(GenerateCodeResponse) or
            Failure(GenerateCodeError) classified by failing stage
        """
        pass
