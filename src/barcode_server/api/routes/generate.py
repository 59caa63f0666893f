"""Code generation endpoint"""

from typing import Dict, Optional, Tuple, Type

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response
from returns.result import Failure

from barcode_server.api.dependencies import get_generate_code_use_case
from barcode_server.domain import (
    EncodingError,
    GenerateCodeError,
    InvalidSizeFormat,
    InvalidSizeValue,
    ScalingError,
    SerializationError,
    UnsupportedSymbology,
)
from barcode_server.port.input import GenerateCode, GenerateCodeRequest

router = APIRouter(tags=["Generate"])

NOT_FOUND_BODY = "404 page not found"

# Status and fixed body per error class; a None body sends the error message
ERROR_RESPONSES: Dict[Type[GenerateCodeError], Tuple[int, Optional[str]]] = {
    UnsupportedSymbology: (404, NOT_FOUND_BODY),
    EncodingError: (500, None),
    InvalidSizeFormat: (400, "invalid size"),
    InvalidSizeValue: (400, "invalid size parameters"),
    ScalingError: (500, None),
    SerializationError: (500, None),
}


def error_response(error: GenerateCodeError) -> PlainTextResponse:
    """Plain-text response for a pipeline failure"""
    for error_type in type(error).__mro__:
        if error_type in ERROR_RESPONSES:
            status_code, body = ERROR_RESPONSES[error_type]
            return PlainTextResponse(content=body if body is not None else str(error), status_code=status_code)

    return PlainTextResponse(content=str(error), status_code=500)


@router.get(
    "/generate/{symbology}/{size}",
    summary="Generate barcode",
    description="Render a barcode or 2-D code as a PNG of exactly the requested size",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "Barcode image"},
        400: {"content": {"text/plain": {}}, "description": "Invalid size"},
        404: {"content": {"text/plain": {}}, "description": "Unsupported symbology"},
        500: {"content": {"text/plain": {}}, "description": "Encoding or rendering failed"},
    },
)
async def generate(
    symbology: str,
    size: str,
    data: str = Query("", description="Data to encode"),
    generate_code_uc: GenerateCode = Depends(get_generate_code_use_case),
) -> Response:
    """
    Generate a barcode image.

    - **symbology**: one of ean, code39, code93, code128, aztec, qr
    - **size**: output size as ``<width>x<height>``, e.g. ``200x100``
    - **data**: payload to encode
    """
    result = await generate_code_uc.execute(GenerateCodeRequest(symbology=symbology, data=data, size=size))

    if isinstance(result, Failure):
        return error_response(result.failure())

    response = result.unwrap()
    return Response(content=response.image, media_type=response.content_type)
