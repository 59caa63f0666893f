"""Informational endpoints"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from barcode_server.domain import Symbology

router = APIRouter(tags=["Info"])

USAGE = (
    "Barcode Server\n"
    "A library to generate barcodes & qrcodes using http requests\n\n"
    "GET /generate/<mode>/<size>?data=<data>\n\n"
    f"mode  - barcode mode (one of: {', '.join(s.value for s in Symbology)})\n"
    "size  - output image size as <width>x<height>\n"
    "data  - data to encode"
)


@router.get("/", response_class=PlainTextResponse, summary="Usage")
async def index() -> PlainTextResponse:
    """Usage text"""
    return PlainTextResponse(content=USAGE)


@router.get("/health", response_class=PlainTextResponse, summary="Health check")
async def health_check() -> PlainTextResponse:
    """Health check endpoint"""
    return PlainTextResponse(content="OK")
