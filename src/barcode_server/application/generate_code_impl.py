"""GenerateCode use case implementation"""

import asyncio
from typing import Optional

from returns.result import Failure, Result, Success

from barcode_server.application.encoder_dispatcher import EncoderDispatcher
from barcode_server.domain import (
    EncodeJob,
    GenerateCodeError,
    Symbology,
    UnsupportedSymbology,
    parse_size,
    scale_to,
    to_truecolor,
)
from barcode_server.logging import get_logger
from barcode_server.port.input import GenerateCode, GenerateCodeRequest, GenerateCodeResponse
from barcode_server.port.output import ImageSerializer

logger = get_logger(__name__)


class GenerateCodeImpl(GenerateCode):
    """
    Implementation of GenerateCode use case.

    Runs the encode, scale, normalize and serialize stages. Rendering is
    CPU bound, so ``execute`` runs it in a worker thread and leaves the event
    loop free for other requests. A cancelled request does not interrupt a
    render already running in its thread.
    """

    def __init__(
        self,
        dispatcher: EncoderDispatcher,
        serializer: ImageSerializer,
        max_dimension: Optional[int] = None,
    ):
        self.dispatcher = dispatcher
        self.serializer = serializer
        self.max_dimension = max_dimension

    async def execute(self, request: GenerateCodeRequest) -> Result[GenerateCodeResponse, GenerateCodeError]:
        return await asyncio.to_thread(self.render, request)

    def render(self, request: GenerateCodeRequest) -> Result[GenerateCodeResponse, GenerateCodeError]:
        """
        Run the pipeline synchronously.

        Flow:
        1. Resolve symbology
        2. Encode payload to a natural-size bitmap
        3. Parse size specifier
        4. Scale to requested size
        5. Normalize to 24-bit RGB
        6. Serialize
        """
        try:
            symbology = Symbology.from_identifier(request.symbology)
            if symbology is None:
                return self._fail(request, UnsupportedSymbology(request.symbology))

            encode_result = self.dispatcher.encode(symbology, request.data)
            if isinstance(encode_result, Failure):
                return self._fail(request, encode_result.failure())
            bitmap = encode_result.unwrap()

            size_result = parse_size(request.size, self.max_dimension)
            if isinstance(size_result, Failure):
                return self._fail(request, size_result.failure())

            job = EncodeJob(symbology=symbology, payload=request.data, size=size_result.unwrap())

            scale_result = scale_to(bitmap, job.size)
            if isinstance(scale_result, Failure):
                return self._fail(request, scale_result.failure())

            buffer = to_truecolor(scale_result.unwrap())

            serialize_result = self.serializer.serialize(buffer)
            if isinstance(serialize_result, Failure):
                return self._fail(request, serialize_result.failure())

            logger.debug(
                "Rendered %s %s from %dx%d natural bitmap (%d payload bytes)",
                job.symbology,
                job.size,
                bitmap.width,
                bitmap.height,
                len(job.payload_bytes),
            )

            return Success(
                GenerateCodeResponse(
                    symbology=job.symbology,
                    size=job.size,
                    image=serialize_result.unwrap(),
                    content_type=self.serializer.format.media_type,
                )
            )

        except Exception as e:
            logger.exception("Unexpected error rendering %s/%s", request.symbology, request.size)
            return Failure(GenerateCodeError(f"Unexpected error: {e}"))

    @staticmethod
    def _fail(request: GenerateCodeRequest, error: GenerateCodeError) -> Failure:
        logger.warning(
            "Generate %s/%s failed with %s: %s",
            request.symbology,
            request.size,
            type(error).__name__,
            error,
        )
        return Failure(error)
