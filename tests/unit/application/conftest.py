"""Common test fixtures for application tests"""

from typing import Optional

import pytest
from returns.result import Failure, Result, Success

from barcode_server.adapter import PngSerializerImpl
from barcode_server.application import EncoderDispatcher, GenerateCodeImpl
from barcode_server.domain import (
    Bitmap,
    EncodingError,
    ModuleBitmap,
    SerializationError,
    Symbology,
    TruecolorBuffer,
)
from barcode_server.port.output import ImageFormat, ImageSerializer, SymbolEncoder


class StubEncoder(SymbolEncoder):
    """Encoder returning a fixed bitmap and recording payloads"""

    def __init__(self, symbology: Symbology, bitmap: Optional[Bitmap] = None):
        self._symbology = symbology
        self.bitmap = bitmap if bitmap is not None else ModuleBitmap.from_bits("1101")
        self.payloads: list[str] = []

    @property
    def symbology(self) -> Symbology:
        return self._symbology

    def encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        self.payloads.append(payload)
        if payload == "reject":
            return Failure(EncodingError(f"{self._symbology}: rejected", symbology=self._symbology.value))
        return Success(self.bitmap)


class FailingSerializer(ImageSerializer):
    """Serializer that always fails"""

    @property
    def format(self) -> ImageFormat:
        return ImageFormat.PNG

    def serialize(self, buffer: TruecolorBuffer) -> Result[bytes, SerializationError]:
        return Failure(SerializationError("Failed to write PNG image: no space left"))


@pytest.fixture
def stub_encoders() -> dict[Symbology, StubEncoder]:
    return {symbology: StubEncoder(symbology) for symbology in Symbology}


@pytest.fixture
def dispatcher(stub_encoders: dict[Symbology, StubEncoder]) -> EncoderDispatcher:
    return EncoderDispatcher(stub_encoders.values())


@pytest.fixture
def use_case(dispatcher: EncoderDispatcher) -> GenerateCodeImpl:
    return GenerateCodeImpl(dispatcher=dispatcher, serializer=PngSerializerImpl(), max_dimension=1000)


@pytest.fixture
def stub_encoder_class() -> type[StubEncoder]:
    return StubEncoder


@pytest.fixture
def failing_serializer() -> FailingSerializer:
    return FailingSerializer()
