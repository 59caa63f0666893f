"""Tests for GenerateCode use case"""

import asyncio
import io
import logging

import pytest
from PIL import Image
from returns.result import Failure, Success

from barcode_server.application import GenerateCodeImpl
from barcode_server.domain import (
    EncodingError,
    GenerateCodeError,
    InvalidSizeFormat,
    InvalidSizeValue,
    ModuleBitmap,
    ScalingError,
    SerializationError,
    Size,
    Symbology,
    UnsupportedSymbology,
)
from barcode_server.port.input import GenerateCodeRequest


def run(use_case: GenerateCodeImpl, symbology: str, data: str, size: str):
    return asyncio.run(use_case.execute(GenerateCodeRequest(symbology=symbology, data=data, size=size)))


class TestGenerateCodeSuccess:
    """Tests for successful rendering"""

    def test_png_of_requested_size(self, use_case: GenerateCodeImpl):
        """Response carries a PNG of exactly the requested size"""
        result = run(use_case, "code128", "abc", "300x150")

        assert isinstance(result, Success)
        response = result.unwrap()
        assert response.symbology == Symbology.CODE128
        assert response.size == Size(300, 150)
        assert response.content_type == "image/png"

        img = Image.open(io.BytesIO(response.image))
        assert img.size == (300, 150)
        assert img.mode == "RGB"

    def test_pixels_follow_modules(self, use_case: GenerateCodeImpl):
        """Stub bitmap 1101 scaled to 8x2: two pixels per module"""
        response = run(use_case, "ean", "x", "8x2").unwrap()

        img = Image.open(io.BytesIO(response.image))
        colors = [img.getpixel((x, 1)) for x in range(8)]
        black, white = (0, 0, 0), (255, 255, 255)
        assert colors == [black, black, black, black, white, white, black, black]

    def test_payload_forwarded(self, use_case: GenerateCodeImpl, stub_encoders):
        run(use_case, "aztec", "Hello", "10x10")
        assert stub_encoders[Symbology.AZTEC].payloads == ["Hello"]

    def test_deterministic(self, use_case: GenerateCodeImpl):
        first = run(use_case, "qr", "HELLO", "64x64").unwrap().image
        second = run(use_case, "qr", "HELLO", "64x64").unwrap().image
        assert first == second

    def test_debug_log_reports_payload_size(self, use_case: GenerateCodeImpl, caplog: pytest.LogCaptureFixture):
        """Successful renders are logged with the UTF-8 payload length"""
        caplog.set_level(logging.DEBUG, logger="barcode_server")

        run(use_case, "qr", "héllo", "10x10")

        assert any("(6 payload bytes)" in record.getMessage() for record in caplog.records)


class TestGenerateCodeFailures:
    """Tests for failure classification and ordering"""

    def test_unsupported_symbology(self, use_case: GenerateCodeImpl, stub_encoders):
        """Unknown symbology fails before anything is encoded"""
        result = run(use_case, "foo", "x", "not-a-size")

        assert isinstance(result, Failure)
        assert isinstance(result.failure(), UnsupportedSymbology)
        assert all(not encoder.payloads for encoder in stub_encoders.values())

    def test_encoding_checked_before_size(self, use_case: GenerateCodeImpl):
        """Encoder rejection wins over a bad size"""
        result = run(use_case, "ean", "reject", "0x50")
        assert isinstance(result.failure(), EncodingError)

    def test_invalid_size_format(self, use_case: GenerateCodeImpl):
        result = run(use_case, "qr", "x", "100")
        assert isinstance(result.failure(), InvalidSizeFormat)

    def test_invalid_size_value(self, use_case: GenerateCodeImpl):
        result = run(use_case, "qr", "x", "0x50")
        assert isinstance(result.failure(), InvalidSizeValue)

    def test_max_dimension(self, use_case: GenerateCodeImpl):
        """Dimensions above the configured maximum are rejected"""
        assert isinstance(run(use_case, "qr", "x", "1000x1000"), Success)
        assert isinstance(run(use_case, "qr", "x", "1001x10").failure(), InvalidSizeValue)

    def test_empty_bitmap(self, use_case: GenerateCodeImpl, stub_encoders):
        """A bitmap without pixels fails at scaling"""
        stub_encoders[Symbology.CODE39].bitmap = ModuleBitmap([])

        result = run(use_case, "code39", "x", "10x10")
        assert isinstance(result.failure(), ScalingError)

    def test_serialization_failure(self, dispatcher, failing_serializer):
        use_case = GenerateCodeImpl(dispatcher=dispatcher, serializer=failing_serializer)

        result = run(use_case, "qr", "x", "10x10")
        assert isinstance(result.failure(), SerializationError)

    def test_unexpected_exception(self, use_case: GenerateCodeImpl, stub_encoders, monkeypatch: pytest.MonkeyPatch):
        """Exceptions escaping a stage become a generic GenerateCodeError"""

        def explode(payload: str):
            raise RuntimeError("boom")

        monkeypatch.setattr(stub_encoders[Symbology.QR], "encode", explode)
        result = run(use_case, "qr", "x", "10x10")

        assert isinstance(result, Failure)
        error = result.failure()
        assert type(error) is GenerateCodeError
        assert "boom" in str(error)
