"""Tests for EncoderDispatcher"""

import pytest
from returns.result import Failure

from barcode_server.application import EncoderDispatcher
from barcode_server.domain import Symbology


class TestEncoderDispatcher:
    """Tests for EncoderDispatcher"""

    def test_covers_every_symbology(self, dispatcher: EncoderDispatcher):
        assert set(dispatcher.symbologies) == set(Symbology)

    def test_routes_to_encoder(self, dispatcher: EncoderDispatcher, stub_encoders):
        """encode() delegates to the encoder of the symbology"""
        dispatcher.encode(Symbology.CODE93, "ABC")

        assert stub_encoders[Symbology.CODE93].payloads == ["ABC"]
        assert stub_encoders[Symbology.QR].payloads == []

    def test_passes_failures_through(self, dispatcher: EncoderDispatcher):
        result = dispatcher.encode(Symbology.EAN, "reject")
        assert isinstance(result, Failure)
        assert str(result.failure()) == "ean: rejected"

    def test_encoder_for(self, dispatcher: EncoderDispatcher, stub_encoders):
        assert dispatcher.encoder_for(Symbology.AZTEC) is stub_encoders[Symbology.AZTEC]

    def test_missing_encoder_raises_error(self, stub_encoder_class):
        """Every symbology needs an encoder"""
        encoders = [stub_encoder_class(s) for s in Symbology if s != Symbology.AZTEC]
        with pytest.raises(ValueError, match="No encoder registered for: aztec"):
            EncoderDispatcher(encoders)

    def test_duplicate_encoder_raises_error(self, stub_encoder_class):
        encoders = [stub_encoder_class(s) for s in Symbology] + [stub_encoder_class(Symbology.QR)]
        with pytest.raises(ValueError, match="Duplicate encoder for symbology: qr"):
            EncoderDispatcher(encoders)
