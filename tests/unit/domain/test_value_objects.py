"""Tests for domain value objects"""

import pytest

from barcode_server.domain import EncodeJob, Size, Symbology


class TestSymbology:
    """Tests for Symbology enum"""

    def test_identifiers(self):
        """Each symbology has its path identifier as value"""
        assert [s.value for s in Symbology] == ["ean", "code39", "code93", "code128", "aztec", "qr"]

    def test_str_representation(self):
        """str() returns the identifier"""
        assert str(Symbology.CODE128) == "code128"

    @pytest.mark.parametrize("identifier", ["ean", "code39", "code93", "code128", "aztec", "qr"])
    def test_from_identifier_known(self, identifier: str):
        """Known identifiers resolve to their symbology"""
        symbology = Symbology.from_identifier(identifier)
        assert symbology is not None
        assert symbology.value == identifier

    @pytest.mark.parametrize("identifier", ["foo", "QR", "Ean", "code 39", "", " qr"])
    def test_from_identifier_unknown(self, identifier: str):
        """Lookup is exact and case sensitive"""
        assert Symbology.from_identifier(identifier) is None


class TestSize:
    """Tests for Size"""

    def test_create_valid_size(self):
        """Can create Size with positive dimensions"""
        size = Size(width=300, height=150)
        assert size.width == 300
        assert size.height == 150

    def test_str_representation(self):
        """str() returns <width>x<height>"""
        assert str(Size(width=1, height=2)) == "1x2"

    def test_immutable(self):
        """Size is immutable"""
        size = Size(width=1, height=1)
        with pytest.raises(Exception):  # FrozenInstanceError
            size.width = 2

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 5), (5, -1)])
    def test_non_positive_raises_error(self, width: int, height: int):
        """Zero or negative dimensions raise ValueError"""
        with pytest.raises(ValueError, match="must be positive"):
            Size(width=width, height=height)


class TestEncodeJob:
    """Tests for EncodeJob"""

    def test_payload_bytes_is_utf8(self):
        """payload_bytes encodes the payload as UTF-8"""
        job = EncodeJob(symbology=Symbology.QR, payload="héllo", size=Size(10, 10))
        assert job.payload_bytes == "héllo".encode("utf-8")

    def test_immutable(self):
        """EncodeJob is immutable"""
        job = EncodeJob(symbology=Symbology.QR, payload="x", size=Size(10, 10))
        with pytest.raises(Exception):
            job.payload = "y"
