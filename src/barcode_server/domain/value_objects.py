"""Value objects for the domain layer"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional


class Symbology(str, Enum):
    """
    Barcode symbologies supported by the server.

    The value is the identifier used in the ``/generate/{symbology}`` path
    segment. Lookup is exact and case sensitive.
    """

    EAN: Final[str] = "ean"
    CODE39: Final[str] = "code39"
    CODE93: Final[str] = "code93"
    CODE128: Final[str] = "code128"
    AZTEC: Final[str] = "aztec"
    QR: Final[str] = "qr"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["Symbology"]:
        """Return the symbology for an exact identifier, or None"""
        for symbology in cls:
            if symbology.value == identifier:
                return symbology
        return None


@dataclass(frozen=True)
class Size:
    """Target pixel dimensions of a rendered code"""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Size must be positive, got {self.width}x{self.height}")

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class EncodeJob:
    """
    A single request to render a code.

    Attributes:
        symbology: Symbology to encode with
        payload: Data to encode, as received from the caller
        size: Exact output dimensions
    """

    symbology: Symbology
    payload: str
    size: Size

    @property
    def payload_bytes(self) -> bytes:
        """Payload as UTF-8 bytes"""
        return self.payload.encode("utf-8")
