"""Color-depth normalization

Converts any bitmap (module grid, 1-bit, paletted or truecolor image) into a
self-contained 24-bit RGB buffer with no palette indirection.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from barcode_server.domain.bitmap import Bitmap, Rgb

BYTES_PER_PIXEL = 3


@dataclass(frozen=True)
class TruecolorBuffer:
    """
    Packed 24-bit RGB pixels.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Row-major RGB bytes, ``width * height * 3`` long
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"TruecolorBuffer dimensions must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixels) != expected:
            raise ValueError(f"TruecolorBuffer expects {expected} bytes, got {len(self.pixels)}")

    def pixel(self, x: int, y: int) -> Rgb:
        offset = (y * self.width + x) * BYTES_PER_PIXEL
        r, g, b = self.pixels[offset : offset + BYTES_PER_PIXEL]
        return (r, g, b)


def to_truecolor(bitmap: Bitmap) -> TruecolorBuffer:
    """
    Resolve every pixel of a bitmap to an explicit RGB triple.

    Args:
        bitmap: Any non-degenerate bitmap

    Returns:
        TruecolorBuffer of identical dimensions
    """
    chunks: List[bytes] = []
    previous: Optional[Sequence[Rgb]] = None
    packed = b""

    for y in range(bitmap.height):
        row = bitmap.row(y)
        # Scaled bitmaps hand out the same row object for repeated source rows
        if row is not previous:
            packed = bytes(channel for color in row for channel in color)
            previous = row
        chunks.append(packed)

    return TruecolorBuffer(width=bitmap.width, height=bitmap.height, pixels=b"".join(chunks))
