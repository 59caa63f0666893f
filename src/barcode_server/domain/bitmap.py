"""Bitmap abstractions produced by symbol encoders

Encoders emit pixels in different models (module grids, 1-bit images,
paletted images). Everything downstream only relies on the ability of a
bitmap to report a color for a coordinate, so the scaler and the color-depth
normalizer stay encoder-agnostic.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Tuple

from PIL import Image

Rgb = Tuple[int, int, int]

BLACK: Rgb = (0, 0, 0)
WHITE: Rgb = (255, 255, 255)


class Bitmap(ABC):
    """Immutable raster with a color-at-coordinate accessor"""

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @abstractmethod
    def color_at(self, x: int, y: int) -> Rgb:
        """
        Color of the pixel at (x, y).

        Args:
            x: Column, 0 <= x < width
            y: Row, 0 <= y < height

        Returns:
            RGB triple
        """
        pass

    def row(self, y: int) -> Sequence[Rgb]:
        """Colors of row y, left to right"""
        return tuple(self.color_at(x, y) for x in range(self.width))

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


class ModuleBitmap(Bitmap):
    """
    Monochrome module grid.

    Each cell is one module: dark modules render black, light modules white.
    """

    def __init__(self, rows: Iterable[Iterable[bool]]):
        self._rows: Tuple[Tuple[bool, ...], ...] = tuple(tuple(bool(cell) for cell in row) for row in rows)
        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise ValueError("Module grid rows must all have the same length")

    @classmethod
    def from_bits(cls, bits: str) -> "ModuleBitmap":
        """Build a one-row bitmap from a string of '1' (bar) and '0' (space)"""
        invalid = set(bits) - {"0", "1"}
        if invalid:
            raise ValueError(f"Module string contains invalid characters: {sorted(invalid)}")
        return cls([[bit == "1" for bit in bits]])

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def height(self) -> int:
        return len(self._rows)

    def is_dark(self, x: int, y: int) -> bool:
        return self._rows[y][x]

    def color_at(self, x: int, y: int) -> Rgb:
        return BLACK if self._rows[y][x] else WHITE

    def row(self, y: int) -> Sequence[Rgb]:
        return tuple(BLACK if dark else WHITE for dark in self._rows[y])

    def __repr__(self) -> str:
        return f"ModuleBitmap({self.width}x{self.height})"


class ImageBitmap(Bitmap):
    """
    Bitmap backed by a Pillow image.

    Supports bilevel (``1``), grayscale (``L``), paletted (``P``), ``RGB``
    and ``RGBA`` images. Alpha is composited over white.
    """

    SUPPORTED_MODES = frozenset({"1", "L", "P", "RGB", "RGBA"})

    def __init__(self, image: Image.Image):
        if image.mode not in self.SUPPORTED_MODES:
            raise ValueError(f"Unsupported image mode: {image.mode}")
        # Private copy, callers may keep drawing on theirs
        self._image = image.copy()
        self._pixels = self._image.load()
        self._palette: Sequence[int] = []
        if image.mode == "P":
            self._palette = self._image.getpalette() or []

    @property
    def mode(self) -> str:
        return self._image.mode

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def color_at(self, x: int, y: int) -> Rgb:
        value = self._pixels[x, y]
        mode = self._image.mode

        if mode in ("1", "L"):
            return (value, value, value)

        if mode == "P":
            offset = value * 3
            if offset + 3 > len(self._palette):
                raise ValueError(f"Palette index {value} out of range")
            r, g, b = self._palette[offset : offset + 3]
            return (r, g, b)

        if mode == "RGBA":
            r, g, b, a = value
            return (
                (r * a + 255 * (255 - a)) // 255,
                (g * a + 255 * (255 - a)) // 255,
                (b * a + 255 * (255 - a)) // 255,
            )

        r, g, b = value
        return (r, g, b)

    def __repr__(self) -> str:
        return f"ImageBitmap({self.width}x{self.height}, mode={self.mode})"
