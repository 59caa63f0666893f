"""Size parsing and nearest-neighbour scaling

Barcode modules must stay sharp after resizing, so scaling maps every target
pixel back to exactly one source pixel:

    source_x = target_x * source_width // target_width
    source_y = target_y * source_height // target_height

No smoothing or interpolation is ever applied.
"""

import re
from typing import Dict, Optional, Sequence, Tuple

from returns.result import Failure, Result, Success

from barcode_server.domain.bitmap import Bitmap, Rgb
from barcode_server.domain.errors import InvalidSizeFormat, InvalidSizeValue, ScalingError
from barcode_server.domain.value_objects import Size

SIZE_SEPARATOR = "x"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_size(
    specifier: str, max_dimension: Optional[int] = None
) -> Result[Size, InvalidSizeFormat | InvalidSizeValue]:
    """
    Parse a ``<width>x<height>`` size specifier.

    Args:
        specifier: Size string, e.g. ``"200x100"``
        max_dimension: Optional upper bound for each dimension

    Returns:
        Success(Size), Failure(InvalidSizeFormat) when the string is not two
        decimal integers separated by ``x``, or Failure(InvalidSizeValue) when
        a dimension is not positive or exceeds ``max_dimension``
    """
    parts = specifier.split(SIZE_SEPARATOR)
    if len(parts) != 2 or not all(_INTEGER.fullmatch(part) for part in parts):
        return Failure(InvalidSizeFormat(specifier))

    width, height = (int(part) for part in parts)

    if width <= 0 or height <= 0:
        return Failure(InvalidSizeValue(specifier, "dimensions must be positive"))

    if max_dimension is not None and (width > max_dimension or height > max_dimension):
        return Failure(InvalidSizeValue(specifier, f"dimensions must not exceed {max_dimension}"))

    return Success(Size(width=width, height=height))


class ScaledBitmap(Bitmap):
    """Nearest-neighbour view of a source bitmap at new dimensions"""

    def __init__(self, source: Bitmap, width: int, height: int):
        self._source = source
        self._x_map: Tuple[int, ...] = tuple(x * source.width // width for x in range(width))
        self._y_map: Tuple[int, ...] = tuple(y * source.height // height for y in range(height))
        # Target rows sampling the same source row share one tuple
        self._rows: Dict[int, Tuple[Rgb, ...]] = {}

    @property
    def source(self) -> Bitmap:
        return self._source

    @property
    def width(self) -> int:
        return len(self._x_map)

    @property
    def height(self) -> int:
        return len(self._y_map)

    def color_at(self, x: int, y: int) -> Rgb:
        return self._source.color_at(self._x_map[x], self._y_map[y])

    def row(self, y: int) -> Sequence[Rgb]:
        source_y = self._y_map[y]
        cached = self._rows.get(source_y)
        if cached is None:
            source_row = self._source.row(source_y)
            cached = tuple(source_row[x] for x in self._x_map)
            self._rows[source_y] = cached
        return cached

    def __repr__(self) -> str:
        return f"ScaledBitmap({self.width}x{self.height} <- {self._source!r})"


def scale(bitmap: Bitmap, width: int, height: int) -> Result[Bitmap, ScalingError]:
    """
    Resize a bitmap to exactly ``width`` x ``height`` pixels.

    Args:
        bitmap: Source bitmap at its natural size
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        Success with the scaled bitmap, or Failure(ScalingError) if a target
        dimension is not positive or the source has no pixels
    """
    if width <= 0 or height <= 0:
        return Failure(ScalingError(f"can not scale barcode to {width}x{height}"))

    if bitmap.is_degenerate:
        return Failure(
            ScalingError(f"can not scale an empty barcode ({bitmap.width}x{bitmap.height})")
        )

    return Success(ScaledBitmap(bitmap, width, height))


def scale_to(bitmap: Bitmap, size: Size) -> Result[Bitmap, ScalingError]:
    """Scale a bitmap to a validated Size"""
    return scale(bitmap, size.width, size.height)
