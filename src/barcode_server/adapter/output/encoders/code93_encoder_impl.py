"""Code 93 encoder

python-barcode has no Code 93 support, so the symbol table lives here. Every
symbol is 9 modules wide (three bars, three spaces). The message is framed by
the start/stop symbol, carries two check symbols (C and K) and ends with a
single termination bar.
"""

from typing import Final, List, Sequence, Tuple

from returns.result import Failure, Result, Success

from barcode_server.adapter.output.encoders.base import BaseSymbolEncoder
from barcode_server.adapter.output.encoders.full_ascii import SHIFT_SYMBOLS, expand_full_ascii
from barcode_server.domain import Bitmap, EncodingError, ModuleBitmap, Symbology

# Symbol values 0..42
CHARACTERS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

# Shift symbols ($) (%) (/) (+) follow the regular characters
SHIFT_VALUES: Final[dict] = {shift: len(CHARACTERS) + i for i, shift in enumerate(SHIFT_SYMBOLS)}

# Module patterns indexed by symbol value, most significant bit first
PATTERNS: Final[Tuple[int, ...]] = (
    0x114, 0x148, 0x144, 0x142, 0x128, 0x124, 0x122, 0x150, 0x112, 0x10A,
    0x1A8, 0x1A4, 0x1A2, 0x194, 0x192, 0x18A, 0x168, 0x164, 0x162, 0x134,
    0x11A, 0x158, 0x14C, 0x146, 0x12C, 0x116, 0x1B4, 0x1B2, 0x1AC, 0x1A6,
    0x196, 0x19A, 0x16C, 0x166, 0x136, 0x13A, 0x12E, 0x1D4, 0x1D2, 0x1CA,
    0x16E, 0x176, 0x1AE, 0x126, 0x1DA, 0x1D6, 0x132,
)  # fmt: skip

START_STOP: Final[int] = 0x15E
TERMINATION_BAR: Final[str] = "1"
MODULUS: Final[int] = 47
C_WEIGHT_LIMIT: Final[int] = 20
K_WEIGHT_LIMIT: Final[int] = 15


def symbol_values(text: str) -> List[int]:
    """
    Symbol values for text in full-ASCII mode.

    Raises:
        ValueError: If text contains a non-ASCII character
    """
    values = []
    for group in expand_full_ascii(text):
        if len(group) == 2:
            values.append(SHIFT_VALUES[group[0]])
            values.append(CHARACTERS.index(group[1]))
        else:
            values.append(CHARACTERS.index(group))
    return values


def check_value(values: Sequence[int], weight_limit: int) -> int:
    """Weighted mod-47 check value; weights run 1..weight_limit from the right"""
    total = sum((i % weight_limit + 1) * value for i, value in enumerate(reversed(values)))
    return total % MODULUS


def _pattern(bits: int) -> str:
    return format(bits, "09b")


def modules(text: str) -> str:
    """Complete module string ('1' bar, '0' space) for text"""
    values = symbol_values(text)
    values.append(check_value(values, C_WEIGHT_LIMIT))
    values.append(check_value(values, K_WEIGHT_LIMIT))

    body = "".join(_pattern(PATTERNS[value]) for value in values)
    return _pattern(START_STOP) + body + _pattern(START_STOP) + TERMINATION_BAR


class Code93EncoderImpl(BaseSymbolEncoder):
    """Code 93 encoder, full-ASCII mode with C and K check symbols"""

    @property
    def symbology(self) -> Symbology:
        return Symbology.CODE93

    def _encode(self, payload: str) -> Result[Bitmap, EncodingError]:
        try:
            bits = modules(payload)
        except ValueError as e:
            return Failure(self.error(str(e)))

        return Success(ModuleBitmap.from_bits(bits))
