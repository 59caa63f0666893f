"""Full-ASCII extension shared by Code 39 and Code 93

Both symbologies natively encode only 0-9, A-Z, space and a handful of
punctuation. Full-ASCII mode represents every other ASCII character as a
shift symbol ($, %, / or +) followed by a letter.
"""

from typing import Dict, List

SHIFT_SYMBOLS = "$%/+"


def _build_table() -> Dict[str, str]:
    table: Dict[str, str] = {}
    for code in range(128):
        char = chr(code)
        if char.isascii() and (char.isupper() or char.isdigit() or char in " -."):
            table[char] = char
        elif code == 0:
            table[char] = "%U"
        elif code <= 26:
            table[char] = "$" + chr(ord("A") + code - 1)
        elif code <= 31:
            table[char] = "%" + chr(ord("A") + code - 27)
        elif code <= 44:
            table[char] = "/" + chr(ord("A") + code - 33)
        elif char == "/":
            table[char] = "/O"
        elif char == ":":
            table[char] = "/Z"
        elif code <= 63:
            table[char] = "%" + chr(ord("F") + code - 59)
        elif char == "@":
            table[char] = "%V"
        elif code <= 95:
            table[char] = "%" + chr(ord("K") + code - 91)
        elif char == "`":
            table[char] = "%W"
        elif code <= 122:
            table[char] = "+" + char.upper()
        else:
            table[char] = "%" + chr(ord("P") + code - 123)
    return table


FULL_ASCII: Dict[str, str] = _build_table()


def expand_full_ascii(text: str) -> List[str]:
    """
    Expand text into full-ASCII symbol groups.

    Args:
        text: ASCII text

    Returns:
        One entry per input character: either the character itself or a
        two-character shift sequence such as ``"+A"`` for ``"a"``

    Raises:
        ValueError: If text contains a non-ASCII character
    """
    groups = []
    for position, char in enumerate(text):
        group = FULL_ASCII.get(char)
        if group is None:
            raise ValueError(f"character {char!r} at position {position} is not ASCII")
        groups.append(group)
    return groups
