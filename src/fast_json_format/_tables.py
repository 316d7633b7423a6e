"""Character classification tables shared by every formatting call."""

from __future__ import annotations

from typing import Final

# Classification only covers the ASCII range; higher code points are always
# part of an atom or a string body.
ASCII_LIMIT: Final = 128

STRUCTURAL_CHARS: Final = '",:[]{}'
WHITESPACE_CHARS: Final = " \t\n\r"

HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

HIGH_SURROGATE_START: Final = 0xD800
LOW_SURROGATE_START: Final = 0xDC00
LOW_SURROGATE_END: Final = 0xDFFF


def _build_table(chars: str) -> bytes:
    """Builds a 128-entry flag table with 1 at the code of each char."""
    table = bytearray(ASCII_LIMIT)
    for char in chars:
        table[ord(char)] = 1
    return bytes(table)


# Built once at import and never mutated
STRUCTURAL: Final = _build_table(STRUCTURAL_CHARS)
WHITESPACE: Final = _build_table(WHITESPACE_CHARS)


def skip_whitespace(text: str, pos: int, length: int) -> int:
    """Returns the first index at or after pos that is not whitespace."""
    while pos < length:
        code = ord(text[pos])
        if code >= ASCII_LIMIT or not WHITESPACE[code]:
            break
        pos += 1
    return pos


def parse_hex4(text: str, pos: int) -> int:
    """Decodes four hex digits starting at pos.

    Args:
        text: Source text
        pos: Index of the first of the four digits

    Returns:
        The 16-bit value, or -1 when fewer than four characters remain or any
        of them is not a hex digit
    """
    end = pos + 4
    if end > len(text):
        return -1
    digits = text[pos:end]
    for char in digits:
        if char not in HEX_DIGITS:
            return -1
    return int(digits, 16)


def is_high_surrogate(code: int) -> bool:
    return HIGH_SURROGATE_START <= code < LOW_SURROGATE_START


def is_low_surrogate(code: int) -> bool:
    return LOW_SURROGATE_START <= code <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    """Joins a UTF-16 surrogate pair into a single code point."""
    return 0x10000 + ((high - HIGH_SURROGATE_START) << 10) + (
        low - LOW_SURROGATE_START
    )
