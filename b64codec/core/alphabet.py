"""Base64 alphabet and reverse lookup tables.

Both tables are built once at import time and never modified, so any number
of callers can read them concurrently.

The reverse table only covers the contiguous range DECODE_FIRST ('+') to
DECODE_LAST ('z'), which holds every alphabet character and the padding
character. Bytes outside that range are invalid without a table lookup.
"""

from typing import Tuple

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = ord('=')

DECODE_FIRST = ord('+')
DECODE_LAST = ord('z')

# Sentinels returned by symbol_value() for non-data bytes
INVALID = -1
PAD_VALUE = -2


def _build_reverse_table() -> Tuple[int, ...]:
    table = [INVALID] * (DECODE_LAST - DECODE_FIRST + 1)
    for value, char in enumerate(ALPHABET):
        table[char - DECODE_FIRST] = value
    table[PAD - DECODE_FIRST] = PAD_VALUE
    return tuple(table)


REVERSE_TABLE = _build_reverse_table()

assert len(ALPHABET) == 64
assert len(set(ALPHABET)) == 64


def symbol_value(byte: int) -> int:
    """Classify one input byte.

    Returns:
        The 6-bit value (0-63) for an alphabet character, PAD_VALUE for '=',
        or INVALID for anything else.
    """
    if byte < DECODE_FIRST or byte > DECODE_LAST:
        return INVALID
    return REVERSE_TABLE[byte - DECODE_FIRST]
