"""Base64 decoder.

Input is consumed in quanta of four symbols, each producing three bytes.
Padding ends the data: '=' as the third symbol of a quantum yields one final
byte, '=' as the fourth yields two.

Two policies are supported, and each call applies exactly one of them:

  PERMISSIVE (default)
    Bytes outside the alphabet are skipped, so whitespace and line breaks
    inside the text are harmless. Misplaced padding stops decoding. A
    trailing group of 1-3 symbols without padding is dropped. decode() never
    raises for content.

  STRICT
    Any byte outside the alphabet, misplaced padding, data after the final
    padding, or an unpadded trailing group raises MalformedInput.
"""

from enum import Enum
from typing import Sequence, Union

from .alphabet import INVALID, PAD, PAD_VALUE, symbol_value
from .errors import BufferTooSmall, MalformedInput

TextLike = Union[str, bytes, bytearray, memoryview]


class DecodePolicy(str, Enum):
    PERMISSIVE = 'permissive'
    STRICT = 'strict'


def _as_codes(text: TextLike) -> Sequence[int]:
    if isinstance(text, str):
        if text.isascii():
            return text.encode('ascii')
        # Code points above 127 classify as invalid, same as bytes >= 128
        return [ord(c) for c in text]
    return memoryview(text).cast('B')


def _describe(code: int) -> str:
    if code < 128:
        return repr(chr(code))
    return f"0x{code:02x}" if code < 256 else f"U+{code:04X}"


def _check_trailer(codes: Sequence[int], offset: int, collected: int) -> None:
    """Strict check of what follows the first padding character."""
    pos = offset + 1
    if collected == 2:
        if pos >= len(codes):
            raise MalformedInput("Incomplete padding", pos)
        if codes[pos] != PAD:
            raise MalformedInput(f"Expected '=' but found {_describe(codes[pos])}", pos)
        pos += 1
    if pos < len(codes):
        raise MalformedInput(f"Unexpected {_describe(codes[pos])} after padding", pos)


def _decode_symbols(codes: Sequence[int], strict: bool) -> bytearray:
    dst = bytearray()
    quantum = [0, 0, 0, 0]
    count = 0

    for offset, code in enumerate(codes):
        value = symbol_value(code)

        if value == INVALID:
            if strict:
                raise MalformedInput(f"Invalid character {_describe(code)}", offset)
            continue

        if value == PAD_VALUE:
            if count < 2:
                if strict:
                    raise MalformedInput("Unexpected '='", offset)
                return dst
            s0, s1, s2 = quantum[0], quantum[1], quantum[2]
            dst.append((s0 << 2) | (s1 >> 4))
            if count == 3:
                dst.append(((s1 & 0x0F) << 4) | (s2 >> 2))
            if strict:
                _check_trailer(codes, offset, count)
            return dst

        quantum[count] = value
        count += 1

        if count == 4:
            s0, s1, s2, s3 = quantum
            dst.append((s0 << 2) | (s1 >> 4))
            dst.append(((s1 & 0x0F) << 4) | (s2 >> 2))
            dst.append(((s2 & 0x03) << 6) | s3)
            count = 0

    if count and strict:
        raise MalformedInput(f"Incomplete final quantum of {count} symbols", len(codes))

    return dst


def decode(text: TextLike, policy: DecodePolicy = DecodePolicy.PERMISSIVE) -> bytes:
    """Decode base64 text back to bytes.

    Args:
        text: Encoded text, as str or bytes-like
        policy: How to treat malformed input

    Returns:
        Decoded bytes

    Raises:
        MalformedInput: Only under DecodePolicy.STRICT
    """
    strict = DecodePolicy(policy) is DecodePolicy.STRICT
    return bytes(_decode_symbols(_as_codes(text), strict))


def decode_into(text: TextLike, out, policy: DecodePolicy = DecodePolicy.PERMISSIVE) -> int:
    """Decode text into a caller-provided buffer.

    A buffer of required_decoded_capacity(len(text)) bytes is enough for any
    well-formed input. Permissive input with a single trailing '=' (e.g. "TQ=")
    decodes to one byte more than that bound and raises BufferTooSmall.

    Returns:
        Number of bytes written

    Raises:
        BufferTooSmall: If the decoded bytes do not fit in out, under either policy
        MalformedInput: Only under DecodePolicy.STRICT
    """
    strict = DecodePolicy(policy) is DecodePolicy.STRICT
    decoded = _decode_symbols(_as_codes(text), strict)
    dst = memoryview(out).cast('B')
    if len(dst) < len(decoded):
        raise BufferTooSmall(len(decoded), len(dst))
    dst[:len(decoded)] = decoded
    return len(decoded)


def decode_string(encoded: TextLike, policy: DecodePolicy = DecodePolicy.PERMISSIVE) -> str:
    """Decode base64 to UTF-8 string."""
    return decode(encoded, policy).decode('utf-8')
