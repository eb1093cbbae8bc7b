"""Base64 encoder.

Every byte sequence has an encoding, so nothing here raises for content.
Input is treated as opaque octets; text must be encoded to bytes first.
"""

from typing import Union

from .alphabet import ALPHABET, PAD
from .errors import BufferTooSmall
from .sizing import encoded_length, required_encoded_capacity

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike) -> memoryview:
    if isinstance(data, str):
        raise TypeError("encode() expects bytes, not str; encode the text first")
    return memoryview(data).cast('B')


def _encode_symbols(src: memoryview, dst: memoryview) -> int:
    """Write the encoding of src into dst and return the number of bytes written."""
    n = len(src)
    full = n - n % 3
    o = 0

    for i in range(0, full, 3):
        b0, b1, b2 = src[i], src[i + 1], src[i + 2]
        dst[o] = ALPHABET[b0 >> 2]
        dst[o + 1] = ALPHABET[((b0 & 0x03) << 4) | (b1 >> 4)]
        dst[o + 2] = ALPHABET[((b1 & 0x0F) << 2) | (b2 >> 6)]
        dst[o + 3] = ALPHABET[b2 & 0x3F]
        o += 4

    remaining = n - full
    if remaining == 1:
        b0 = src[full]
        dst[o] = ALPHABET[b0 >> 2]
        dst[o + 1] = ALPHABET[(b0 & 0x03) << 4]
        dst[o + 2] = PAD
        dst[o + 3] = PAD
        o += 4
    elif remaining == 2:
        b0, b1 = src[full], src[full + 1]
        dst[o] = ALPHABET[b0 >> 2]
        dst[o + 1] = ALPHABET[((b0 & 0x03) << 4) | (b1 >> 4)]
        dst[o + 2] = ALPHABET[(b1 & 0x0F) << 2]
        dst[o + 3] = PAD
        o += 4

    return o


def encode_into(data: BytesLike, out, terminator: bool = True) -> int:
    """Encode data into a caller-provided buffer.

    Args:
        data: Bytes to encode
        out: Writable buffer (bytearray, memoryview, ...)
        terminator: Write a NUL byte after the encoded characters

    Returns:
        Number of encoded characters written, terminator excluded

    Raises:
        BufferTooSmall: If out is shorter than required_encoded_capacity()
    """
    src = _as_bytes(data)
    dst = memoryview(out).cast('B')
    required = required_encoded_capacity(len(src), terminator)
    if len(dst) < required:
        raise BufferTooSmall(required, len(dst))

    written = _encode_symbols(src, dst)
    if terminator:
        dst[written] = 0
    return written


def encode_bytes(data: BytesLike) -> bytes:
    """Encode data and return the ASCII encoding as bytes."""
    src = _as_bytes(data)
    buf = bytearray(encoded_length(len(src)))
    _encode_symbols(src, memoryview(buf))
    return bytes(buf)


def encode(data: BytesLike) -> str:
    """Encode bytes to a base64 string."""
    return encode_bytes(data).decode('ascii')


def encode_string(text: str) -> str:
    """Encode a UTF-8 string to base64."""
    return encode(text.encode('utf-8'))
