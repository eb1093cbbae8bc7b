"""Base64 decoder tests."""

import pytest

from b64codec import BufferTooSmall, DecodePolicy, MalformedInput
from b64codec import decode, decode_into, decode_string, encode, required_decoded_capacity


@pytest.mark.parametrize("text, expected", [
    ("", b""),
    ("TQ==", b"M"),
    ("TWE=", b"Ma"),
    ("TWFu", b"Man"),
    ("SGVsbG8=", b"Hello"),
    ("aGVsbG8gd29ybGQ=", b"hello world"),
    ("AP8=", b"\x00\xff"),
])
def test_known_vectors(text, expected):
    assert decode(text) == expected
    assert decode(text, DecodePolicy.STRICT) == expected


def test_accepts_bytes_like():
    assert decode(b"TWFu") == b"Man"
    assert decode(bytearray(b"TWE=")) == b"Ma"
    assert decode(memoryview(b"TQ==")) == b"M"


def test_roundtrip():
    for n in range(0, 70):
        data = bytes((i * 37 + n) % 256 for i in range(n))
        assert decode(encode(data)) == data
        assert decode(encode(data), DecodePolicy.STRICT) == data


def test_decode_string():
    assert decode_string("Y2Fmw6k=") == "café"


class TestPermissive:

    def test_skips_whitespace(self):
        assert decode("SGVs bG8=") == decode("SGVsbG8=") == b"Hello"
        assert decode("TW\nFu\r\n\tTQ==") == b"ManM"

    def test_skips_non_alphabet_bytes(self):
        assert decode("T-W.F*u") == b"Man"
        assert decode(b"TW\x00\xffFu") == b"Man"

    def test_skips_non_ascii_characters(self):
        assert decode("TW€Fu") == b"Man"

    def test_discards_dangling_tail(self):
        assert decode("TWFuT") == b"Man"
        assert decode("TWFuTW") == b"Man"
        assert decode("TWFuTWE") == b"Man"

    def test_padding_stops_decoding(self):
        assert decode("TQ==TWFu") == b"M"
        assert decode("TWE=garbage") == b"Ma"

    def test_single_padding_after_two_symbols(self):
        assert decode("TQ=") == b"M"

    def test_misplaced_padding(self):
        assert decode("=TWFu") == b""
        assert decode("T===") == b""
        assert decode("TWFu=QQ==") == b"Man"

    def test_only_garbage(self):
        assert decode(" \n\t!!") == b""


class TestStrict:

    @pytest.mark.parametrize("text, offset", [
        ("TW Fu", 2),
        ("TW€Fu", 2),
        ("=TWF", 0),
        ("T===", 1),
        ("TQ=", 3),
        ("TQ=A", 3),
        ("TQ==TWFu", 4),
        ("TWE=\n", 4),
        ("TWFuT", 5),
        ("TWFuTWE", 7),
    ])
    def test_rejects_malformed(self, text, offset):
        with pytest.raises(MalformedInput) as exc_info:
            decode(text, DecodePolicy.STRICT)
        assert exc_info.value.offset == offset

    def test_policy_by_name(self):
        with pytest.raises(MalformedInput, match="Invalid character"):
            decode("TW Fu", "strict")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode("TWFuT", DecodePolicy.STRICT)


def test_unknown_policy():
    with pytest.raises(ValueError):
        decode("TWFu", "lenient")


def test_decode_into():
    buf = bytearray(required_decoded_capacity(8))
    assert len(buf) == 6
    assert decode_into("SGVsbG8=", buf) == 5
    assert bytes(buf[:5]) == b"Hello"


def test_decode_into_empty():
    assert decode_into("", bytearray(0)) == 0


def test_decode_into_buffer_too_small():
    with pytest.raises(BufferTooSmall) as exc_info:
        decode_into("TWFu", bytearray(2))
    assert exc_info.value.required == 3
    assert exc_info.value.available == 2


def test_decode_into_strict():
    with pytest.raises(MalformedInput):
        decode_into("TW Fu", bytearray(3), DecodePolicy.STRICT)


def test_decode_into_single_padding_exceeds_capacity_bound():
    assert required_decoded_capacity(3) == 0
    with pytest.raises(BufferTooSmall) as exc_info:
        decode_into("TQ=", bytearray(required_decoded_capacity(3)))
    assert exc_info.value.required == 1

    buf = bytearray(1)
    assert decode_into("TQ=", buf) == 1
    assert bytes(buf) == b"M"
