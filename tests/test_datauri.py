"""Data URI tests."""

import pytest

from b64codec import DecodePolicy, MalformedInput, build_data_uri, parse_data_uri


def test_build():
    assert build_data_uri(b"Man", "image/png") == "data:image/png;base64,TWFu"
    assert build_data_uri(b"") == "data:application/octet-stream;base64,"


def test_build_with_parameters():
    uri = build_data_uri(b"Ma", "text/plain", {"charset": "utf-8"})
    assert uri == "data:text/plain;charset=utf-8;base64,TWE="


def test_parse_base64():
    uri = parse_data_uri("data:image/png;base64,TWFu")
    assert uri.mime_type == "image/png"
    assert uri.data == b"Man"
    assert uri.parameters == {}
    assert uri.base64


def test_parse_roundtrip_with_parameters():
    data = bytes(range(200))
    uri = parse_data_uri(build_data_uri(data, "font/ttf", {"name": "demo"}))
    assert uri.mime_type == "font/ttf"
    assert uri.parameters == {"name": "demo"}
    assert uri.data == data


def test_parse_percent_encoded():
    uri = parse_data_uri("data:,Hello%2C%20World")
    assert uri.mime_type == "text/plain"
    assert uri.data == b"Hello, World"
    assert not uri.base64


def test_parse_charset_parameter():
    uri = parse_data_uri("data:text/plain;charset=US-ASCII,hi")
    assert uri.parameters == {"charset": "US-ASCII"}
    assert uri.data == b"hi"


def test_parse_tolerates_wrapped_payload():
    uri = parse_data_uri("DATA:image/png;BASE64,TW\n  Fu")
    assert uri.data == b"Man"


def test_parse_strict_payload():
    with pytest.raises(MalformedInput):
        parse_data_uri("data:;base64,TW Fu", DecodePolicy.STRICT)


@pytest.mark.parametrize("uri", [
    "http://example.com/logo.png",
    "data:image/png;base64",
    "data:text/plain;bogus,hi",
])
def test_parse_invalid(uri):
    with pytest.raises(ValueError):
        parse_data_uri(uri)


def test_build_without_parameters():
    assert build_data_uri(b"M", "text/plain", None) == "data:text/plain;base64,TQ=="
