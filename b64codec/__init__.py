"""b64codec - standard Base64 encoding and decoding of in-memory buffers."""

from .core import (
    ALPHABET,
    PAD,
    BufferTooSmall,
    CodecError,
    DataURI,
    DecodePolicy,
    MalformedInput,
    build_data_uri,
    decode,
    decode_into,
    decode_string,
    encode,
    encode_bytes,
    encode_into,
    encode_string,
    encoded_length,
    parse_data_uri,
    required_decoded_capacity,
    required_encoded_capacity,
)

__version__ = "0.1.0"
