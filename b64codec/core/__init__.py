"""Base64 codec core: tables, encoder, decoder and sizing helpers."""

from .alphabet import ALPHABET, PAD
from .datauri import DataURI, build_data_uri, parse_data_uri
from .decoder import DecodePolicy, decode, decode_into, decode_string
from .encoder import encode, encode_bytes, encode_into, encode_string
from .errors import BufferTooSmall, CodecError, MalformedInput
from .sizing import encoded_length, required_decoded_capacity, required_encoded_capacity
