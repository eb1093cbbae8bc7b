"""Data URI building and parsing for embedding binary assets as text.

Format (RFC 2397): data:[<mime-type>][;<param>=<value>]*[;base64],<data>

Images and fonts referenced from SVG documents are usually embedded this
way, with a base64 payload.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import unquote_to_bytes

from .decoder import DecodePolicy, decode
from .encoder import encode

DEFAULT_MIME_TYPE = "text/plain"


@dataclass(frozen=True)
class DataURI:
    mime_type: str
    data: bytes
    parameters: Dict[str, str] = field(default_factory=dict)
    base64: bool = True


def build_data_uri(
    data: bytes,
    mime_type: str = "application/octet-stream",
    parameters: Optional[Dict[str, str]] = None
) -> str:
    """Create a base64 data URI.

    Args:
        data: Raw payload bytes
        mime_type: Media type of the payload
        parameters: Extra media type parameters (e.g. charset)

    Returns:
        Complete data URI string
    """
    header = mime_type
    for key, value in (parameters or {}).items():
        header += f";{key}={value}"
    return f"data:{header};base64,{encode(data)}"


def parse_data_uri(uri: str, policy: DecodePolicy = DecodePolicy.PERMISSIVE) -> DataURI:
    """Split a data URI and decode its payload.

    Raises:
        ValueError: If uri is not a data URI
        MalformedInput: If the payload is not valid base64 under a strict policy
    """
    uri = uri.strip()
    if uri[:5].lower() != "data:":
        raise ValueError("Not a data URI: missing 'data:' prefix")

    header, sep, payload = uri[5:].partition(',')
    if not sep:
        raise ValueError("Invalid data URI: missing ',' separator")

    parts = header.split(';')
    is_base64 = len(parts) > 1 and parts[-1].strip().lower() == 'base64'
    if is_base64:
        parts = parts[:-1]

    mime_type = parts[0].strip() or DEFAULT_MIME_TYPE
    parameters = {}
    for part in parts[1:]:
        key, eq, value = part.partition('=')
        if not eq:
            raise ValueError(f"Invalid data URI parameter: {part!r}")
        parameters[key.strip()] = value.strip()

    if is_base64:
        data = decode(payload, policy)
    else:
        data = unquote_to_bytes(payload)

    return DataURI(mime_type=mime_type, data=data, parameters=parameters, base64=is_base64)
