"""Buffer sizing helpers for callers that provide their own output buffers."""


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Size must be non-negative, got {n}")


def encoded_length(n: int) -> int:
    """Number of characters in the encoding of n bytes."""
    _check_size(n)
    return (n + 2) // 3 * 4


def required_encoded_capacity(n: int, terminator: bool = True) -> int:
    """Destination capacity needed by encode_into() for n input bytes.

    Args:
        n: Input length in bytes
        terminator: Reserve one extra byte for the NUL terminator

    Returns:
        Capacity in bytes
    """
    return encoded_length(n) + (1 if terminator else 0)


def required_decoded_capacity(m: int) -> int:
    """Destination capacity needed by decode_into() for m input characters."""
    _check_size(m)
    return m // 4 * 3
