"""Exceptions raised by the codec."""


class CodecError(ValueError):
    """Base class for codec failures."""


class MalformedInput(CodecError):
    """Encoded text rejected by the strict decode policy."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class BufferTooSmall(CodecError):
    """Destination buffer cannot hold the output."""

    def __init__(self, required: int, available: int):
        super().__init__(
            f"Destination buffer too small: need {required} bytes, have {available}")
        self.required = required
        self.available = available
