"""Error types for loxlink."""
from __future__ import annotations


class LoxLinkError(Exception):
    """Base class for all loxlink errors."""

    pass


class InvalidHeaderLength(LoxLinkError, ValueError):
    """Raised when a message header is not exactly 8 bytes long.

    The message stream must be treated as desynchronized after this error.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Expected an 8 byte header, got {length} bytes")


class TruncatedRecord(LoxLinkError):
    """Raised when a field can't be read because the buffer ran out of bytes."""

    def __init__(self, needed: int, remaining: int, offset: int = 0) -> None:
        self.needed = needed
        self.remaining = remaining
        self.offset = offset
        super().__init__(
            f"Need {needed} bytes at offset {offset}, only {remaining} remaining"
        )


class MalformedWeatherPayload(LoxLinkError):
    """Raised when a weather payload can't be fully decoded."""

    def __init__(self, offset: int, tables_decoded: int, reason: str) -> None:
        self.offset = offset
        self.tables_decoded = tables_decoded
        super().__init__(
            f"Malformed weather payload at offset {offset} "
            f"after {tables_decoded} table(s): {reason}"
        )


class PayloadTooLarge(LoxLinkError):
    """Raised when a header declares a payload above the configured limit."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Declared payload of {length} bytes exceeds limit of {limit}")
