"""Exception hierarchy for string_helper."""

from __future__ import annotations


class StringHelperError(Exception):
    """Base class for all errors raised by string_helper."""


class DumpCodecError(StringHelperError):
    """Raised when a dump cannot be converted."""


class DumpEncodeError(DumpCodecError):
    """A structural dump line could not be mapped to a tagged token."""


class DumpDecodeError(DumpCodecError):
    """Tagged-length text is malformed or truncated."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)
