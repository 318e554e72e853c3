"""Custom exception hierarchy."""

from __future__ import annotations

from .enums import DecodeErrorKind


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class DecodeError(DataError):
    """A frame could not be decoded.

    Fatal only to the frame being decoded. The ``kind`` attribute identifies
    which step failed so callers can log and carry on with the next frame.
    """

    kind: DecodeErrorKind

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class EmptyFrameError(DecodeError):
    """Zero-length frame."""

    kind = DecodeErrorKind.EMPTY_FRAME


class UnknownMessageKindError(DecodeError):
    """Tag byte does not match any known message kind."""

    kind = DecodeErrorKind.UNKNOWN_MESSAGE_KIND

    def __init__(self, tag: int) -> None:
        super().__init__(f"unknown message kind: 0x{tag:02x}", offset=0)
        self.tag = tag


class InsufficientDataError(DecodeError):
    """A fixed-size field or required trailer does not fit."""

    kind = DecodeErrorKind.INSUFFICIENT_DATA


class UnterminatedStringError(DecodeError):
    """Null-terminated string has no terminator before the buffer ends."""

    kind = DecodeErrorKind.UNTERMINATED_STRING


class TruncatedError(DecodeError):
    """Primitive read would run past the end of the buffer."""

    kind = DecodeErrorKind.TRUNCATED
