"""Core components."""

from .enums import DEFAULT_VARIANT, DecodeErrorKind, FormatVariant, MessageKind
from .exceptions import (
    DataError,
    DecodeError,
    EmptyFrameError,
    InsufficientDataError,
    TruncatedError,
    UnknownMessageKindError,
    UnterminatedStringError,
)

__all__ = [
    "DEFAULT_VARIANT",
    "DecodeErrorKind",
    "FormatVariant",
    "MessageKind",
    "DataError",
    "DecodeError",
    "EmptyFrameError",
    "InsufficientDataError",
    "TruncatedError",
    "UnknownMessageKindError",
    "UnterminatedStringError",
]
