"""Screenfeed Data - decoder for the screener's binary real-time pair feed."""

from .clients import PairFeed
from .codec import FrameDecoder, decode_frame
from .core import (
    DEFAULT_VARIANT,
    DataError,
    DecodeError,
    DecodeErrorKind,
    EmptyFrameError,
    FormatVariant,
    InsufficientDataError,
    MessageKind,
    TruncatedError,
    UnknownMessageKindError,
    UnterminatedStringError,
)
from .models import BlockHeartbeat, DecodedMessage, Heartbeat, PairBatch, PairRecord
from .runtime import TransportConfig, WebSocketTransport

__version__ = "0.1.0"

__all__ = [
    # Decoding
    "decode_frame",
    "FrameDecoder",
    "FormatVariant",
    "DEFAULT_VARIANT",
    "MessageKind",
    # Models
    "BlockHeartbeat",
    "DecodedMessage",
    "Heartbeat",
    "PairBatch",
    "PairRecord",
    # Clients
    "PairFeed",
    "TransportConfig",
    "WebSocketTransport",
    # Exceptions
    "DataError",
    "DecodeError",
    "DecodeErrorKind",
    "EmptyFrameError",
    "InsufficientDataError",
    "TruncatedError",
    "UnknownMessageKindError",
    "UnterminatedStringError",
]
