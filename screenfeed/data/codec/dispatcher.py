"""Frame dispatcher: routes a frame to its decoder by tag byte."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.enums import DEFAULT_VARIANT, FormatVariant, MessageKind
from ..core.exceptions import EmptyFrameError, UnknownMessageKindError
from ..models import DecodedMessage
from .messages import decode_block_heartbeat, decode_heartbeat, decode_pair_batch

logger = logging.getLogger(__name__)

VariantSelector = Callable[[bytes], FormatVariant]

_PREVIEW_BYTES = 20


class FrameDecoder:
    """Stateless frame decoder bound to a wire layout.

    The layout is either a fixed FormatVariant or a selector callable that
    picks one per frame (for example by peeking at the version string or
    the frame length). The decoder never guesses a layout on its own.

    Safe to share between threads: no state changes after construction.
    """

    def __init__(self, variant: FormatVariant | VariantSelector = DEFAULT_VARIANT) -> None:
        self._variant = variant

    def variant_for(self, frame: bytes) -> FormatVariant:
        """Resolve the layout for ``frame``."""
        if isinstance(self._variant, FormatVariant):
            return self._variant
        return self._variant(frame)

    def decode(self, buffer: bytes | bytearray | memoryview) -> DecodedMessage:
        """Decode one frame.

        Raises:
            EmptyFrameError: Zero-length frame
            UnknownMessageKindError: Unrecognized tag; ``tag`` is kept on the error
            DecodeError: Any failure from the message decoder, unchanged
        """
        frame = bytes(buffer)
        if not frame:
            raise EmptyFrameError("empty frame", offset=0)

        tag = frame[0]
        kind = MessageKind.from_tag(tag)
        logger.debug(
            f"Frame kind={kind.name if kind is not None else 'UNKNOWN'} (0x{tag:02x}), "
            f"size={len(frame)}, head={frame[:_PREVIEW_BYTES].hex()}"
        )

        match kind:
            case MessageKind.BLOCK_HEARTBEAT:
                return decode_block_heartbeat(frame, self.variant_for(frame))
            case MessageKind.PAIRS:
                return decode_pair_batch(frame, self.variant_for(frame))
            case MessageKind.PING:
                return decode_heartbeat(frame)
            case _:
                raise UnknownMessageKindError(tag)


_default_decoder = FrameDecoder()


def decode_frame(
    buffer: bytes | bytearray | memoryview,
    variant: FormatVariant | VariantSelector | None = None,
) -> DecodedMessage:
    """Decode one frame with ``variant`` (DEFAULT_VARIANT when omitted)."""
    if variant is None:
        return _default_decoder.decode(buffer)
    return FrameDecoder(variant).decode(buffer)
