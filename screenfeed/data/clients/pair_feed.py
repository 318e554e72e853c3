"""High-level feed of decoded screener messages.

Wraps a WebSocketTransport and a FrameDecoder:

- each received frame is decoded independently
- a frame that fails to decode is logged and skipped by default, so one bad
  frame never stops the stream
- simple counters track decoded and failed frames
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Literal

from ..codec import FrameDecoder
from ..config import DEFAULT_WS_URL
from ..core.exceptions import DecodeError, UnknownMessageKindError
from ..models import DecodedMessage
from ..runtime import WebSocketTransport

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["skip", "raise"]


class PairFeed:
    """Real-time feed of BlockHeartbeat, PairBatch and Heartbeat messages."""

    def __init__(
        self,
        url: str = DEFAULT_WS_URL,
        *,
        transport: WebSocketTransport | None = None,
        decoder: FrameDecoder | None = None,
        on_error: ErrorPolicy = "skip",
    ) -> None:
        if on_error not in ("skip", "raise"):
            raise ValueError(f"on_error must be 'skip' or 'raise', got {on_error!r}")
        self.url = url
        self._transport = transport or WebSocketTransport()
        self._decoder = decoder or FrameDecoder()
        self._on_error = on_error
        self.decoded_count = 0
        self.failed_count = 0

    def decode(self, frame: bytes) -> DecodedMessage | None:
        """Decode a single frame, applying the error policy.

        Returns None when the frame failed and the policy is "skip".
        """
        try:
            message = self._decoder.decode(frame)
        except DecodeError as e:
            self.failed_count += 1
            if self._on_error == "raise":
                raise
            if isinstance(e, UnknownMessageKindError):
                logger.warning(f"Skipping frame with unknown kind 0x{e.tag:02x} ({len(frame)} bytes)")
            else:
                logger.warning(
                    f"Skipping undecodable frame ({e.kind.value} at offset {e.offset}, "
                    f"{len(frame)} bytes): {e}"
                )
            return None
        self.decoded_count += 1
        return message

    async def stream(self) -> AsyncIterator[DecodedMessage]:
        """Yield decoded messages as frames arrive."""
        async for frame in self._transport.stream(self.url):
            message = self.decode(frame)
            if message is not None:
                yield message
