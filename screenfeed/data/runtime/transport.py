"""WebSocket transport yielding raw binary frames with auto-reconnect."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

import websockets

from ..config import DEFAULT_HEADERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportConfig:
    """Connection settings for WebSocketTransport."""

    ping_interval: int = 30
    ping_timeout: int = 10
    base_reconnect_delay: float = 1.0
    max_reconnect_delay: float = 30.0
    jitter: float = 0.2
    max_size: int | None = None
    max_queue: int | None = 1024
    # The feed is dialed without permessage-deflate
    compression: str | None = None
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))


class WebSocketTransport:
    """Streams frames from a WebSocket as bytes, reconnecting on failure.

    Frames are handed over untouched; decoding is the caller's job. Text
    frames are encoded to UTF-8 so every item yielded is ``bytes``.
    """

    def __init__(self, config: TransportConfig | None = None) -> None:
        self._conf = config or TransportConfig()

    def _connect_kwargs(self) -> dict:
        return {
            "ping_interval": self._conf.ping_interval,
            "ping_timeout": self._conf.ping_timeout,
            "max_size": self._conf.max_size,
            "max_queue": self._conf.max_queue,
            "compression": self._conf.compression,
            "additional_headers": self._conf.headers,
        }

    def _next_delay(self, delay: float) -> float:
        base = min(delay * 2, self._conf.max_reconnect_delay)
        return base * (1 + random.uniform(0, self._conf.jitter))

    async def stream(self, url: str) -> AsyncIterator[bytes]:
        """Yield raw frames from ``url`` forever, reconnecting with backoff."""
        delay = self._conf.base_reconnect_delay
        while True:
            try:
                async with websockets.connect(url, **self._connect_kwargs()) as websocket:
                    logger.info(f"WebSocket connection opened: {url}")
                    delay = self._conf.base_reconnect_delay
                    async for message in websocket:
                        if isinstance(message, str):
                            logger.debug("Received text frame, encoding as UTF-8")
                            message = message.encode("utf-8")
                        yield message
            except asyncio.CancelledError:
                raise
            except websockets.exceptions.ConnectionClosed:
                logger.warning(f"WebSocket connection closed, reconnecting in {delay:.1f}s")
                await asyncio.sleep(delay)
                delay = self._next_delay(delay)
            except Exception as e:  # noqa: BLE001
                logger.error(f"WebSocket error: {e}")
                await asyncio.sleep(delay)
                delay = self._next_delay(delay)
