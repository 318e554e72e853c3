"""Unit tests for WebSocketTransport.

Tests focus on reconnection logic, frame handling, and error handling.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from screenfeed.data.config import DEFAULT_HEADERS
from screenfeed.data.runtime import TransportConfig, WebSocketTransport


class MessageIterator:
    def __init__(self, messages):
        self._messages = list(messages)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._messages:
            return self._messages.pop(0)
        raise StopAsyncIteration


def _connect_context(ws):
    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=ws)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


class TestWebSocketTransport:
    def test_init_default_config(self):
        transport = WebSocketTransport()
        assert transport._conf.ping_interval == 30
        assert transport._conf.ping_timeout == 10
        assert transport._conf.headers == DEFAULT_HEADERS

    def test_next_delay_exponential_backoff(self):
        transport = WebSocketTransport()
        delay1 = transport._next_delay(1.0)
        delay2 = transport._next_delay(delay1)
        assert delay2 > delay1

    def test_next_delay_respects_max(self):
        """Backoff is capped before jitter is applied."""
        transport = WebSocketTransport()
        result = transport._next_delay(100.0)
        assert result <= transport._conf.max_reconnect_delay * (1 + transport._conf.jitter)

    def test_connect_kwargs(self):
        config = TransportConfig(max_size=1024, max_queue=512, headers={"Origin": "x"})
        kwargs = WebSocketTransport(config)._connect_kwargs()

        assert kwargs["ping_interval"] == 30
        assert kwargs["max_size"] == 1024
        assert kwargs["max_queue"] == 512
        assert kwargs["compression"] is None
        assert kwargs["additional_headers"] == {"Origin": "x"}

    @pytest.mark.asyncio
    async def test_stream_yields_bytes(self):
        """Binary frames pass through; text frames are encoded."""
        ws = MessageIterator([b"\x22pong", "\x22ping"])
        transport = WebSocketTransport()

        with patch("websockets.connect", return_value=_connect_context(ws)):
            received = []
            async for frame in transport.stream("wss://example.com/ws"):
                received.append(frame)
                if len(received) == 2:
                    break

        assert received == [b"\x22pong", b"\x22ping"]

    @pytest.mark.asyncio
    async def test_stream_reconnects_on_connection_closed(self):
        from websockets.exceptions import ConnectionClosed

        class ClosedIterator:
            def __aiter__(self):
                return self

            async def __anext__(self):
                raise ConnectionClosed(None, None)

        contexts = [_connect_context(ClosedIterator()), _connect_context(MessageIterator([b"\x22a"]))]
        transport = WebSocketTransport()

        with (
            patch("websockets.connect", side_effect=contexts),
            patch("screenfeed.data.runtime.transport.asyncio.sleep", new=AsyncMock()) as sleep,
        ):
            async for frame in transport.stream("wss://example.com/ws"):
                assert frame == b"\x22a"
                break

        sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_stream_respects_cancelled_error(self):
        class CancelledIterator:
            def __aiter__(self):
                return self

            async def __anext__(self):
                raise asyncio.CancelledError()

        with (
            patch("websockets.connect", return_value=_connect_context(CancelledIterator())),
            pytest.raises(asyncio.CancelledError),
        ):
            async for _ in WebSocketTransport().stream("wss://example.com/ws"):
                pass
