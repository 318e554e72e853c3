"""Runtime WebSocket helpers."""

from .transport import TransportConfig, WebSocketTransport

__all__ = [
    "TransportConfig",
    "WebSocketTransport",
]
