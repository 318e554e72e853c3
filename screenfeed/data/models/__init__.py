"""Data models for decoded feed messages.

Architecture:
    All models are Pydantic v2 and immutable (frozen=True). A model is built
    once per decoded frame and owns copies of every string and byte field,
    so nothing refers back into the frame buffer.

Model Categories:
    - Block: BlockHeartbeat
    - Pairs: PairBatch, PairRecord
    - Keep-alive: Heartbeat
"""

from typing import TypeAlias

from .block import BlockHeartbeat
from .heartbeat import Heartbeat
from .pairs import PairBatch, PairRecord

DecodedMessage: TypeAlias = BlockHeartbeat | PairBatch | Heartbeat

__all__ = [
    "BlockHeartbeat",
    "DecodedMessage",
    "Heartbeat",
    "PairBatch",
    "PairRecord",
]
