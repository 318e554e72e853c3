"""Shared fixtures: a frame builder writing the inverse of the wire layout."""

from __future__ import annotations

import struct

import pytest

from screenfeed.data.core import FormatVariant, MessageKind

# Byte between the tag and the version string when the version sits at offset 2
FILLER = b"\x01"


class WireBuilder:
    """Builds frames byte by byte for decoder tests."""

    def preamble(self, kind: MessageKind, version: str, variant: FormatVariant) -> bytes:
        return (
            bytes([kind])
            + FILLER * (variant.version_offset - 1)
            + version.encode("utf-8")
            + b"\x00"
        )

    def pair_record(
        self,
        *,
        variant: FormatVariant = FormatVariant.RUN,
        address: bytes = b"\x11" * 32,
        secondary: bytes = b"\x22" * 32,
        token_name: str = "Moonshot Token",
        token_symbol: str = "MSHOT",
        base_token_symbol: str = "SOL",
        price: float = 0.00012345,
        volume: float = 98765.5,
    ) -> bytes:
        out = address
        if variant.pair_secondary_field:
            out += secondary
        for text in (token_name, token_symbol, base_token_symbol):
            out += text.encode("utf-8") + b"\x00"
        return out + struct.pack("<dd", price, volume)

    def pairs_frame(
        self,
        records: list[bytes] | tuple[bytes, ...] = (),
        *,
        version: str = "1",
        variant: FormatVariant = FormatVariant.RUN,
        count: int | None = None,
    ) -> bytes:
        out = self.preamble(MessageKind.PAIRS, version, variant)
        if variant.pair_count_prefix:
            out += struct.pack("<I", len(records) if count is None else count)
        return out + b"".join(records)

    def block_frame(
        self,
        *,
        version: str = "1",
        endpoint: str | None = "rpc.example",
        latest_block: int = 287_654_321,
        block_hash: bytes = bytes(range(32)),
        variant: FormatVariant = FormatVariant.RUN,
    ) -> bytes:
        out = self.preamble(MessageKind.BLOCK_HEARTBEAT, version, variant)
        if endpoint is not None:
            out += endpoint.encode("utf-8") + b"\x00"
        return out + struct.pack("<I", latest_block) + block_hash

    def ping_frame(self, content: str = "pong") -> bytes:
        return bytes([MessageKind.PING]) + content.encode("utf-8")


@pytest.fixture
def wire() -> WireBuilder:
    return WireBuilder()
