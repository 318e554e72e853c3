"""Top-level message decoders, one per message kind.

Each decoder receives the whole frame. The tag at offset 0 has already been
read by the dispatcher and is not looked at again.
"""

from __future__ import annotations

from ..core.enums import FormatVariant
from ..core.exceptions import InsufficientDataError
from ..models import BlockHeartbeat, Heartbeat, PairBatch
from .readers import TEXT_ENCODING, read_cstring, read_fixed_bytes, read_uint32_le
from .records import decode_pair_run

HASH_SIZE = 32
# latest block (uint32) followed by the block hash, anchored at the frame end
BLOCK_TRAILER_SIZE = 4 + HASH_SIZE


def decode_block_heartbeat(frame: bytes, variant: FormatVariant) -> BlockHeartbeat:
    """Decode a block hash heartbeat.

    The trailer is located from the end of the frame. Whatever lies between
    the version terminator and the trailer is the endpoint, cut at its own
    terminator when it has one; an empty gap means no endpoint.
    """
    if len(frame) < BLOCK_TRAILER_SIZE:
        raise InsufficientDataError(
            f"insufficient data for block heartbeat: need {BLOCK_TRAILER_SIZE}, have {len(frame)}",
            offset=0,
        )
    trailer_start = len(frame) - BLOCK_TRAILER_SIZE

    version, cursor = read_cstring(frame, variant.version_offset, end=trailer_start)

    endpoint_end = frame.find(b"\x00", cursor, trailer_start)
    if endpoint_end == -1:
        endpoint_end = trailer_start
    endpoint = frame[cursor:endpoint_end].decode(TEXT_ENCODING, errors="replace")

    latest_block, cursor = read_uint32_le(frame, trailer_start)
    block_hash, _ = read_fixed_bytes(frame, cursor, HASH_SIZE)

    return BlockHeartbeat(
        version=version,
        endpoint=endpoint,
        latest_block=latest_block,
        hash=block_hash,
    )


def decode_pair_batch(frame: bytes, variant: FormatVariant) -> PairBatch:
    """Decode a batch of pair snapshots.

    With ``variant.pair_count_prefix`` the version is followed by a uint32
    count; the count is advisory and decoding stops early, successfully,
    when the remaining bytes cannot hold another record. Without it the
    records run until fewer than 64 bytes remain. A record that fails to
    decode fails the whole batch.
    """
    version, cursor = read_cstring(frame, variant.version_offset)

    declared_count = None
    if variant.pair_count_prefix:
        declared_count, cursor = read_uint32_le(frame, cursor)

    pairs = decode_pair_run(frame, cursor, variant, limit=declared_count)
    return PairBatch(version=version, pairs=tuple(pairs), declared_count=declared_count)


def decode_heartbeat(frame: bytes) -> Heartbeat:
    """Decode a keep-alive ping; every byte after the tag is text."""
    return Heartbeat(content=frame[1:].decode(TEXT_ENCODING, errors="replace"))
