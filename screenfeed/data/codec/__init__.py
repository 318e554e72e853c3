"""Binary wire codec for the screener feed.

Layers, leaves first:
    - readers: bounds-checked primitive reads
    - records: pair record decoding and count-free runs
    - messages: one decoder per message kind
    - dispatcher: tag-based routing (decode_frame / FrameDecoder)
"""

from .dispatcher import FrameDecoder, VariantSelector, decode_frame
from .messages import decode_block_heartbeat, decode_heartbeat, decode_pair_batch
from .readers import read_cstring, read_fixed_bytes, read_float64_le, read_uint32_le
from .records import MIN_PAIR_RECORD_SIZE, decode_pair_record, decode_pair_run

__all__ = [
    "FrameDecoder",
    "VariantSelector",
    "decode_frame",
    "decode_block_heartbeat",
    "decode_heartbeat",
    "decode_pair_batch",
    "decode_pair_record",
    "decode_pair_run",
    "MIN_PAIR_RECORD_SIZE",
    "read_cstring",
    "read_fixed_bytes",
    "read_float64_le",
    "read_uint32_le",
]
