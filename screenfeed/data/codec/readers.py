"""Bounds-checked primitive readers.

Every reader takes ``(buffer, offset)`` and returns ``(value, next_offset)``.
Bounds are checked before anything is read, so a short buffer raises a
DecodeError instead of an IndexError or ``struct.error``.
"""

from __future__ import annotations

import struct

from ..core.exceptions import TruncatedError, UnterminatedStringError

_UINT32_LE = struct.Struct("<I")
_FLOAT64_LE = struct.Struct("<d")

TEXT_ENCODING = "utf-8"


def _check_bounds(buffer: bytes, offset: int, size: int) -> None:
    if offset < 0 or offset + size > len(buffer):
        raise TruncatedError(
            f"read beyond bounds: pos={offset}, need={size}, len={len(buffer)}",
            offset=offset,
        )


def read_uint32_le(buffer: bytes, offset: int) -> tuple[int, int]:
    """Read an unsigned 32-bit little-endian integer."""
    _check_bounds(buffer, offset, _UINT32_LE.size)
    return _UINT32_LE.unpack_from(buffer, offset)[0], offset + _UINT32_LE.size


def read_float64_le(buffer: bytes, offset: int) -> tuple[float, int]:
    """Read an IEEE-754 double, little-endian, bit for bit (NaN payloads included)."""
    _check_bounds(buffer, offset, _FLOAT64_LE.size)
    return _FLOAT64_LE.unpack_from(buffer, offset)[0], offset + _FLOAT64_LE.size


def read_fixed_bytes(buffer: bytes, offset: int, n: int) -> tuple[bytes, int]:
    """Read exactly ``n`` bytes as an owned copy."""
    _check_bounds(buffer, offset, n)
    return bytes(buffer[offset : offset + n]), offset + n


def read_cstring(buffer: bytes, offset: int, end: int | None = None) -> tuple[str, int]:
    """Read a null-terminated string.

    Args:
        buffer: Source bytes
        offset: Position of the first character
        end: Optional exclusive bound for the terminator scan (defaults to
            the end of the buffer)

    Returns:
        Decoded text (without the terminator) and the offset just past the
        terminator

    Raises:
        TruncatedError: If ``offset`` lies outside the buffer
        UnterminatedStringError: If no zero byte occurs before ``end``
    """
    limit = len(buffer) if end is None else min(end, len(buffer))
    if offset < 0 or offset > len(buffer):
        raise TruncatedError(
            f"string start out of bounds: pos={offset}, len={len(buffer)}", offset=offset
        )
    terminator = buffer.find(b"\x00", offset, limit)
    if terminator == -1:
        raise UnterminatedStringError(
            f"no terminator between {offset} and {limit}", offset=offset
        )
    text = buffer[offset:terminator].decode(TEXT_ENCODING, errors="replace")
    return text, terminator + 1
