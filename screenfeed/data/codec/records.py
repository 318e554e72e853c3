"""Pair record decoding.

A pair record is laid out as::

    address            32 bytes
    secondary field    32 bytes   (only when variant.pair_secondary_field)
    token name         NUL-terminated
    token symbol       NUL-terminated
    base token symbol  NUL-terminated
    price              float64 LE
    volume             float64 LE
"""

from __future__ import annotations

from ..core.enums import FormatVariant
from ..core.exceptions import InsufficientDataError
from ..models import PairRecord
from .readers import read_cstring, read_fixed_bytes, read_float64_le

ADDRESS_SIZE = 32
SECONDARY_FIELD_SIZE = 32
# A record is never attempted with fewer bytes than this left
MIN_PAIR_RECORD_SIZE = 64
_PRICE_VOLUME_SIZE = 16


def decode_pair_record(
    buffer: bytes, offset: int, variant: FormatVariant
) -> tuple[PairRecord, int]:
    """Decode one pair record starting at ``offset``.

    Returns:
        The record and the number of bytes it occupied, so the caller can
        advance to the next record

    Raises:
        DecodeError: InsufficientDataError, UnterminatedStringError or
            TruncatedError depending on which field did not fit
    """
    if len(buffer) - offset < MIN_PAIR_RECORD_SIZE:
        raise InsufficientDataError(
            f"insufficient data for pair record: need {MIN_PAIR_RECORD_SIZE}, "
            f"have {len(buffer) - offset}",
            offset=offset,
        )

    address, cursor = read_fixed_bytes(buffer, offset, ADDRESS_SIZE)
    secondary = None
    if variant.pair_secondary_field:
        secondary, cursor = read_fixed_bytes(buffer, cursor, SECONDARY_FIELD_SIZE)

    token_name, cursor = read_cstring(buffer, cursor)
    token_symbol, cursor = read_cstring(buffer, cursor)
    base_token_symbol, cursor = read_cstring(buffer, cursor)

    if len(buffer) - cursor < _PRICE_VOLUME_SIZE:
        raise InsufficientDataError("insufficient data for price and volume", offset=cursor)
    price, cursor = read_float64_le(buffer, cursor)
    volume, cursor = read_float64_le(buffer, cursor)

    record = PairRecord(
        address=address,
        secondary_field=secondary,
        token_name=token_name,
        token_symbol=token_symbol,
        base_token_symbol=base_token_symbol,
        price=price,
        volume=volume,
    )
    return record, cursor - offset


def decode_pair_run(
    buffer: bytes,
    offset: int,
    variant: FormatVariant,
    limit: int | None = None,
) -> list[PairRecord]:
    """Decode back-to-back pair records until fewer than 64 bytes remain.

    Stopping on a short tail is not an error. Any record that starts but
    fails to decode aborts the whole run.

    Args:
        buffer: Frame bytes
        offset: Position of the first record
        variant: Wire layout
        limit: Stop after this many records (advisory count), None for no limit
    """
    pairs: list[PairRecord] = []
    cursor = offset
    while len(buffer) - cursor >= MIN_PAIR_RECORD_SIZE:
        if limit is not None and len(pairs) >= limit:
            break
        record, consumed = decode_pair_record(buffer, cursor, variant)
        pairs.append(record)
        cursor += consumed
    return pairs
