"""Core enumerations and the wire-layout selector.

Key Types:
    - MessageKind: Closed set of frame tags
    - DecodeErrorKind: Which decode step failed
    - FormatVariant: Explicit choice between the observed wire layouts

The feed is undocumented and frames seen in the wild disagree on three
points: where the version string starts, whether a pair record carries a
second 32-byte field after the address, and whether a pair batch is
prefixed with a record count. FormatVariant names each of these so both
layouts can be decoded side by side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class MessageKind(IntEnum):
    """Frame tag values (first byte of every frame)."""

    PAIRS = 0x00
    BLOCK_HEARTBEAT = 0x02
    PING = 0x22

    @classmethod
    def from_tag(cls, tag: int) -> MessageKind | None:
        """Return the member for ``tag`` or None when the tag is unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None


class DecodeErrorKind(str, Enum):
    """Decode failure taxonomy."""

    EMPTY_FRAME = "empty_frame"
    UNKNOWN_MESSAGE_KIND = "unknown_message_kind"
    INSUFFICIENT_DATA = "insufficient_data"
    UNTERMINATED_STRING = "unterminated_string"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class FormatVariant:
    """Wire layout used to decode a frame.

    Attributes:
        name: Label used in logs
        version_offset: Frame offset of the version string (1 or 2)
        pair_secondary_field: Pair records carry a second 32-byte field
        pair_count_prefix: Pair batches carry an explicit uint32 count

    Examples:
        >>> FormatVariant.RUN.pair_count_prefix
        False
        >>> FormatVariant(name="custom", version_offset=1).version_offset
        1
    """

    name: str
    version_offset: int = 2
    pair_secondary_field: bool = True
    pair_count_prefix: bool = False

    RUN: ClassVar[FormatVariant]
    COUNTED: ClassVar[FormatVariant]

    def __post_init__(self) -> None:
        if self.version_offset not in (1, 2):
            raise ValueError(f"version_offset must be 1 or 2, got {self.version_offset}")


# Count-free run of records with address + secondary field
FormatVariant.RUN = FormatVariant(name="run")
# Explicit count, records without the secondary field
FormatVariant.COUNTED = FormatVariant(
    name="counted", pair_secondary_field=False, pair_count_prefix=True
)

DEFAULT_VARIANT = FormatVariant.RUN
