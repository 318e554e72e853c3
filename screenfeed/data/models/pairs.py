"""Pair snapshot data models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import MessageKind


class PairRecord(BaseModel):
    """Snapshot of a single tradable pair.

    Price and volume are the raw IEEE-754 values from the wire; NaN and
    infinities are kept as-is.
    """

    address: bytes = Field(..., min_length=32, max_length=32)
    secondary_field: bytes | None = Field(default=None, min_length=32, max_length=32)
    token_name: str
    token_symbol: str
    base_token_symbol: str
    price: float
    volume: float

    model_config = ConfigDict(frozen=True)

    @field_validator("token_name", "token_symbol", "base_token_symbol")
    @classmethod
    def validate_no_terminator(cls, v: str) -> str:
        """String fields never contain the terminator byte."""
        if "\x00" in v:
            raise ValueError("string field must not contain NUL")
        return v

    @property
    def address_hex(self) -> str:
        """Pair address as lowercase hex."""
        return self.address.hex()


class PairBatch(BaseModel):
    """Ordered batch of pair snapshots, in wire order."""

    version: str
    pairs: tuple[PairRecord, ...] = ()
    # Advisory count carried by the counted layout; None for a count-free run
    declared_count: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> MessageKind:
        return MessageKind.PAIRS

    def __len__(self) -> int:
        return len(self.pairs)
