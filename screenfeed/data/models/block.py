"""Block hash heartbeat data model."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import MessageKind


class BlockHeartbeat(BaseModel):
    """Latest block number and hash announced by the feed."""

    version: str
    endpoint: str = ""
    latest_block: int = Field(..., ge=0, lt=2**32)
    hash: bytes = Field(..., min_length=32, max_length=32)

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> MessageKind:
        return MessageKind.BLOCK_HEARTBEAT

    @property
    def hash_hex(self) -> str:
        """Block hash as lowercase hex."""
        return self.hash.hex()
