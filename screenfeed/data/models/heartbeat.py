"""Keep-alive ping data model."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import MessageKind


class Heartbeat(BaseModel):
    """Keep-alive ping; content is the frame text after the tag."""

    content: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> MessageKind:
        return MessageKind.PING
