from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class RequestState(str, Enum):
    """Whether a chat request is currently in flight."""

    IDLE = "idle"
    SENDING = "sending"


class Message(BaseModel):
    """A single transcript entry.

    Messages are immutable once created.

    Attributes:
        role: Who wrote the message.
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str

    @property
    def is_user(self) -> bool:
        return self.role == Role.USER


class ChatTurn(BaseModel):
    """One entry of the message list sent to the inference endpoint.

    Attributes:
        role: system or user; requests are single-turn.
        content: The text of the turn.
    """

    role: Literal["system", "user"] = Field(..., description="Message role: 'system' or 'user'")
    content: str


class StreamChunk(BaseModel):
    """A fragment of a streamed completion.

    Attributes:
        content: The text delta carried by this fragment, if any.
    """

    content: str | None = None
