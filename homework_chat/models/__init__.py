"""Pydantic models for the chat transcript and streaming.

Models:
    - Message: Immutable transcript entry (user or assistant)
    - Role: Transcript speaker
    - RequestState: Idle or sending
    - ChatTurn: Entry of the message list sent to the model
    - StreamChunk: One streamed text fragment
"""

from homework_chat.models.schemas import (
    ChatTurn,
    Message,
    RequestState,
    Role,
    StreamChunk,
)

__all__ = ["ChatTurn", "Message", "RequestState", "Role", "StreamChunk"]
