"""Inference logic for the homework assistant.

Responsibilities:
    - Session configuration loaded from the environment
    - Streaming completions from the Hugging Face endpoint via Agno
    - Classification of inference errors into user-facing messages

Maintains clean separation from the UI layer.
"""

from homework_chat.agent.chat_agent import (
    AgnoCompletionClient,
    CompletionClient,
    get_completion_client,
)
from homework_chat.agent.config import ChatConfig, get_chat_config
from homework_chat.agent.errors import ChatError, classify_error

__all__ = [
    "AgnoCompletionClient",
    "ChatConfig",
    "ChatError",
    "CompletionClient",
    "classify_error",
    "get_chat_config",
    "get_completion_client",
]
