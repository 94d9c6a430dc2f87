"""Inference client for streamed chat completions.

The chat controller only depends on the CompletionClient protocol: anything
that turns an ordered list of turns into a lazy sequence of StreamChunks.
The default implementation drives an Agno agent backed by the Hugging Face
inference endpoint.

Requests are single-turn: the system instruction plus the current user
message. No session storage is attached to the agent, so nothing is
remembered between requests.
"""

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Protocol

from agno.agent import Agent
from agno.models.huggingface import HuggingFace
from agno.run.agent import RunEvent

from homework_chat.agent.config import ChatConfig, get_chat_config
from homework_chat.models.schemas import ChatTurn, StreamChunk

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Streaming chat-completion collaborator."""

    def stream(
        self,
        turns: Sequence[ChatTurn],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> AsyncIterator[StreamChunk]:
        """Start a streamed completion.

        Returns a finite, non-restartable async iterator of fragments.
        Failures are raised from the iterator.
        """
        ...


class CompletionStreamError(RuntimeError):
    """Raised when the agent reports an error event mid-stream."""

    pass


class AgnoCompletionClient:
    """CompletionClient backed by Agno's Hugging Face model.

    Wraps Agno's Agent with:
    - A fresh stateless agent per request, built from the request parameters
    - Content events translated into StreamChunks
    - Error events raised instead of being mixed into the response text
    """

    def __init__(self, api_key: str | None) -> None:
        """Initialize the client.

        Args:
            api_key: Hugging Face API key passed to the model.
        """
        self._api_key = api_key

    def _create_agent(
        self,
        system_message: str | None,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> Agent:
        """Create the Agno agent for one request.

        Returns:
            Agent with a Hugging Face model and the given system message.
        """
        hf_model = HuggingFace(
            id=model,
            api_key=self._api_key,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return Agent(
            model=hf_model,
            system_message=system_message,
            markdown=False,
        )

    async def stream(
        self,
        turns: Sequence[ChatTurn],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> AsyncIterator[StreamChunk]:
        """Stream response chunks for the given turns.

        Args:
            turns: System turns followed by the user turn.
            model: Model identifier.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.

        Yields:
            StreamChunks as they arrive.

        Raises:
            ValueError: If there is no user turn.
            CompletionStreamError: If the agent reports an error event.
        """
        system_parts = [t.content for t in turns if t.role == "system"]
        user_turns = [t for t in turns if t.role == "user"]
        if not user_turns:
            raise ValueError("At least one user turn is required")

        agent = self._create_agent(
            system_message="\n\n".join(system_parts) or None,
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
        )

        logger.debug(f"Starting streamed completion with {model}")
        async for event in agent.arun(user_turns[-1].content, stream=True):
            if event.event == RunEvent.run_error:
                raise CompletionStreamError(event.content or "Unknown error from model")
            if event.event == RunEvent.run_content:
                yield StreamChunk(content=event.content)


# Module-level singleton instance
_completion_client: AgnoCompletionClient | None = None


def get_completion_client(config: ChatConfig | None = None) -> AgnoCompletionClient:
    """Get or create the global completion client.

    Args:
        config: Optional chat configuration.
                Loads from environment if not provided.

    Returns:
        The AgnoCompletionClient instance.
    """
    global _completion_client
    if _completion_client is None:
        config = config or get_chat_config()
        _completion_client = AgnoCompletionClient(api_key=config.api_key)
    return _completion_client
