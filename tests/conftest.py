"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Config with a test API key
    - view: Recording ChatView double
    - async_client: HTTPX client for API testing

Helpers:
    - RecordingView: ChatView that records every call in order
    - FakeCompletionClient: CompletionClient yielding scripted chunks
"""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator, Callable, Sequence
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from homework_chat.agent.config import ChatConfig
from homework_chat.api.app import create_app
from homework_chat.models.schemas import ChatTurn, Message, StreamChunk


class RecordingView:
    """ChatView double that records calls as (name, *args) tuples."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.input_value = ""
        self.cursor: int | None = None

    def show_message(self, message: Message) -> None:
        self.calls.append(("message", message))

    def show_error(self, text: str) -> None:
        self.calls.append(("error", text))

    def remove_welcome(self) -> None:
        self.calls.append(("remove_welcome",))

    def set_loading(self, loading: bool) -> None:
        self.calls.append(("loading", loading))

    def set_input(self, value: str, cursor: int | None = None) -> None:
        self.input_value = value
        self.cursor = cursor
        self.calls.append(("set_input", value, cursor))

    def clear_input(self) -> None:
        self.input_value = ""
        self.calls.append(("clear_input",))

    def focus_input(self) -> None:
        self.calls.append(("focus",))

    def named(self, name: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == name]

    @property
    def messages(self) -> list[Message]:
        return [c[1] for c in self.named("message")]

    @property
    def errors(self) -> list[str]:
        return [c[1] for c in self.named("error")]


class FakeCompletionClient:
    """CompletionClient double yielding scripted fragments.

    Args:
        chunks: Text deltas to yield (None yields a chunk without content).
        error: Exception raised after the chunks are yielded.
        gate: If given, the stream waits on it before yielding anything.
        on_chunk: Called before each chunk is yielded.
    """

    def __init__(
        self,
        chunks: Sequence[str | None] = (),
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
        on_chunk: Callable[[], None] | None = None,
    ) -> None:
        self.chunks = list(chunks)
        self.error = error
        self.gate = gate
        self.on_chunk = on_chunk
        self.started = asyncio.Event()
        self.calls: list[dict[str, Any]] = []

    async def stream(
        self,
        turns: Sequence[ChatTurn],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> AsyncIterator[StreamChunk]:
        self.calls.append(
            {
                "turns": list(turns),
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        for content in self.chunks:
            if self.on_chunk is not None:
                self.on_chunk()
            yield StreamChunk(content=content)
        if self.error is not None:
            raise self.error


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return config with a test API key and a bracketed template."""
    return ChatConfig(
        api_key="hf_test_key",
        model_name="test/model",
        max_tokens=250,
        temperature=0.7,
        prompt_template="Explain [topic] to me",
    )


@pytest.fixture
def view() -> RecordingView:
    """Return a fresh recording view."""
    return RecordingView()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
