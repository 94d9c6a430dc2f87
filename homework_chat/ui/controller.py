"""Chat controller: the request/response/error lifecycle of the widget.

The controller owns the transcript, the request state and the wiring to the
inference client. It never touches NiceGUI directly; the page implements the
ChatView protocol and forwards UI events as commands (submit, keydown,
use_template).
"""

import logging
from collections.abc import AsyncIterable
from typing import Protocol

from homework_chat.agent.chat_agent import CompletionClient
from homework_chat.agent.config import ChatConfig
from homework_chat.agent.errors import ChatError, MissingCredentialError, classify_error
from homework_chat.models.schemas import (
    ChatTurn,
    Message,
    RequestState,
    Role,
    StreamChunk,
)

logger = logging.getLogger(__name__)

ERROR_PREFIX = "⚠️ Error: "
NO_RESPONSE_TEXT = "No response generated."


class ChatView(Protocol):
    """Display surface driven by the controller."""

    def show_message(self, message: Message) -> None: ...

    def show_error(self, text: str) -> None: ...

    def remove_welcome(self) -> None: ...

    def set_loading(self, loading: bool) -> None: ...

    def set_input(self, value: str, cursor: int | None = None) -> None: ...

    def clear_input(self) -> None: ...

    def focus_input(self) -> None: ...


async def accumulate(chunks: AsyncIterable[StreamChunk]) -> str:
    """Concatenate the text of streamed chunks in arrival order.

    Chunks without content are skipped.
    """
    parts: list[str] = []
    async for chunk in chunks:
        if chunk.content:
            parts.append(chunk.content)
    return "".join(parts)


def template_cursor(template: str) -> int | None:
    """Cursor position just after the first "[" of a template, if any."""
    index = template.find("[")
    if index == -1:
        return None
    return index + 1


class ChatController:
    """Handles user commands for one chat widget.

    One controller is created per page load. At most one request is in
    flight at a time; while sending, the view keeps input disabled.

    Attributes:
        messages: Transcript in insertion order.
        state: Current request state.
        welcome_visible: Whether the welcome placeholder is still shown.
    """

    def __init__(
        self,
        view: ChatView,
        client: CompletionClient,
        config: ChatConfig,
    ) -> None:
        self._view = view
        self._client = client
        self._config = config
        self.messages: list[Message] = []
        self.state = RequestState.IDLE
        self.welcome_visible = True

    @property
    def is_sending(self) -> bool:
        return self.state == RequestState.SENDING

    def start(self) -> None:
        """Prepare the widget after the page is built."""
        self._view.focus_input()

    async def submit(self, raw_text: str) -> None:
        """Send a user message and render the response or an error.

        Blank input and submissions while a request is in flight are
        ignored. Failures are rendered as banners and never raised.

        Args:
            raw_text: Text as typed in the input field.
        """
        text = raw_text.strip()
        if not text or self.is_sending:
            return

        if not self._config.has_credential:
            logger.warning("Message not sent: no API key configured")
            self._show_error(MissingCredentialError())
            return

        self._append(Message(role=Role.USER, text=text))
        self._view.clear_input()
        self._set_state(RequestState.SENDING)

        try:
            response = await self.completion(text)
            self._append(Message(role=Role.ASSISTANT, text=response))
        except ChatError as e:
            self._show_error(e)
        finally:
            self._set_state(RequestState.IDLE)
            self._view.focus_input()

    async def completion(self, user_text: str) -> str:
        """Stream a completion for the user text and return the full reply.

        Args:
            user_text: Trimmed user message.

        Returns:
            The concatenated response, or a fallback text when the stream
            carried no content.

        Raises:
            ChatError: Classified failure of the inference client.
        """
        turns = [
            ChatTurn(role="system", content=self._config.system_prompt),
            ChatTurn(role="user", content=user_text),
        ]
        try:
            stream = self._client.stream(
                turns,
                model=self._config.model_name,
                max_tokens=self._config.max_tokens,
                temperature=self._config.temperature,
            )
            response = await accumulate(stream)
        except Exception as e:
            logger.exception(f"Error calling AI API: {e}")
            raise classify_error(e) from e

        logger.info(f"Received response of {len(response)} characters")
        return response or NO_RESPONSE_TEXT

    async def handle_keydown(self, key: str, shift: bool, raw_text: str) -> None:
        """Submit on Enter; Shift+Enter is left to the input as a newline."""
        if key == "Enter" and not shift:
            await self.submit(raw_text)

    def use_template(self) -> None:
        """Copy the prompt template into the input, cursor inside the first placeholder."""
        template = self._config.prompt_template
        self._view.set_input(template, cursor=template_cursor(template))
        self._view.focus_input()

    def _append(self, message: Message) -> None:
        self.messages.append(message)
        self._view.show_message(message)
        if self.welcome_visible:
            self._view.remove_welcome()
            self.welcome_visible = False

    def _show_error(self, error: ChatError) -> None:
        self._view.show_error(f"{ERROR_PREFIX}{error}")

    def _set_state(self, state: RequestState) -> None:
        self.state = state
        self._view.set_loading(state == RequestState.SENDING)
