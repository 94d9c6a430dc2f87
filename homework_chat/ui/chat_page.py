"""NiceGUI chat page: a thin adapter around ChatController."""

import logging

from nicegui import events, ui

from homework_chat.agent.chat_agent import get_completion_client
from homework_chat.agent.config import get_chat_config
from homework_chat.models.schemas import Message
from homework_chat.ui.controller import ChatController

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message { white-space: pre-wrap; max-width: 80%; }

    .user-message {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
        align-self: flex-end;
    }

    .ai-message {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
        align-self: flex-start;
    }

    .error-message {
        background: #fef2f2;
        color: #b91c1c;
        border: 1px solid #fecaca;
        border-radius: 8px;
    }

    .prompt-template {
        background: #f9fafb;
        border: 1px dashed #d1d5db;
        border-radius: 8px;
    }
</style>
"""

# Enter submits, Shift+Enter keeps the browser's newline
ENTER_KEY_HANDLER = """(e) => {
    if (!e.shiftKey) e.preventDefault();
    emit({key: e.key, shiftKey: e.shiftKey});
}"""


class NiceGuiChatView:
    """ChatView backed by NiceGUI elements."""

    def __init__(
        self,
        scroll_area: ui.scroll_area,
        transcript: ui.column,
        welcome: ui.element,
        input_field: ui.textarea,
        send_btn: ui.button,
        loading: ui.element,
    ) -> None:
        self._scroll_area = scroll_area
        self._transcript = transcript
        self._welcome = welcome
        self._input = input_field
        self._send_btn = send_btn
        self._loading = loading

    def show_message(self, message: Message) -> None:
        css = "user-message" if message.is_user else "ai-message"
        with self._transcript:
            ui.label(message.text).classes(f"message {css} px-4 py-3 text-sm")
        self._scroll_to_bottom()

    def show_error(self, text: str) -> None:
        with self._transcript:
            ui.label(text).classes("error-message w-full px-4 py-2 text-sm")
        self._scroll_to_bottom()

    def remove_welcome(self) -> None:
        self._welcome.delete()

    def set_loading(self, loading: bool) -> None:
        self._loading.set_visibility(loading)
        if loading:
            self._input.disable()
            self._send_btn.disable()
        else:
            self._input.enable()
            self._send_btn.enable()

    def set_input(self, value: str, cursor: int | None = None) -> None:
        self._input.set_value(value)
        if cursor is not None:
            # Runs after the new value has reached the browser
            ui.run_javascript(
                "setTimeout(() => {"
                f"const el = getHtmlElement({self._input.id}).querySelector('textarea');"
                f"el.focus(); el.setSelectionRange({cursor}, {cursor});"
                "}, 50);"
            )

    def clear_input(self) -> None:
        self._input.set_value("")

    def focus_input(self) -> None:
        self._input.run_method("focus")

    def _scroll_to_bottom(self) -> None:
        self._scroll_area.scroll_to(percent=1.0)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_chat_config()

    controller: ChatController

    async def send_message() -> None:
        await controller.submit(input_field.value or "")

    async def on_keydown(e: events.GenericEventArguments) -> None:
        await controller.handle_keydown(
            e.args.get("key", ""), bool(e.args.get("shiftKey")), input_field.value or ""
        )

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
            ui.icon("school").classes("text-white text-3xl")
            ui.label(config.title).classes("text-lg font-semibold text-white")

        # Transcript
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            with ui.column().classes("w-full p-5 gap-4") as transcript:
                with ui.column().classes(
                    "welcome-message w-full h-48 items-center justify-center gap-3"
                ) as welcome:
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Ask me anything about your homework!").classes(
                        "text-lg text-gray-400"
                    )

        # Template
        with ui.row().classes("w-full px-4 pt-3 items-center gap-3 bg-white border-t"):
            ui.label(config.prompt_template).classes(
                "prompt-template flex-grow px-3 py-2 text-sm text-gray-600"
            )
            template_btn = ui.button("Use template").props("flat dense no-caps")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white"):
            input_field = (
                ui.textarea(placeholder="Type your question...")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter", on_keydown, js_handler=ENTER_KEY_HANDLER)
            )
            loading = ui.spinner("dots", size="lg", color="primary")
            loading.set_visibility(False)
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "round unelevated color=primary"
            )

    view = NiceGuiChatView(
        scroll_area=scroll_area,
        transcript=transcript,
        welcome=welcome,
        input_field=input_field,
        send_btn=send_btn,
        loading=loading,
    )
    controller = ChatController(view, get_completion_client(config), config)
    template_btn.on_click(controller.use_template)
    controller.start()
    logger.debug("Chat page opened")

