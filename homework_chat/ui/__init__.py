"""Chat widget: controller core and NiceGUI presentation.

Responsibilities:
    - Request lifecycle (submit, stream, render, reset) in ChatController
    - Transcript, loading indicator and input handling on the page
    - Prompt template insertion

The controller holds all behaviour; the page only renders and forwards
events, so the core is testable without a browser.
"""

from homework_chat.ui.controller import ChatController, ChatView

__all__ = ["ChatController", "ChatView"]
