"""HTTP hosting for the chat widget.

Endpoints:
    - GET /: Chat page (NiceGUI, mounted in homework_chat.main)
    - GET /health: Service health status
"""

from homework_chat.api.app import create_app

__all__ = ["create_app"]
