"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the chat widget.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from homework_chat.agent.config import get_chat_config
    from homework_chat.api.app import create_app
    from homework_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_chat_config()
    if not config.has_credential:
        logger.warning("HF_API_KEY is not set; messages will be rejected until it is")

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=config.title,
        favicon="🎓",
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
