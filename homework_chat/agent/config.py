"""Chat configuration with environment variable loading.

Pydantic-based session configuration for the homework assistant.
Values are read once at startup and never change afterwards.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "Qwen/Qwen2.5-72B-Instruct"

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful homework assistant for high school students. "
    "Provide clear, educational explanations that help students learn. "
    "Keep responses concise and encouraging."
)

DEFAULT_PROMPT_TEMPLATE = (
    "Explain [topic] to me step by step, with one example I can try myself."
)


class ChatConfig(BaseModel):
    """Session configuration for the homework chat widget.

    A missing API key is allowed here: the widget still starts and reports
    the problem when the first message is sent.

    Attributes:
        api_key: Hugging Face API key, or None when not configured.
        model_name: Model identifier on the inference endpoint.
        system_prompt: Fixed system instruction sent with every request.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        prompt_template: Text copied into the input by "Use template".
        title: Page and header title.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(
        default_factory=lambda: os.getenv("HF_API_KEY"),
        description="Hugging Face API key",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("HF_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System instruction sent before the user message",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("HF_TEMPERATURE", "0.7")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("HF_MAX_TOKENS", "250")),
        ge=1,
        le=32768,
        description="Maximum tokens in generated response",
    )
    prompt_template: str = Field(
        default=DEFAULT_PROMPT_TEMPLATE,
        description="Placeholder-style prompt offered by the template block",
    )
    title: str = Field(default="Homework Helper", description="Page title")

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str | None) -> str | None:
        """Strip the key and treat blank values as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()
