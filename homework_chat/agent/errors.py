"""Error types surfaced to the chat user.

Every failure of a chat request ends up as one of these, carrying a message
that can be shown in the transcript as-is.
"""

MISSING_CREDENTIAL_MESSAGE = (
    "API key not found! Make sure you created a .env file with HF_API_KEY."
)
INVALID_CREDENTIAL_MESSAGE = (
    "Invalid API key. Please check your .env file and make sure HF_API_KEY is set correctly."
)
MODEL_WARMING_UP_MESSAGE = "Model is loading. Please wait a moment and try again."


class ChatError(Exception):
    """Base class for failures shown to the user as an error banner."""

    pass


class MissingCredentialError(ChatError):
    """Raised when no API key is configured."""

    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE) -> None:
        super().__init__(message)


class InvalidCredentialError(ChatError):
    """Raised when the inference endpoint rejects the API key."""

    def __init__(self, message: str = INVALID_CREDENTIAL_MESSAGE) -> None:
        super().__init__(message)


class ModelWarmingUpError(ChatError):
    """Raised when the model is still being loaded on the endpoint."""

    def __init__(self, message: str = MODEL_WARMING_UP_MESSAGE) -> None:
        super().__init__(message)


class CompletionFailedError(ChatError):
    """Raised for any other failure while getting a response."""

    pass


def classify_error(error: BaseException) -> ChatError:
    """Map an inference client error to a user-facing ChatError.

    The endpoint does not expose stable error codes, so this matches on the
    error text. Unrelated errors mentioning "API key" or "loading" will be
    misclassified.

    Args:
        error: The exception raised by the inference client.

    Returns:
        The classified ChatError (not raised).
    """
    if isinstance(error, ChatError):
        return error

    message = str(error)
    if "API key" in message:
        return InvalidCredentialError()
    if "loading" in message:
        return ModelWarmingUpError()
    return CompletionFailedError(f"Failed to get AI response: {message}")
