from typing import Any

QUOTA_EXCEEDED_MESSAGE = "OpenAI API quota exceeded. Please check your billing details."
INVALID_KEY_MESSAGE = "Invalid OpenAI API key. Please check your configuration."
GENERIC_FAILURE_MESSAGE = "Failed to generate story. Please try again later."

PROVIDER_MESSAGES = {
    "insufficient_quota": QUOTA_EXCEEDED_MESSAGE,
    "invalid_api_key": INVALID_KEY_MESSAGE,
}


class StoryError(Exception):
    """Base error; ``user_message`` is safe to show on the page."""

    status_code = 500

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class ValidationError(StoryError):
    status_code = 400


class ConfigurationError(StoryError):
    status_code = 503


class ProviderError(StoryError):
    status_code = 502

    def __init__(self, code: str | None = None) -> None:
        super().__init__(PROVIDER_MESSAGES.get(code or "", GENERIC_FAILURE_MESSAGE))
        self.code = code

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ProviderError":
        if isinstance(exc, ProviderError):
            return exc
        return cls(error_code(exc))


def error_code(exc: BaseException) -> str | None:
    """Structured provider code of a failure, if it carries one.

    ``openai.APIError`` exposes it as ``code``; older payloads only have it
    inside ``body``.
    """
    code: Any = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error", body)
        if isinstance(nested, dict) and isinstance(nested.get("code"), str):
            return nested["code"]
    return None
