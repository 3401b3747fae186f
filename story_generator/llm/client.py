from typing import Any, Dict

from openai import OpenAI, OpenAIError

from ..config import Settings
from ..errors import ProviderError
from .prompts import STORY_TEMPERATURE


class LLMClient:
    def __init__(self, settings: Settings, client: OpenAI | None = None) -> None:
        self.model = settings.model
        if client is None:
            kwargs: Dict[str, Any] = {"api_key": settings.api_key, "max_retries": 0}
            if settings.base_url:
                kwargs["base_url"] = settings.base_url
            client = OpenAI(**kwargs)
        self.client = client

    def chat_text(self, user_prompt: str, temperature: float = STORY_TEMPERATURE) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": user_prompt}],
                temperature=temperature,
            )
        except OpenAIError as exc:
            raise ProviderError.from_exception(exc) from exc
        try:
            return response.choices[0].message.content or ""
        except (IndexError, AttributeError, TypeError) as exc:
            raise ProviderError("malformed_response") from exc
