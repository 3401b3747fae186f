from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import openai
import pytest

from story_generator.config import Settings
from story_generator.errors import GENERIC_FAILURE_MESSAGE, ProviderError
from story_generator.llm.client import LLMClient
from story_generator.workflow import StoryWorkflow

from .fakes import status_error, timeout_error


class _Completions:
    def __init__(self, response: Any = None, error: BaseException | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def _openai(completions: _Completions) -> Any:
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def _response(content: str | None) -> Any:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_chat_text_sends_single_user_message(settings: Settings) -> None:
    completions = _Completions(response=_response("Once upon a time..."))
    client = LLMClient(settings, client=_openai(completions))

    assert client.chat_text("Write a story") == "Once upon a time..."
    assert completions.calls == [
        {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "Write a story"}],
            "temperature": 0.8,
        }
    ]


def test_missing_content_becomes_empty_string(settings: Settings) -> None:
    client = LLMClient(settings, client=_openai(_Completions(response=_response(None))))
    assert client.chat_text("Write a story") == ""


def test_no_choices_is_a_provider_error(settings: Settings) -> None:
    client = LLMClient(settings, client=_openai(_Completions(response=SimpleNamespace(choices=[]))))
    with pytest.raises(ProviderError) as raised:
        client.chat_text("Write a story")
    assert raised.value.code == "malformed_response"


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (status_error(openai.RateLimitError, 429, "insufficient_quota"), "insufficient_quota"),
        (status_error(openai.AuthenticationError, 401, "invalid_api_key"), "invalid_api_key"),
        (timeout_error(), None),
    ],
)
def test_sdk_errors_become_provider_errors(
    settings: Settings, error: BaseException, code: str | None
) -> None:
    client = LLMClient(settings, client=_openai(_Completions(error=error)))
    with pytest.raises(ProviderError) as raised:
        client.chat_text("Write a story")
    assert raised.value.code == code
    assert raised.value.__cause__ is error


def test_builds_sdk_client_from_settings() -> None:
    settings = Settings(api_key="sk-test", base_url="http://localhost:8080/v1", model="local-model")
    client = LLMClient(settings)
    assert client.model == "local-model"
    assert isinstance(client.client, openai.OpenAI)
    assert str(client.client.base_url).startswith("http://localhost:8080/v1")
    assert client.client.max_retries == 0


def test_malformed_response_is_logged_once(settings: Settings, caplog: pytest.LogCaptureFixture) -> None:
    openai_client = _openai(_Completions(response=SimpleNamespace(choices=[])))
    workflow = StoryWorkflow(
        settings, client_factory=lambda s: LLMClient(s, client=openai_client)
    )
    with caplog.at_level("DEBUG", logger="story_generator"):
        workflow.submit("lighthouse", "Horror")

    assert workflow.error_message == GENERIC_FAILURE_MESSAGE
    errors = [record for record in caplog.records if record.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].name == "story_generator.workflow.story_request"
