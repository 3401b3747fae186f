from __future__ import annotations

import pytest

from story_generator.config import Settings

from .fakes import FakeLLMClient


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="sk-test", model="gpt-3.5-turbo")


@pytest.fixture
def fake_client() -> FakeLLMClient:
    return FakeLLMClient()
