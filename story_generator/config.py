import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_LOG_LEVEL = "INFO"


def _first_env(*names: str) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


class Settings(BaseModel):
    api_key: str | None = None
    base_url: str | None = None
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, value: object) -> str:
        name = str(value or "").strip().upper()
        # getLevelName returns an int only for registered level names
        if isinstance(logging.getLevelName(name), int):
            return name
        return DEFAULT_LOG_LEVEL

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=_first_env("OPENAI_API_KEY", "LLM_API_KEY"),
            base_url=_first_env("OPENAI_BASE_URL", "LLM_BASE_URL"),
            model=_first_env("OPENAI_MODEL", "LLM_MODEL") or DEFAULT_MODEL,
            log_level=_first_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings.from_env()
