import logging
from typing import Callable, List

from ..config import Settings
from ..errors import ConfigurationError, ProviderError, StoryError, ValidationError
from ..llm.client import LLMClient
from ..llm.prompts import DEFAULT_GENRE, GENRES, build_story_prompt
from .state import (
    Failed,
    Idle,
    InFlight,
    RequestState,
    Succeeded,
    WorkflowSnapshot,
    split_paragraphs,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], LLMClient]


class StoryWorkflow:
    """Keywords, genre and one generation request at a time.

    ``submit`` never raises: every outcome ends up in ``state`` as either
    ``Succeeded`` or ``Failed``.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = LLMClient,
        story: str = "",
    ) -> None:
        self.settings = settings
        self.client_factory = client_factory
        self.keywords = ""
        self.genre = DEFAULT_GENRE
        self.story = story
        self.state: RequestState = Idle()

    @property
    def can_submit(self) -> bool:
        return not isinstance(self.state, InFlight)

    @property
    def error_message(self) -> str:
        return self.state.message if isinstance(self.state, Failed) else ""

    @property
    def paragraphs(self) -> List[str]:
        return split_paragraphs(self.story)

    def set_keywords(self, keywords: str) -> None:
        self.keywords = keywords

    def select_genre(self, genre: str) -> None:
        if genre not in GENRES:
            raise ValidationError(f"Unknown genre: {genre}")
        self.genre = genre

    def snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            keywords=self.keywords,
            genre=self.genre,
            state=self.state,
            story=self.story,
        )

    def submit(self, keywords: str | None = None, genre: str | None = None) -> RequestState:
        if not self.can_submit:
            logger.warning("Ignoring submission while a story request is in flight")
            return self.state

        try:
            if keywords is not None:
                self.set_keywords(keywords)
            if genre is not None:
                self.select_genre(genre)
            self._check_preconditions()
        except StoryError as exc:
            self.state = Failed(exc)
            return self.state

        self.state = InFlight()
        logger.info("Generating %s story for keywords %r", self.genre, self.keywords)
        try:
            text = self._generate()
        except StoryError as exc:
            self.state = Failed(exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Story generation failed")
            self.state = Failed(ProviderError.from_exception(exc))
        else:
            if not text:
                logger.warning("Provider returned an empty story for %s", self.genre)
            self.story = text
            self.state = Succeeded(text)
        return self.state

    def _check_preconditions(self) -> None:
        if not self.keywords.strip():
            raise ValidationError("Please enter some keywords")
        if not self.settings.has_credential:
            raise ConfigurationError("OpenAI API key is not configured")

    def _generate(self) -> str:
        prompt = build_story_prompt(self.genre, self.keywords)
        try:
            client = self.client_factory(self.settings)
            return client.chat_text(prompt)
        except ProviderError as exc:
            logger.exception("Story generation failed (code=%s)", exc.code)
            raise
