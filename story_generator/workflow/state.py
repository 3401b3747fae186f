from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Union

from ..errors import StoryError


class RequestStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Idle:
    status: ClassVar[RequestStatus] = RequestStatus.IDLE


@dataclass(frozen=True)
class InFlight:
    status: ClassVar[RequestStatus] = RequestStatus.IN_FLIGHT


@dataclass(frozen=True)
class Failed:
    error: StoryError
    status: ClassVar[RequestStatus] = RequestStatus.ERROR

    @property
    def message(self) -> str:
        return self.error.user_message


@dataclass(frozen=True)
class Succeeded:
    text: str
    status: ClassVar[RequestStatus] = RequestStatus.SUCCESS


RequestState = Union[Idle, InFlight, Failed, Succeeded]


def split_paragraphs(story: str) -> List[str]:
    if not story:
        return []
    return story.splitlines()


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Everything the page shows, frozen at one point in time."""

    keywords: str
    genre: str
    state: RequestState
    story: str

    @property
    def loading(self) -> bool:
        return isinstance(self.state, InFlight)

    @property
    def error_message(self) -> str:
        return self.state.message if isinstance(self.state, Failed) else ""

    @property
    def paragraphs(self) -> List[str]:
        return split_paragraphs(self.story)
