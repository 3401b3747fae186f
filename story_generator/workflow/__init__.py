from .state import Failed, Idle, InFlight, RequestStatus, Succeeded, WorkflowSnapshot
from .story_request import StoryWorkflow

__all__ = [
    "StoryWorkflow",
    "RequestStatus",
    "Idle",
    "InFlight",
    "Failed",
    "Succeeded",
    "WorkflowSnapshot",
]
