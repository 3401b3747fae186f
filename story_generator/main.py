import logging
from typing import List

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .config import Settings, load_settings
from .llm.client import LLMClient
from .llm.prompts import DEFAULT_GENRE, GENRES, Genre
from .render import render_page
from .workflow import Failed, StoryWorkflow
from .workflow.story_request import ClientFactory

logger = logging.getLogger(__name__)


class StoryRequest(BaseModel):
    keywords: str = Field(..., description="Free-form keywords for the story")
    genre: Genre = Field(DEFAULT_GENRE, description="One of the supported genres")


class StoryResponse(BaseModel):
    genre: str
    story: str
    paragraphs: List[str]


def _new_workflow(request: Request, story: str = "") -> StoryWorkflow:
    return StoryWorkflow(
        request.app.state.settings,
        client_factory=request.app.state.client_factory,
        story=story,
    )


def create_app(
    settings: Settings | None = None,
    client_factory: ClientFactory = LLMClient,
) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)
    if not settings.has_credential:
        logger.warning("OPENAI_API_KEY is not set; story generation is disabled")

    app = FastAPI(title="Story Generator", version="1.0.0")
    app.state.settings = settings
    app.state.client_factory = client_factory

    @app.get("/health")
    def health() -> dict:
        return {
            "status": "ok",
            "message": "Story Generator is running",
            "configured": settings.has_credential,
        }

    @app.get("/genres")
    def genres() -> dict:
        return {"genres": GENRES, "default": DEFAULT_GENRE}

    @app.get("/", response_class=HTMLResponse)
    def page(request: Request) -> str:
        return render_page(_new_workflow(request).snapshot())

    @app.post("/", response_class=HTMLResponse)
    def submit_form(
        request: Request,
        keywords: str = Form(""),
        genre: str = Form(DEFAULT_GENRE),
        story: str = Form(""),
    ) -> str:
        # form fields arrive with CRLF line endings
        workflow = _new_workflow(request, story=story.replace("\r\n", "\n"))
        workflow.submit(keywords, genre)
        return render_page(workflow.snapshot())

    @app.post("/generate", response_model=StoryResponse)
    def generate(request: Request, body: StoryRequest) -> StoryResponse:
        workflow = _new_workflow(request)
        state = workflow.submit(body.keywords, body.genre)
        if isinstance(state, Failed):
            raise HTTPException(
                status_code=state.error.status_code, detail=state.message
            ) from state.error
        return StoryResponse(
            genre=workflow.genre,
            story=workflow.story,
            paragraphs=workflow.paragraphs,
        )

    return app


app = create_app()
