# src/design_review/main.py
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from functools import lru_cache
from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field, model_validator
from unidiff.errors import UnidiffParseError

from design_review import __version__
from design_review.config import Settings
from design_review.documents import DocumentSource, InMemoryDocumentSource, LocalDocumentSource
from design_review.models.request import ReviewRequest
from design_review.models.review import ReviewResult
from design_review.providers.base import LLMProvider
from design_review.providers.gemini import GeminiProvider
from design_review.providers.openai_compat import OpenAICompatibleProvider
from design_review.review.engine import ReviewEngine, load_project_config, read_project_config
from design_review.review.parser import changed_files_from_diff
from design_review.review.prompts import generate_review_prompt, is_resume_mode


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger().setLevel(get_settings().log_level.upper())
    logger.info("Design Review starting...")
    yield
    logger.info("Design Review shutting down...")


app = FastAPI(title="Design Review", lifespan=lifespan)


class RoundRequest(BaseModel):
    request: ReviewRequest
    changed_files: list[str] | None = None
    diff: str | None = None
    previous_rounds: list[ReviewResult] = Field(default_factory=list)
    resume: bool = False
    # Inline document bodies keyed by path; replaces the docs_root lookup
    documents: dict[str, str] | None = None
    # .design-review.yaml content; read from the documents source when omitted
    config_yaml: str | None = None

    @model_validator(mode="after")
    def check_params(self):
        if self.changed_files is None and not self.diff:
            raise ValueError("Either changed_files or diff required")
        return self

    def resolve_changed_files(self) -> list[str]:
        if self.changed_files is not None:
            return self.changed_files
        return changed_files_from_diff(self.diff)


class PromptResponse(BaseModel):
    mode: str
    prompt: str
    length: int


class ReviewResponse(BaseModel):
    status: str
    mode: str | None = None
    result: ReviewResult | None = None
    error: str | None = None


def get_provider(settings: Settings) -> LLMProvider | None:
    """Get LLM provider based on settings."""
    if settings.default_provider == "gemini" and settings.gemini_api_key:
        return GeminiProvider(api_key=settings.gemini_api_key, model=settings.gemini_model)
    elif settings.default_provider == "openai" and settings.openai_api_key:
        return OpenAICompatibleProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )
    return None


def get_document_source(settings: Settings, body: RoundRequest) -> DocumentSource:
    if body.documents is not None:
        return InMemoryDocumentSource(body.documents)
    return LocalDocumentSource(settings.docs_root)


@dataclass
class PreparedRound:
    request: ReviewRequest
    source: DocumentSource
    max_doc_length: int


def prepare_round(settings: Settings, body: RoundRequest) -> PreparedRound:
    """Merge project config defaults into the request and pick the document limit."""
    source = get_document_source(settings, body)
    if body.config_yaml is not None:
        config = load_project_config(body.config_yaml)
    else:
        config = read_project_config(source)

    return PreparedRound(
        request=config.apply(body.request),
        source=source,
        max_doc_length=config.max_doc_length or settings.max_doc_length,
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post("/api/prompt", response_model=PromptResponse)
def build_prompt(body: RoundRequest):
    """Build the reviewer prompt without calling an LLM."""
    settings = get_settings()
    try:
        changed_files = body.resolve_changed_files()
    except UnidiffParseError as e:
        raise HTTPException(status_code=422, detail=f"Invalid diff: {e}")

    prepared = prepare_round(settings, body)
    prompt = generate_review_prompt(
        prepared.request,
        changed_files,
        body.previous_rounds,
        body.resume,
        source=prepared.source,
        max_doc_length=prepared.max_doc_length,
    )
    mode = "resume" if is_resume_mode(body.previous_rounds, body.resume) else "full"

    return PromptResponse(mode=mode, prompt=prompt, length=len(prompt))


@app.post("/api/review", response_model=ReviewResponse)
async def trigger_review(body: RoundRequest):
    """Run one review round through the configured LLM provider."""
    settings = get_settings()

    provider = get_provider(settings)
    if not provider:
        return ReviewResponse(status="error", error="No LLM provider configured")

    try:
        prepared = await run_in_threadpool(prepare_round, settings, body)
        engine = ReviewEngine(
            provider=provider,
            source=prepared.source,
            max_doc_length=prepared.max_doc_length,
            log_dir=settings.log_dir,
        )
        outcome = await engine.run_round(
            prepared.request,
            body.resolve_changed_files(),
            body.previous_rounds,
            body.resume,
        )
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        return ReviewResponse(status="error", error=str(e))

    return ReviewResponse(status="completed", mode=outcome.mode, result=outcome.result)
