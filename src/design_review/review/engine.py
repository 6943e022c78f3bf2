# src/design_review/review/engine.py
import asyncio
import yaml
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from design_review.documents.base import DocumentSource
from design_review.models.config import ProjectConfig
from design_review.models.request import ReviewRequest
from design_review.models.review import ReviewResult
from design_review.providers.base import LLMProvider
from .documents import MAX_DOC_LENGTH
from .prompts import generate_review_prompt, is_resume_mode


logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".design-review.yaml"


@dataclass
class RoundOutcome:
    """Result of running one review round."""
    round_number: int
    mode: str
    prompt: str
    result: ReviewResult


def load_project_config(yaml_content: str | None) -> ProjectConfig:
    """Parse .design-review.yaml content or fall back to defaults."""
    if not yaml_content:
        return ProjectConfig()

    try:
        data = yaml.safe_load(yaml_content) or {}
        return ProjectConfig(**data)
    except Exception as e:
        logger.warning(f"Invalid .design-review.yaml: {e}")
        return ProjectConfig()


def read_project_config(source: DocumentSource) -> ProjectConfig:
    """Load .design-review.yaml from the documents source, if it has one."""
    try:
        if not source.exists(CONFIG_FILENAME):
            return ProjectConfig()
        return load_project_config(source.read_text(CONFIG_FILENAME))
    except Exception as e:
        logger.warning(f"Could not read {CONFIG_FILENAME}: {e}")
        return ProjectConfig()


class ReviewEngine:
    def __init__(
        self,
        provider: LLMProvider,
        source: DocumentSource | None = None,
        max_doc_length: int = MAX_DOC_LENGTH,
        log_dir: str | None = None,
    ):
        self.provider = provider
        self.source = source
        self.max_doc_length = max_doc_length
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def build_prompt(
        self,
        request: ReviewRequest,
        changed_files: Sequence[str],
        history: Sequence[ReviewResult] | None = None,
        resume: bool = False,
    ) -> str:
        return generate_review_prompt(
            request,
            changed_files,
            history,
            resume,
            source=self.source,
            max_doc_length=self.max_doc_length,
        )

    async def run_round(
        self,
        request: ReviewRequest,
        changed_files: Sequence[str],
        history: Sequence[ReviewResult] | None = None,
        resume: bool = False,
    ) -> RoundOutcome:
        """Build the prompt for the next round and ask the provider for a review."""
        history = list(history or [])
        round_number = len(history) + 1
        mode = "resume" if is_resume_mode(history, resume) else "full"

        # Document reads block; keep them off the event loop
        prompt = await asyncio.to_thread(self.build_prompt, request, changed_files, history, resume)
        logger.info(f"Round {round_number} ({mode}): prompt {len(prompt)} chars, {len(changed_files)} changed files")
        self._save_prompt_log(round_number, mode, prompt)

        result = await self.provider.review(prompt)
        logger.info(f"Round {round_number} assessment: {result.overall_assessment.value}, {len(result.comments)} comments")

        return RoundOutcome(round_number=round_number, mode=mode, prompt=prompt, result=result)

    def _save_prompt_log(self, round_number: int, mode: str, prompt: str) -> None:
        """Save the prompt sent for one round."""
        if not self.log_dir:
            return
        try:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_path = self.log_dir / f"{timestamp}_round{round_number}.txt"

            header = f"Round: {round_number}\nMode: {mode}\nTime: {timestamp}\n\n"
            log_path.write_text(header + prompt, encoding="utf-8")
            logger.info(f"Prompt log saved: {log_path}")
        except Exception as e:
            logger.warning(f"Failed to save prompt log: {e}")
