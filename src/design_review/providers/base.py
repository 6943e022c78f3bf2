# src/design_review/providers/base.py
from abc import ABC, abstractmethod
from design_review.models.review import ReviewResult
from design_review.review.parser import parse_review_response


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send prompt to LLM and return the raw response text."""
        pass

    async def review(self, prompt: str) -> ReviewResult:
        """Send prompt to LLM and return parsed review result."""
        return parse_review_response(await self.complete(prompt))
