# src/design_review/providers/openai_compat.py
import logging
from openai import AsyncOpenAI
from .base import LLMProvider


logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(LLMProvider):
    """Any chat-completions endpoint that speaks the OpenAI protocol."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", base_url: str | None = None):
        self.api_key = api_key
        self.model = model
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def complete(self, prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.2,
        )

        text = response.choices[0].message.content or ""
        logger.info(f"{self.model} response length: {len(text)} chars")

        if not text.strip():
            raise ValueError(f"{self.model} returned empty response")
        return text
