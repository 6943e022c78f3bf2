# src/design_review/providers/__init__.py
from .base import LLMProvider
from .gemini import GeminiProvider
from .openai_compat import OpenAICompatibleProvider

__all__ = ["LLMProvider", "GeminiProvider", "OpenAICompatibleProvider"]
