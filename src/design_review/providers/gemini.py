# src/design_review/providers/gemini.py
import httpx
from .base import LLMProvider


class GeminiProvider(LLMProvider):
    API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", timeout: float = 120.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    async def complete(self, prompt: str) -> str:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.API_URL.format(model=self.model),
                params={"key": self.api_key},
                json={
                    "contents": [{
                        "parts": [{"text": prompt}]
                    }],
                    "generationConfig": {"responseMimeType": "application/json"},
                },
                timeout=self.timeout,
            )
            response.raise_for_status()

        data = response.json()
        return data["candidates"][0]["content"]["parts"][0]["text"]
