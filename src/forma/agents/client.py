"""Generative model client.

Gemini is reached through its OpenAI-compatible endpoint, so the stock
``openai`` async client is used with a swapped ``base_url``.
"""

from typing import Callable, Protocol

from openai import AsyncOpenAI

from ..config import DEFAULT_BASE_URL, ApiCredential


class GenerationClient(Protocol):
    """Anything that can turn a prompt into a JSON text reply."""

    async def generate_json(self, prompt: str) -> str: ...


# Builds a client for one credential pool entry
ClientFactory = Callable[[ApiCredential], GenerationClient]


class GeminiClient:
    """JSON-mode completions against one API key and model."""

    def __init__(self, api_key: str, model: str, base_url: str = DEFAULT_BASE_URL):
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def generate_json(self, prompt: str) -> str:
        """Send a single user prompt and return the raw reply text."""
        response = await self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
        )
        return response.choices[0].message.content or ""


def gemini_client_factory(base_url: str = DEFAULT_BASE_URL) -> ClientFactory:
    """Factory producing a GeminiClient per credential."""

    def create(credential: ApiCredential) -> GenerationClient:
        return GeminiClient(api_key=credential.key, model=credential.model, base_url=base_url)

    return create
