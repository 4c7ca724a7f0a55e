"""Provider implementations and adapter dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from turbine.registry import Provider

from .anthropic import AnthropicProvider
from .base import HTTPProvider, LLMProvider
from .gemini import GeminiProvider
from .openai import GroqProvider, OpenAIProvider

if TYPE_CHECKING:
    import httpx

ADAPTERS: dict[Provider, type[HTTPProvider]] = {
    Provider.OPENAI: OpenAIProvider,
    Provider.ANTHROPIC: AnthropicProvider,
    Provider.GEMINI: GeminiProvider,
    Provider.GROQ: GroqProvider,
}


def create_provider(
    provider: Provider,
    api_key: str | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> HTTPProvider:
    """Instantiate the adapter for *provider*.

    Without *api_key* the credential is read from the provider's
    environment variable.
    """
    return ADAPTERS[provider](api_key, http_client=http_client)


__all__ = [
    "ADAPTERS",
    "AnthropicProvider",
    "GeminiProvider",
    "GroqProvider",
    "HTTPProvider",
    "LLMProvider",
    "OpenAIProvider",
    "create_provider",
]
