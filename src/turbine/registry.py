"""Provider registry: supported vendors and model-string resolution.

Each :class:`Provider` carries two constant facts, the environment variable
holding its API key and the base URL of its HTTP API. :func:`resolve` turns a
free-form model string such as ``"google/gemini-flash"`` or
``"claude-3-5-sonnet"`` into a provider and the model name to send.
"""

from __future__ import annotations

from enum import Enum

from turbine.errors import ProviderInferenceError, UnknownProviderError


class Provider(Enum):
    """LLM vendors Turbine can talk to."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    GROQ = "groq"

    @property
    def env_var(self) -> str:
        """Environment variable that holds this provider's API key."""
        return _ENV_VARS[self]

    @property
    def base_url(self) -> str:
        """Base URL of this provider's HTTP API (no trailing slash)."""
        return _BASE_URLS[self]

    @classmethod
    def from_model_string(cls, model: str) -> tuple[Provider, str]:
        """Alias for :func:`resolve`."""
        return resolve(model)


_ENV_VARS: dict[Provider, str] = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.ANTHROPIC: "ANTHROPIC_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
    Provider.GROQ: "GROQ_API_KEY",
}

_BASE_URLS: dict[Provider, str] = {
    Provider.OPENAI: "https://api.openai.com/v1",
    Provider.ANTHROPIC: "https://api.anthropic.com/v1",
    Provider.GEMINI: "https://generativelanguage.googleapis.com/v1beta",
    Provider.GROQ: "https://api.groq.com/openai/v1",
}

# Explicit "prefix/model" forms.
_PREFIXES: dict[str, Provider] = {
    "openai": Provider.OPENAI,
    "anthropic": Provider.ANTHROPIC,
    "google": Provider.GEMINI,
    "gemini": Provider.GEMINI,
    "groq": Provider.GROQ,
}

# Bare model names, checked in order.
_NAME_HEURISTICS: tuple[tuple[tuple[str, ...], Provider], ...] = (
    (("gpt",), Provider.OPENAI),
    (("claude",), Provider.ANTHROPIC),
    (("gemini",), Provider.GEMINI),
    (("llama", "mixtral"), Provider.GROQ),
)


def env_var(provider: Provider) -> str:
    """Return the API key environment variable for *provider*."""
    return provider.env_var


def base_url(provider: Provider) -> str:
    """Return the API base URL for *provider*."""
    return provider.base_url


def list_providers() -> list[str]:
    """Return the supported provider identifiers."""
    return [p.value for p in Provider]


def resolve(model: str) -> tuple[Provider, str]:
    """Resolve a model string into ``(provider, model_name)``.

    ``"provider/model"`` selects the provider explicitly (split on the first
    slash, prefix matched case-insensitively) and returns the part after the
    slash. A bare name is matched against known model-family prefixes and
    returned unchanged.

    Raises:
        UnknownProviderError: The explicit prefix is not supported.
        ProviderInferenceError: A bare name matched no known family.
    """
    if "/" in model:
        prefix, model_name = model.split("/", 1)
        provider = _PREFIXES.get(prefix.lower())
        if provider is None:
            raise UnknownProviderError(prefix, tuple(_PREFIXES))
        return provider, model_name

    lowered = model.lower()
    for prefixes, provider in _NAME_HEURISTICS:
        if lowered.startswith(prefixes):
            return provider, model
    raise ProviderInferenceError(model)
