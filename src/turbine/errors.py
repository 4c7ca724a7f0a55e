"""Exception hierarchy for Turbine."""

from __future__ import annotations


class TurbineError(Exception):
    """Base exception for all Turbine errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class CredentialNotFoundError(TurbineError):
    """A provider API key could not be found or was entered empty."""

    def __init__(self, env_var: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"API key not found for provider: {env_var}",
            hint=hint or f"Set {env_var} or pass api_key=...",
        )
        self.env_var = env_var


class TransportError(TurbineError):
    """The HTTP call itself failed (connection, timeout, TLS)."""

    def __init__(
        self, message: str, *, hint: str | None = None, provider: str | None = None
    ) -> None:
        super().__init__(f"HTTP request failed: {message}", hint=hint)
        self.provider = provider


class DecodeError(TurbineError):
    """The response body was not JSON of the expected shape."""

    def __init__(
        self, message: str, *, hint: str | None = None, provider: str | None = None
    ) -> None:
        super().__init__(f"JSON parsing failed: {message}", hint=hint)
        self.provider = provider


class APIError(TurbineError):
    """The provider answered with a non-success status.

    ``body`` holds the raw response text so callers can inspect the
    vendor's own error payload.
    """

    def __init__(
        self,
        body: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
        provider: str | None = None,
    ) -> None:
        super().__init__(f"API returned error: {body}", hint=hint)
        self.body = body
        self.status_code = status_code
        self.provider = provider


class InvalidResponseError(TurbineError):
    """A parsed response lacked a structural element (choices, parts...)."""

    def __init__(
        self, reason: str, *, hint: str | None = None, provider: str | None = None
    ) -> None:
        super().__init__(f"Invalid response format: {reason}", hint=hint)
        self.reason = reason
        self.provider = provider


class MissingFieldError(TurbineError):
    """A caller-supplied request violated a precondition."""

    def __init__(self, reason: str, *, hint: str | None = None) -> None:
        super().__init__(f"Missing required field: {reason}", hint=hint)
        self.reason = reason


class UnknownProviderError(TurbineError):
    """An explicit ``provider/`` prefix is not one Turbine supports."""

    def __init__(self, prefix: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown provider prefix: {prefix}. Supported: {', '.join(supported)}",
            hint="Use one of the supported prefixes, e.g. 'openai/gpt-4o-mini'.",
        )
        self.prefix = prefix
        self.supported = supported


class ProviderInferenceError(TurbineError):
    """No provider could be inferred from a bare model name."""

    def __init__(self, model: str) -> None:
        super().__init__(
            f"Cannot infer provider from model name: {model}. "
            "Use format 'provider/model' (e.g., 'openai/gpt-4')",
            hint="Prefix the model with its provider, e.g. 'groq/qwen-2.5-32b'.",
        )
        self.model = model
