"""Vendor-neutral request and response models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_MAX_TOKENS = 1024


class OutputFormat(Enum):
    """Whether the model should answer in plain text or JSON."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class Message:
    """A single conversational turn.

    ``role`` is conventionally ``"user"``, ``"assistant"`` or ``"system"``.
    Other values are passed along and each provider falls back to its own
    default treatment for them.
    """

    role: str
    content: str = ""

    @classmethod
    def user(cls, content: str) -> Message:
        return cls("user", content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls("assistant", content)

    @classmethod
    def system(cls, content: str) -> Message:
        return cls("system", content)


@dataclass(frozen=True)
class Request:
    """An immutable chat request.

    Nothing is validated here; providers check their own preconditions when
    they translate the request. Every ``with_*`` method returns a new
    request and leaves the receiver untouched, so one request can be reused
    across calls and providers.

    Example:
        request = (
            Request("gpt-4o-mini")
            .with_system_prompt("You are a helpful assistant.")
            .with_message(Message.user("What is Rust?"))
            .with_max_tokens(100)
        )
    """

    model: str
    messages: tuple[Message, ...] = ()
    system_prompt: str | None = None
    max_tokens: int | None = DEFAULT_MAX_TOKENS
    temperature: float | None = None
    top_p: float | None = None
    output_format: OutputFormat = OutputFormat.TEXT

    def __post_init__(self) -> None:
        # Accept any iterable of messages but store a tuple.
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    def with_message(self, message: Message) -> Request:
        """Return a copy with *message* appended."""
        return replace(self, messages=(*self.messages, message))

    def with_messages(self, messages: Iterable[Message]) -> Request:
        """Return a copy whose messages are replaced by *messages*."""
        return replace(self, messages=tuple(messages))

    def with_system_prompt(self, prompt: str) -> Request:
        return replace(self, system_prompt=prompt)

    def with_max_tokens(self, max_tokens: int) -> Request:
        return replace(self, max_tokens=max_tokens)

    def with_temperature(self, temperature: float) -> Request:
        return replace(self, temperature=temperature)

    def with_top_p(self, top_p: float) -> Request:
        return replace(self, top_p=top_p)

    def with_output_format(self, output_format: OutputFormat) -> Request:
        return replace(self, output_format=output_format)


@dataclass(frozen=True)
class Usage:
    """Token counts as reported by the provider."""

    input_tokens: int
    output_tokens: int


@dataclass(frozen=True)
class Response:
    """A completed, provider-neutral response."""

    content: str
    usage: Usage

    @classmethod
    def from_counts(
        cls, content: str, input_tokens: int, output_tokens: int
    ) -> Response:
        """Build a response from raw token counts."""
        return cls(content=content, usage=Usage(input_tokens, output_tokens))
