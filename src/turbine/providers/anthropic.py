"""Anthropic Messages API provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from turbine.errors import InvalidResponseError, MissingFieldError
from turbine.models import DEFAULT_MAX_TOKENS, OutputFormat, Response
from turbine.providers._http import JSON_CONTENT_TYPE, decode
from turbine.providers.base import HTTPProvider
from turbine.registry import Provider

if TYPE_CHECKING:
    from turbine.models import Request

ANTHROPIC_VERSION = "2023-06-01"
# Anthropic has no wire-level JSON mode; steer through the system prompt.
JSON_INSTRUCTION = (
    "You must respond with valid JSON only. Start your response with an opening brace {."
)


class _ContentBlock(BaseModel):
    text: str


class _UsageInfo(BaseModel):
    input_tokens: int
    output_tokens: int


class _MessagesResponse(BaseModel):
    content: list[_ContentBlock] = []
    usage: _UsageInfo


class AnthropicProvider(HTTPProvider):
    """Anthropic ``/messages`` provider."""

    provider = Provider.ANTHROPIC

    def build_payload(self, request: Request) -> dict[str, Any]:
        """Translate *request* into a Messages API body.

        ``system`` messages are dropped from the conversation since the API
        only accepts a top-level ``system`` field.
        """
        messages = [
            {"role": m.role, "content": m.content}
            for m in request.messages
            if m.role != "system"
        ]
        if not messages:
            raise MissingFieldError("at least one user or assistant message required")

        system = request.system_prompt
        if request.output_format is OutputFormat.JSON:
            system = f"{system} {JSON_INSTRUCTION}" if system else JSON_INSTRUCTION

        payload: dict[str, Any] = {
            "model": request.model,
            "messages": messages,
            "max_tokens": (
                request.max_tokens
                if request.max_tokens is not None
                else DEFAULT_MAX_TOKENS
            ),
        }
        if system:
            payload["system"] = system
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        if request.top_p is not None:
            payload["top_p"] = request.top_p
        return payload

    def endpoint(self, request: Request) -> str:
        return f"{self.base_url}/messages"

    def headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def parse_response(self, body: bytes) -> Response:
        message = decode(_MessagesResponse, body, provider=self.provider.value)
        if not message.content:
            raise InvalidResponseError(
                "no content in response", provider=self.provider.value
            )
        return Response.from_counts(
            message.content[0].text,
            message.usage.input_tokens,
            message.usage.output_tokens,
        )
