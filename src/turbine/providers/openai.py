"""OpenAI Chat Completions provider (also serves Groq)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from turbine.errors import InvalidResponseError
from turbine.models import OutputFormat, Response
from turbine.providers._http import JSON_CONTENT_TYPE, decode
from turbine.providers.base import HTTPProvider
from turbine.registry import Provider

if TYPE_CHECKING:
    from turbine.models import Request

JSON_INSTRUCTION = "You must respond with valid JSON only."


class _MessageContent(BaseModel):
    content: str


class _Choice(BaseModel):
    message: _MessageContent


class _UsageInfo(BaseModel):
    prompt_tokens: int
    completion_tokens: int


class _ChatCompletion(BaseModel):
    choices: list[_Choice] = []
    usage: _UsageInfo


class OpenAIProvider(HTTPProvider):
    """OpenAI-compatible ``/chat/completions`` provider."""

    provider = Provider.OPENAI

    def build_payload(self, request: Request) -> dict[str, Any]:
        """Translate *request* into a Chat Completions body.

        The system prompt becomes a leading ``system`` message even if the
        conversation already contains one. JSON mode adds an instruction to
        the leading system message (creating one if needed) and sets
        ``response_format``.
        """
        messages = [{"role": m.role, "content": m.content} for m in request.messages]

        if request.system_prompt is not None:
            messages.insert(0, {"role": "system", "content": request.system_prompt})

        json_mode = request.output_format is OutputFormat.JSON
        if json_mode:
            if messages and messages[0]["role"] == "system":
                first = messages[0]
                messages[0] = {
                    "role": "system",
                    "content": f"{first['content']} {JSON_INSTRUCTION}",
                }
            else:
                messages.insert(0, {"role": "system", "content": JSON_INSTRUCTION})

        payload: dict[str, Any] = {"model": request.model, "messages": messages}
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        if request.top_p is not None:
            payload["top_p"] = request.top_p
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    def endpoint(self, request: Request) -> str:
        return f"{self.base_url}/chat/completions"

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def parse_response(self, body: bytes) -> Response:
        completion = decode(_ChatCompletion, body, provider=self.provider.value)
        if not completion.choices:
            raise InvalidResponseError("no choices", provider=self.provider.value)
        return Response.from_counts(
            completion.choices[0].message.content,
            completion.usage.prompt_tokens,
            completion.usage.completion_tokens,
        )


class GroqProvider(OpenAIProvider):
    """Groq, which serves the OpenAI wire format under its own base URL."""

    provider = Provider.GROQ
