"""Gemini ``generateContent`` provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from turbine.errors import InvalidResponseError, MissingFieldError
from turbine.models import OutputFormat, Response
from turbine.providers._http import JSON_CONTENT_TYPE, decode
from turbine.providers.base import HTTPProvider
from turbine.registry import Provider

if TYPE_CHECKING:
    from turbine.models import Request


class _Part(BaseModel):
    text: str


class _Content(BaseModel):
    parts: list[_Part] = []


class _Candidate(BaseModel):
    content: _Content


class _UsageMetadata(BaseModel):
    prompt_token_count: int = Field(alias="promptTokenCount")
    candidates_token_count: int = Field(alias="candidatesTokenCount")


class _GenerateContentResponse(BaseModel):
    candidates: list[_Candidate] = []
    usage_metadata: _UsageMetadata = Field(alias="usageMetadata")


def _wire_role(role: str) -> str:
    """Gemini knows only ``user`` and ``model``."""
    return "model" if role == "assistant" else "user"


class GeminiProvider(HTTPProvider):
    """Google Gemini API provider."""

    provider = Provider.GEMINI

    def build_payload(self, request: Request) -> dict[str, Any]:
        """Translate *request* into a ``generateContent`` body.

        The model name travels in the URL, not the body.
        """
        contents = [
            {"role": _wire_role(m.role), "parts": [{"text": m.content}]}
            for m in request.messages
            if m.role != "system"
        ]
        if not contents:
            raise MissingFieldError("at least one user or assistant message required")

        generation_config: dict[str, Any] = {}
        if request.temperature is not None:
            generation_config["temperature"] = request.temperature
        if request.top_p is not None:
            generation_config["topP"] = request.top_p
        if request.max_tokens is not None:
            generation_config["maxOutputTokens"] = request.max_tokens
        if request.output_format is OutputFormat.JSON:
            generation_config["responseMimeType"] = "application/json"

        payload: dict[str, Any] = {"contents": contents}
        if request.system_prompt is not None:
            payload["systemInstruction"] = {"parts": [{"text": request.system_prompt}]}
        payload["generationConfig"] = generation_config
        return payload

    def endpoint(self, request: Request) -> str:
        return f"{self.base_url}/models/{request.model}:generateContent"

    def headers(self) -> dict[str, str]:
        return {"x-goog-api-key": self.api_key, "Content-Type": JSON_CONTENT_TYPE}

    def parse_response(self, body: bytes) -> Response:
        result = decode(_GenerateContentResponse, body, provider=self.provider.value)
        if not result.candidates:
            raise InvalidResponseError("no candidates", provider=self.provider.value)
        parts = result.candidates[0].content.parts
        if not parts:
            raise InvalidResponseError("no parts", provider=self.provider.value)
        return Response.from_counts(
            parts[0].text,
            result.usage_metadata.prompt_token_count,
            result.usage_metadata.candidates_token_count,
        )
