"""Test helpers (small, reusable doubles).

``RecordingTransport`` stands in for the network: it records every request
an adapter sends and answers with a scripted status and body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any

import httpx


@dataclass
class RecordingTransport:
    """Scripted ``httpx.MockTransport`` handler that keeps the requests it saw."""

    status_code: int = 200
    body: dict[str, Any] | str = field(default_factory=dict)
    error: httpx.HTTPError | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


OPENAI_OK = {
    "choices": [{"message": {"content": "Hi Alice"}}],
    "usage": {"prompt_tokens": 12, "completion_tokens": 3},
}

ANTHROPIC_OK = {
    "content": [{"type": "text", "text": "Bonjour"}],
    "usage": {"input_tokens": 7, "output_tokens": 2},
}

GEMINI_OK = {
    "candidates": [{"content": {"role": "model", "parts": [{"text": "Hallo"}]}}],
    "usageMetadata": {"promptTokenCount": 5, "candidatesTokenCount": 4},
}
