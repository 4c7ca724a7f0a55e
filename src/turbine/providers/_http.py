"""Shared HTTP plumbing for provider adapters.

One POST per call, no retries. Transport failures, error statuses and
malformed bodies are mapped onto the Turbine error taxonomy here so the
adapters only deal with their own wire shapes.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from turbine.errors import APIError, DecodeError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"


def _auth_hint(env_var: str | None, status_code: int) -> str | None:
    """Point at the credential variable for authentication failures."""
    if status_code in {401, 403}:
        name = env_var or "the provider API key"
        return f"Check credentials/permissions (try setting {name} or api_key=...)."
    return None


async def post_json(
    url: str,
    *,
    headers: dict[str, str],
    payload: dict[str, Any],
    provider: str,
    client: httpx.AsyncClient | None = None,
    env_var: str | None = None,
) -> bytes:
    """POST *payload* as JSON and return the raw body of a 2xx response.

    When *client* is None a short-lived client is opened for this call only.
    No timeout is applied unless the injected client carries one.

    Raises:
        TransportError: The request never produced a response.
        APIError: The response status was not 2xx.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=None) as owned:
                response = await owned.post(url, json=payload, headers=headers)
        else:
            response = await client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise TransportError(
            str(exc) or type(exc).__name__, provider=provider
        ) from exc

    logger.debug("%s responded with status %s", provider, response.status_code)
    if not response.is_success:
        raise APIError(
            response.text,
            status_code=response.status_code,
            provider=provider,
            hint=_auth_hint(env_var, response.status_code),
        )
    return response.content


def decode(model: type[ModelT], body: bytes, *, provider: str) -> ModelT:
    """Validate a JSON *body* against a wire response *model*."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(str(exc), provider=provider) from exc
