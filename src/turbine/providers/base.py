"""Provider protocol and the shared HTTP adapter base."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from turbine.config import resolve_api_key
from turbine.providers._http import post_json

if TYPE_CHECKING:
    import httpx

    from turbine.models import Request, Response
    from turbine.registry import Provider

logger = logging.getLogger(__name__)


@runtime_checkable
class LLMProvider(Protocol):
    """One vendor adapter: translate, POST once, translate back."""

    async def send(self, request: Request) -> Response:
        """Send *request* and return the provider-neutral response."""
        ...


class HTTPProvider:
    """Base for adapters that speak a vendor's JSON-over-HTTPS API.

    Subclasses set ``provider`` and implement :meth:`build_payload`,
    :meth:`endpoint`, :meth:`headers` and :meth:`parse_response`. Instances
    hold no mutable state after construction, so one adapter can serve
    concurrent calls.
    """

    provider: ClassVar[Provider]

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Bind credentials, reading the environment when *api_key* is None."""
        self.api_key = resolve_api_key(self.provider, api_key)
        self.base_url = (base_url or self.provider.base_url).rstrip("/")
        self._http_client = http_client

    def build_payload(self, request: Request) -> dict[str, Any]:
        raise NotImplementedError

    def endpoint(self, request: Request) -> str:
        raise NotImplementedError

    def headers(self) -> dict[str, str]:
        raise NotImplementedError

    def parse_response(self, body: bytes) -> Response:
        raise NotImplementedError

    async def send(self, request: Request) -> Response:
        """Translate *request*, POST it once and translate the reply."""
        payload = self.build_payload(request)
        url = self.endpoint(request)
        logger.debug(
            "Sending %s request for model %s to %s",
            self.provider.value,
            request.model,
            url,
        )
        body = await post_json(
            url,
            headers=self.headers(),
            payload=payload,
            provider=self.provider.value,
            client=self._http_client,
            env_var=self.provider.env_var,
        )
        response = self.parse_response(body)
        logger.debug(
            "%s usage: %d input, %d output tokens",
            self.provider.value,
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return response

    def __repr__(self) -> str:
        """Return a representation with the API key redacted."""
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None})"
        )
