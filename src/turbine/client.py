"""Client facade: one bound provider plus convenience entry points."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING

from turbine.config import has_api_key, install_api_key, prompt_for_api_key
from turbine.errors import MissingFieldError
from turbine.models import Message, Request
from turbine.providers import create_provider
from turbine.registry import Provider, resolve

if TYPE_CHECKING:
    import httpx

    from turbine.models import Response
    from turbine.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class TurbineClient:
    """Send chat requests to one LLM provider through a neutral API.

    The provider is chosen at construction and never changes. The client
    holds no mutable state, so one instance can be shared by concurrent
    tasks.

    Example:
        client = TurbineClient(Provider.OPENAI)
        request = Request("gpt-4o-mini").with_message(Message.user("What is Rust?"))
        response = await client.send_request(request)
        print(response.content)
    """

    def __init__(
        self,
        provider: Provider,
        api_key: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Bind *provider*; the API key is read from the environment if omitted."""
        self._provider: LLMProvider = create_provider(
            provider, api_key, http_client=http_client
        )
        self._default_model: str | None = None

    @classmethod
    def from_provider(
        cls, provider: LLMProvider, *, default_model: str | None = None
    ) -> TurbineClient:
        """Wrap an existing provider instance."""
        client = cls.__new__(cls)
        client._provider = provider
        client._default_model = default_model
        return client

    @classmethod
    def from_model(
        cls,
        model: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> TurbineClient:
        """Build a client from a model string such as ``"openai/gpt-4o-mini"``.

        If the provider's API key is not in the environment, the user is
        prompted for it on stdin and the key is exported into ``os.environ``
        for the rest of the process. That write is process-wide: call this
        before starting concurrent work that reads credentials.

        The resolved model name becomes the default used by :meth:`send`.
        """
        provider, model_name = resolve(model)
        logger.debug("Resolved %r to %s model %s", model, provider.value, model_name)
        if not has_api_key(provider):
            install_api_key(provider, prompt_for_api_key(provider, input_fn=input_fn))

        client = cls(provider, http_client=http_client)
        client._default_model = model_name
        return client

    @classmethod
    def from_model_with_key(
        cls,
        model: str,
        api_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> TurbineClient:
        """Build a client from a model string and an explicit API key."""
        provider, model_name = resolve(model)
        client = cls(provider, api_key, http_client=http_client)
        client._default_model = model_name
        return client

    @property
    def provider(self) -> LLMProvider:
        """The bound provider adapter."""
        return self._provider

    @property
    def default_model(self) -> str | None:
        """Model used by :meth:`send`, set only by the ``from_model*`` constructors."""
        return self._default_model

    async def send_request(self, request: Request) -> Response:
        """Send *request* through the bound provider."""
        return await self._provider.send(request)

    def build_request(self, message: str, system_prompt: str | None = None) -> Request:
        """Return the single-message request :meth:`send` would issue."""
        if self._default_model is None:
            raise MissingFieldError(
                "no default model set",
                hint="Use TurbineClient.from_model() or call send_request() directly.",
            )
        request = Request(self._default_model).with_message(Message.user(message))
        if system_prompt is not None:
            request = request.with_system_prompt(system_prompt)
        return request

    async def send(self, message: str) -> Response:
        """Send one user message to the default model."""
        return await self.send_request(self.build_request(message))

    async def send_with_system(self, system_prompt: str, message: str) -> Response:
        """Send one user message with a system prompt to the default model."""
        return await self.send_request(self.build_request(message, system_prompt))

    def __repr__(self) -> str:
        return (
            f"TurbineClient(provider={self._provider!r}, "
            f"default_model={self._default_model!r})"
        )
