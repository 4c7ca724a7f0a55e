"""Credential configuration: environment lookup, prompting, session install.

API keys come from one environment variable per provider (see
:attr:`turbine.registry.Provider.env_var`). A ``.env`` file in the working
directory is loaded once at import; variables already set in the process
take precedence over it.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import os

from dotenv import load_dotenv

from turbine.errors import CredentialNotFoundError
from turbine.registry import Provider

load_dotenv()

logger = logging.getLogger(__name__)

API_KEY_ENV_VARS: dict[Provider, str] = {p: p.env_var for p in Provider}


def resolve_api_key(provider: Provider, api_key: str | None = None) -> str:
    """Return the API key for *provider*.

    An explicit *api_key* is returned as-is without consulting the
    environment. Otherwise the provider's variable must be set and non-empty.
    """
    if api_key is not None:
        return api_key

    env_var = API_KEY_ENV_VARS[provider]
    resolved = os.environ.get(env_var)
    if not resolved:
        raise CredentialNotFoundError(
            env_var,
            hint=f"Set {env_var} environment variable or pass api_key=...",
        )
    return resolved


def has_api_key(provider: Provider) -> bool:
    """Return True if the provider's API key is present in the environment."""
    return bool(os.environ.get(API_KEY_ENV_VARS[provider]))


def prompt_for_api_key(
    provider: Provider, *, input_fn: Callable[[str], str] = input
) -> str:
    """Ask the user for *provider*'s API key on stdin.

    Empty input raises :class:`CredentialNotFoundError`.
    """
    env_var = API_KEY_ENV_VARS[provider]
    print("API key not found in environment.")
    print(f"Provider: {provider.value}")
    print(f"Required environment variable: {env_var}")
    api_key = input_fn("Please enter your API key: ").strip()
    if not api_key:
        raise CredentialNotFoundError(env_var, hint="No API key was entered.")
    return api_key


def install_api_key(provider: Provider, api_key: str) -> None:
    """Export *api_key* into ``os.environ`` for the rest of the session.

    This mutates process-wide state. Call it during start-up, before other
    threads or tasks read provider credentials.
    """
    env_var = API_KEY_ENV_VARS[provider]
    os.environ[env_var] = api_key
    logger.info("Installed %s for this session", env_var)
