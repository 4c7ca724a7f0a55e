"""Turbine: one async interface for several LLM providers.

Public API:
    - TurbineClient: facade bound to one provider
    - Request / Message: vendor-neutral request model
    - Response / Usage: vendor-neutral response model
    - Provider / resolve: supported vendors and model-string resolution
"""

from __future__ import annotations

import logging

from turbine.client import TurbineClient
from turbine.errors import (
    APIError,
    CredentialNotFoundError,
    DecodeError,
    InvalidResponseError,
    MissingFieldError,
    ProviderInferenceError,
    TransportError,
    TurbineError,
    UnknownProviderError,
)
from turbine.models import Message, OutputFormat, Request, Response, Usage
from turbine.registry import Provider, resolve

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("turbine-llm")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("turbine").addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "CredentialNotFoundError",
    "DecodeError",
    "InvalidResponseError",
    "Message",
    "MissingFieldError",
    "OutputFormat",
    "Provider",
    "ProviderInferenceError",
    "Request",
    "Response",
    "TransportError",
    "TurbineClient",
    "TurbineError",
    "UnknownProviderError",
    "Usage",
    "resolve",
]
