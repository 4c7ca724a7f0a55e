from __future__ import annotations

import pytest

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

pytestmark = pytest.mark.unit


def test_api_error_carries_raw_body_and_status() -> None:
    err = APIError('{"error": "bad"}', status_code=400, provider="openai")

    assert str(err) == 'API returned error: {"error": "bad"}'
    assert err.body == '{"error": "bad"}'
    assert err.status_code == 400
    assert err.provider == "openai"
    assert err.hint is None


def test_credential_not_found_names_variable_and_hints() -> None:
    err = CredentialNotFoundError("GROQ_API_KEY")

    assert str(err) == "API key not found for provider: GROQ_API_KEY"
    assert err.env_var == "GROQ_API_KEY"
    assert err.hint is not None
    assert "GROQ_API_KEY" in err.hint


def test_reason_bearing_errors_format_messages() -> None:
    assert str(InvalidResponseError("no choices")) == (
        "Invalid response format: no choices"
    )
    assert str(MissingFieldError("no default model set")) == (
        "Missing required field: no default model set"
    )


def test_all_errors_are_turbine_errors() -> None:
    errors = [
        CredentialNotFoundError("X"),
        TransportError("down"),
        DecodeError("bad json"),
        APIError("body"),
        InvalidResponseError("no parts"),
        MissingFieldError("x"),
        UnknownProviderError("acme", ("openai",)),
        ProviderInferenceError("xyz"),
    ]
    for err in errors:
        assert isinstance(err, TurbineError)
