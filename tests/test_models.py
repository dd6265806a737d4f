"""Tests for AuthToken and the error types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rest_api_client.errors import ApiStatusError, ResponseDeserializationError
from rest_api_client.models import AuthToken


def test_optional_fields_default_to_none() -> None:
    token = AuthToken.model_validate_json(
        '{"access_token":"abc","token_type":"Bearer"}'
    )

    assert token.expires_in is None
    assert token.refresh_token is None
    assert token.scope is None


@pytest.mark.parametrize(
    "payload",
    [
        {"token_type": "Bearer"},
        {"access_token": "", "token_type": "Bearer"},
        {"access_token": "abc"},
        {"access_token": "abc", "token_type": "Bearer", "expires_in": "soon"},
    ],
)
def test_invalid_token_payloads_are_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        AuthToken.model_validate(payload)


def test_token_is_immutable() -> None:
    token = AuthToken(access_token="abc", token_type="Bearer")

    with pytest.raises(ValidationError):
        token.access_token = "other"  # type: ignore[misc]


def test_token_repr_hides_secrets() -> None:
    token = AuthToken(access_token="abc", token_type="Bearer", refresh_token="r3fresh")

    assert "abc" not in repr(token)
    assert "r3fresh" not in str(token)
    assert "Bearer" in repr(token)


def test_status_error_message_truncates_but_body_does_not() -> None:
    body = "x" * 2000

    error = ApiStatusError(500, body)

    assert error.body == body
    assert len(str(error)) < len(body)


def test_deserialization_error_keeps_body() -> None:
    error = ResponseDeserializationError("bad", body="<html>")

    assert str(error) == "bad"
    assert error.body == "<html>"
