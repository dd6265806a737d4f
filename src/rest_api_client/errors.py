'''
Errors raised by the HTTP client and everything built on top of it.

Every failed call raises exactly one of the four `ApiError` subclasses.
'''
from __future__ import annotations

import json
from typing import Any

# raw bodies are truncated in messages, never in attributes
MESSAGE_BODY_LIMIT = 500


class ApiError(RuntimeError):
    """Base class for every error surfaced by the library."""


class ApiTransportError(ApiError):
    """The request could not reach the server or the response was not received."""


class ApiStatusError(ApiError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}: {body[:MESSAGE_BODY_LIMIT]}")
        self.status_code = status_code
        self.body = body

    def json(self) -> Any:
        """Best-effort parse of the raw body; None if it is not JSON."""
        try:
            return json.loads(self.body)
        except ValueError:
            return None


class RequestSerializationError(ApiError):
    """The outgoing body could not be encoded; nothing was sent."""


class ResponseDeserializationError(ApiError):
    """A successful response could not be decoded into the requested type."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
