"""
Provides a generic async HTTP client for REST-style JSON APIs.

- Joins the configured base URL with a request path
- Merges caller headers with Content-Type and Authorization: Bearer <token>
- Encodes JSON and flat form bodies, decodes 2xx responses with pydantic
- Maps every failure onto the `rest_api_client.errors` taxonomy
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, TypeVar, Union

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json

from rest_api_client.config import get_settings
from rest_api_client.errors import (
    ApiStatusError,
    ApiTransportError,
    RequestSerializationError,
    ResponseDeserializationError,
)
from rest_api_client.utils.bearer_auth import BearerTokenAuth
from rest_api_client.utils.logger import logger

T = TypeVar("T")

HeadersInput = Union[Mapping[str, str], Sequence[tuple[str, str]], None]
FormInput = Union[Mapping[str, Any], Sequence[tuple[str, Any]], BaseModel]

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_FORM_SCALARS = (str, int, float, bool, type(None))


class ApiClient:
    """
    Async client bound to one base URL and, optionally, one bearer token.

    Configuration never changes after construction: `with_token` returns a
    new client, so one instance can be shared by concurrent calls.

    Args:
        base_url: Root of the API; a trailing slash is dropped.
        token: Bearer token sent on every request.
        timeout: Transport timeout in seconds. None enforces no timeout.
        http_client: Shared `httpx.AsyncClient` owned by the caller. When
            omitted, each call opens and closes its own client.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    def __repr__(self) -> str:
        return (f"ApiClient(base_url={self._base_url!r}, "
                f"authenticated={self._token is not None})")

    def with_token(self, token: str) -> ApiClient:
        """Return a client that sends `Authorization: Bearer <token>`; self is unchanged."""
        return ApiClient(
            self._base_url,
            token=token,
            timeout=self._timeout,
            http_client=self._http_client,
        )

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._base_url}{path}"

    async def get_json(self,
                       path: str,
                       headers: HeadersInput = None,
                       response_model: type[T] = Any) -> T:
        return await self._send("GET", path, headers, response_model)

    async def delete_json(self,
                          path: str,
                          headers: HeadersInput = None,
                          response_model: type[T] = Any) -> T:
        return await self._send("DELETE", path, headers, response_model)

    async def post_json(self,
                        path: str,
                        body: Any,
                        headers: HeadersInput = None,
                        response_model: type[T] = Any) -> T:
        return await self._send("POST",
                                path,
                                headers,
                                response_model,
                                content=encode_json_body(body),
                                content_type=JSON_CONTENT_TYPE)

    async def put_json(self,
                       path: str,
                       body: Any,
                       headers: HeadersInput = None,
                       response_model: type[T] = Any) -> T:
        return await self._send("PUT",
                                path,
                                headers,
                                response_model,
                                content=encode_json_body(body),
                                content_type=JSON_CONTENT_TYPE)

    async def post_form(self,
                        path: str,
                        form: FormInput,
                        headers: HeadersInput = None,
                        response_model: type[T] = Any) -> T:
        return await self._send("POST",
                                path,
                                headers,
                                response_model,
                                data=encode_form_body(form),
                                content_type=FORM_CONTENT_TYPE)

    async def put_form(self,
                       path: str,
                       form: FormInput,
                       headers: HeadersInput = None,
                       response_model: type[T] = Any) -> T:
        return await self._send("PUT",
                                path,
                                headers,
                                response_model,
                                data=encode_form_body(form),
                                content_type=FORM_CONTENT_TYPE)

    def _build_headers(self, headers: HeadersInput,
                       content_type: str | None) -> httpx.Headers:
        request_headers = httpx.Headers(headers)
        request_headers.setdefault("Accept", JSON_CONTENT_TYPE)
        if content_type:
            request_headers["Content-Type"] = content_type
        return request_headers

    async def _send(self,
                    method: str,
                    path: str,
                    headers: HeadersInput,
                    response_model: Any,
                    *,
                    content: bytes | None = None,
                    data: dict[str, Any] | None = None,
                    content_type: str | None = None) -> Any:
        url = self.url_for(path)
        request_kwargs: dict[str, Any] = {
            "headers": self._build_headers(headers, content_type),
        }
        if content is not None:
            request_kwargs["content"] = content
        if data is not None:
            request_kwargs["data"] = data
        if self._token is not None:
            # overrides any caller-supplied Authorization header
            request_kwargs["auth"] = BearerTokenAuth(self._token)

        logger.debug(f"{method} {url}")
        try:
            if self._http_client is not None:
                if self._timeout is not None:
                    request_kwargs["timeout"] = self._timeout
                response = await self._http_client.request(
                    method, url, **request_kwargs)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.request(method, url,
                                                    **request_kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.debug(f"{method} {url} transport failure: {exc!r}")
            raise ApiTransportError(
                f"{method} {url} failed: {str(exc) or type(exc).__name__}") from exc

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.is_success:
            raise ApiStatusError(response.status_code, response.text)

        return decode_response(response, response_model)


def encode_json_body(body: Any) -> bytes:
    '''
    Serialize a JSON body: plain JSON values, pydantic models and dataclasses.

    :raises RequestSerializationError: if the value has no JSON form
    '''
    try:
        return to_json(body)
    except (ValueError, TypeError) as exc:
        raise RequestSerializationError(
            f"Could not encode JSON body: {exc}") from exc


def encode_form_body(form: FormInput) -> dict[str, Any]:
    '''
    Validate a flat form and shape it for httpx's `data=` encoder.

    Accepts a mapping, a sequence of (key, value) pairs or a pydantic model.
    Repeated keys become lists; values must be scalars.

    :raises RequestSerializationError: on nested or non-string-keyed fields
    '''
    if isinstance(form, BaseModel):
        form = form.model_dump(mode="json", exclude_none=True)

    if isinstance(form, Mapping):
        items = list(form.items())
    elif isinstance(form, Sequence) and not isinstance(form, (str, bytes)):
        items = list(form)
    else:
        raise RequestSerializationError(
            "Form body must be a mapping or a sequence of key/value pairs, "
            f"got {type(form).__name__}")

    fields: dict[str, Any] = {}
    for item in items:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise RequestSerializationError(
                f"Form field {item!r} is not a key/value pair")
        key, value = item
        if not isinstance(key, str):
            raise RequestSerializationError(
                f"Form field name {key!r} must be a string")
        if not isinstance(value, _FORM_SCALARS):
            raise RequestSerializationError(
                f"Form field {key!r} must be a flat value, "
                f"got {type(value).__name__}")

        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields


@lru_cache(maxsize=128)
def _type_adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def decode_response(response: httpx.Response, response_model: Any) -> Any:
    '''
    Decode a successful response body into `response_model`.

    An empty body decodes to None when no specific type was requested.

    :raises ResponseDeserializationError: if the body does not fit the type
    '''
    if not response.content and response_model is Any:
        return None

    try:
        return _type_adapter(response_model).validate_json(response.content)
    except ValidationError as exc:
        type_name = getattr(response_model, "__name__", repr(response_model))
        raise ResponseDeserializationError(
            f"Could not decode response into {type_name}: {exc}",
            body=response.text) from exc


@lru_cache()
def get_api_client() -> ApiClient:
    """
    Cached ApiClient for the configured API_BASE_URL, without a token.

    Call `with_token` on it to obtain an authenticated client.

    Returns:
        ApiClient: Configured and cached client.
    """
    settings = get_settings()
    logger.info(f"Creating cached API client for {settings.API_BASE_URL}")
    return ApiClient(settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT)
