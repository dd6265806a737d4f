"""
Credential-for-token exchange.

`AuthRepository` is the capability `AuthService` depends on;
`RestAuthRepository` implements it by POSTing a form-encoded
client-credentials request to a token endpoint.
"""
from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol, runtime_checkable

from rest_api_client.api_clients.api_client import ApiClient
from rest_api_client.config import get_settings
from rest_api_client.models import AuthToken
from rest_api_client.utils.logger import logger

DEFAULT_GRANT_TYPE = "client_credentials"
RESERVED_FIELDS = frozenset({"client_id", "client_secret", "grant_type", "scope"})


@runtime_checkable
class AuthRepository(Protocol):
    """Anything that can exchange client credentials for an AuthToken."""

    async def authenticate(self, client_id: str, client_secret: str) -> AuthToken:
        """Perform one exchange; raise an ApiError subclass on failure."""
        ...


class RestAuthRepository:
    """
    Fetches an access token from an OAuth2-style token endpoint.

    Sends `client_id` and `client_secret`, then `grant_type` unless it is None,
    `scope` when given and any `extra_fields`, which may not reuse those names.
    `base_url` only builds the default ApiClient; an injected `client` brings
    its own base URL, and `base_url` may then be None. Errors from the
    ApiClient propagate unchanged, so a rejected credential surfaces as
    ApiStatusError and an unreachable server as ApiTransportError.
    """

    def __init__(
        self,
        base_url: str | None,
        token_path: str,
        *,
        grant_type: str | None = DEFAULT_GRANT_TYPE,
        scope: str | None = None,
        extra_fields: Mapping[str, str] | None = None,
        client: ApiClient | None = None,
    ):
        if client is None and base_url is None:
            raise ValueError("RestAuthRepository needs a base_url or a client")
        reserved = RESERVED_FIELDS.intersection(extra_fields or {})
        if reserved:
            raise ValueError(
                f"extra_fields may not override {', '.join(sorted(reserved))}")

        self._client = client or ApiClient(base_url)
        self._token_path = token_path
        self._grant_type = grant_type
        self._scope = scope
        self._extra_fields = dict(extra_fields or {})

    @property
    def token_path(self) -> str:
        return self._token_path

    def _build_form(self, client_id: str, client_secret: str) -> dict[str, str]:
        data = {
            "client_id": client_id,
            "client_secret": client_secret,
        }
        if self._grant_type:
            data["grant_type"] = self._grant_type
        if self._scope:
            data["scope"] = self._scope
        data.update(self._extra_fields)
        return data

    async def authenticate(self, client_id: str, client_secret: str) -> AuthToken:
        logger.debug(
            f"Requesting token from {self._client.url_for(self._token_path)}")
        token = await self._client.post_form(
            self._token_path,
            self._build_form(client_id, client_secret),
            response_model=AuthToken,
        )
        logger.debug(f"Token issued: type={token.token_type} "
                     f"expires_in={token.expires_in}")
        return token


@lru_cache()
def get_auth_repository() -> RestAuthRepository:
    '''
    Cached RestAuthRepository built from AUTH_* settings.

    :return: RestAuthRepository instance
    :rtype: RestAuthRepository
    '''
    settings = get_settings()
    return RestAuthRepository(
        base_url=settings.token_server_url,
        token_path=settings.AUTH_TOKEN_PATH,
        grant_type=settings.AUTH_GRANT_TYPE,
        scope=settings.AUTH_SCOPE,
        client=ApiClient(settings.token_server_url,
                         timeout=settings.HTTP_TIMEOUT),
    )
