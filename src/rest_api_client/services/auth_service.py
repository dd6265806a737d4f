'''
Login façade used by application code.
'''
from __future__ import annotations

from functools import lru_cache

from rest_api_client.models import AuthToken
from rest_api_client.repository.auth_repository import (
    AuthRepository,
    get_auth_repository,
)


class AuthService:
    """
    Stateless entry point for authentication.

    Depends on any AuthRepository, so callers can swap the network
    implementation for a test double or another backend.
    """

    def __init__(self, repository: AuthRepository):
        self._repository = repository

    async def login(self, client_id: str, client_secret: str) -> AuthToken:
        return await self._repository.authenticate(client_id, client_secret)


@lru_cache()
def get_auth_service() -> AuthService:
    return AuthService(get_auth_repository())
