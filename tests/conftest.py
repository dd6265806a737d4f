"""Shared fixtures: a base URL for respx routes and fresh factory caches."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rest_api_client.api_clients.api_client import ApiClient, get_api_client
from rest_api_client.config import get_settings
from rest_api_client.repository.auth_repository import get_auth_repository
from rest_api_client.services.auth_service import get_auth_service

BASE_URL = "https://api.example.com"


@pytest.fixture
def api_client() -> ApiClient:
    return ApiClient(BASE_URL)


@pytest.fixture
def authed_client(api_client: ApiClient) -> ApiClient:
    return api_client.with_token("token123")


@pytest.fixture
def fresh_factories() -> Iterator[None]:
    """Clear every lru_cache'd factory so settings are re-read from the env."""
    caches = (get_settings, get_api_client, get_auth_repository, get_auth_service)
    for factory in caches:
        factory.cache_clear()
    yield
    for factory in caches:
        factory.cache_clear()
