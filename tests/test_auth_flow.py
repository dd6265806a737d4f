"""End-to-end: AuthService -> RestAuthRepository -> ApiClient -> mocked HTTP."""

from __future__ import annotations

import httpx
import pytest
from pydantic import BaseModel
from respx import MockRouter

from rest_api_client import (
    ApiClient,
    ApiStatusError,
    AuthService,
    RestAuthRepository,
)
from tests.conftest import BASE_URL

TOKEN_PATH = "/oauth/token"


class Item(BaseModel):
    id: int
    name: str


@pytest.fixture
def service() -> AuthService:
    return AuthService(RestAuthRepository(BASE_URL, TOKEN_PATH))


@pytest.mark.asyncio
async def test_login_returns_token(service: AuthService, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{BASE_URL}{TOKEN_PATH}").mock(
        return_value=httpx.Response(
            200,
            json={"access_token": "abc", "token_type": "Bearer", "expires_in": 3600},
        )
    )

    token = await service.login("my_id", "my_secret")

    assert token.access_token == "abc"
    assert token.token_type == "Bearer"
    assert token.expires_in == 3600
    assert token.refresh_token is None


@pytest.mark.asyncio
async def test_login_with_invalid_client_raises_status_error(
    service: AuthService, respx_mock: MockRouter
) -> None:
    respx_mock.post(f"{BASE_URL}{TOKEN_PATH}").mock(
        return_value=httpx.Response(401, json={"error": "invalid_client"})
    )

    with pytest.raises(ApiStatusError) as exc_info:
        await service.login("bad", "wrong")

    assert exc_info.value.status_code == 401
    assert "invalid_client" in exc_info.value.body


@pytest.mark.asyncio
async def test_token_from_login_authenticates_crud_calls(
    service: AuthService, respx_mock: MockRouter
) -> None:
    """Log in, then drive GET/POST/PUT/DELETE with the issued token."""
    respx_mock.post(f"{BASE_URL}{TOKEN_PATH}").mock(
        return_value=httpx.Response(
            200, json={"access_token": "abc", "token_type": "Bearer"}
        )
    )
    get_route = respx_mock.get(f"{BASE_URL}/items/1").mock(
        return_value=httpx.Response(200, json={"id": 1, "name": "one"})
    )
    post_route = respx_mock.post(f"{BASE_URL}/items").mock(
        return_value=httpx.Response(200, json={"id": 2, "name": "two"})
    )
    put_route = respx_mock.put(f"{BASE_URL}/items/2").mock(
        return_value=httpx.Response(200, json={"id": 2, "name": "two-updated"})
    )
    delete_route = respx_mock.delete(f"{BASE_URL}/items/2").mock(
        return_value=httpx.Response(200, json={"deleted": True})
    )

    token = await service.login("my_id", "my_secret")
    client = ApiClient(BASE_URL).with_token(token.access_token)

    fetched = await client.get_json("/items/1", response_model=Item)
    created = await client.post_json("/items", {"name": "two"}, response_model=Item)
    updated = await client.put_json(
        "/items/2", {"name": "two-updated"}, response_model=Item
    )
    deleted = await client.delete_json("/items/2")

    assert fetched == Item(id=1, name="one")
    assert created == Item(id=2, name="two")
    assert updated == Item(id=2, name="two-updated")
    assert deleted["deleted"] is True
    for route in (get_route, post_route, put_route, delete_route):
        assert route.calls.last.request.headers["authorization"] == "Bearer abc"
