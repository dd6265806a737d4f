# bearer_auth.py
import httpx


class BearerTokenAuth(httpx.Auth):
    """
    httpx auth handler that injects Authorization: Bearer <token>.
    Replaces any Authorization header already on the request, so exactly
    one is sent.
    """

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request
