'''
Data records returned by the library.
'''
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AuthToken(BaseModel):
    """
    Token issued by an OAuth2-style token endpoint.

    Only produced by decoding a successful token response; unknown
    response fields are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = Field(..., min_length=1, description="Access token")
    token_type: str = Field(..., description="Token type, usually Bearer")
    expires_in: int | None = Field(
        default=None, description="Lifetime in seconds; None when unknown")
    refresh_token: str | None = Field(default=None, description="Refresh token")
    scope: str | None = Field(default=None, description="Granted scope")

    def __repr__(self) -> str:
        # keep secrets out of logs and tracebacks
        return (f"AuthToken(token_type={self.token_type!r}, "
                f"expires_in={self.expires_in!r}, scope={self.scope!r})")

    __str__ = __repr__
