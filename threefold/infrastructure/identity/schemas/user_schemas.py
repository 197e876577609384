"""Request and response bodies for accounts and tokens."""

from pydantic import BaseModel, Field

from threefold.application.identity.protocols.token_service import TokenPair
from threefold.domain.identity.entities.user import MAX_EMAIL_LENGTH


class UserRegisterRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=MAX_EMAIL_LENGTH, description="Email address")
    password: str = Field(..., min_length=8, max_length=128, description="Password")


class UserDetailsResponse(BaseModel):
    id: int
    email: str
    is_premium: bool = Field(..., description="Premium accounts have no AI usage quota")


class TokenResponse(BaseModel):
    """OAuth2-style token response; the refresh token is also set as a cookie."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    @classmethod
    def from_pair(cls, pair: TokenPair) -> "TokenResponse":
        return cls(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.expires_in,
        )


class RefreshTokenRequest(BaseModel):
    """Body for clients that cannot hold the refresh cookie."""

    refresh_token: str | None = None
