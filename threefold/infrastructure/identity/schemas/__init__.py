"""Identity context schemas."""

from threefold.infrastructure.identity.schemas.user_schemas import (
    RefreshTokenRequest,
    TokenResponse,
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "RefreshTokenRequest",
    "TokenResponse",
    "UserDetailsResponse",
    "UserRegisterRequest",
]
