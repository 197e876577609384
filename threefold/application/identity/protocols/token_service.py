from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TokenPair:
    """Short-lived access token plus the refresh token that renews it."""

    access_token: str
    refresh_token: str
    expires_in: int


class TokenServiceProtocol(Protocol):
    def create_token_pair(self, user_id: int) -> TokenPair: ...

    def verify_access_token(self, token: str) -> int | None:
        """User id of a valid access token, else None."""
        ...

    def verify_refresh_token(self, token: str) -> int | None:
        """User id of a valid refresh token, else None."""
        ...
