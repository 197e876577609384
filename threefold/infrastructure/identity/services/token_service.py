"""JWT access and refresh tokens."""

from datetime import UTC, datetime, timedelta

import jwt

from threefold.application.identity.protocols.token_service import TokenPair
from threefold.config import Settings

ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


class JWTTokenService:
    """
    Issue and verify HS256 tokens.

    Tokens carry the user id in ``sub`` and their kind in ``type``, so a
    refresh token is never accepted where an access token is expected.
    Refresh tokens may be signed with their own key.
    """

    def __init__(
        self,
        secret_key: str,
        access_token_lifetime: timedelta,
        refresh_token_lifetime: timedelta,
        refresh_secret_key: str | None = None,
    ) -> None:
        self._keys = {ACCESS: secret_key, REFRESH: refresh_secret_key or secret_key}
        self._lifetimes = {ACCESS: access_token_lifetime, REFRESH: refresh_token_lifetime}

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTTokenService":
        return cls(
            secret_key=settings.SECRET_KEY,
            access_token_lifetime=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_token_lifetime=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
            refresh_secret_key=settings.REFRESH_TOKEN_SECRET_KEY,
        )

    def _issue(self, user_id: int, kind: str) -> str:
        claims = {
            "sub": str(user_id),
            "type": kind,
            "exp": datetime.now(UTC) + self._lifetimes[kind],
        }
        return jwt.encode(claims, self._keys[kind], algorithm=ALGORITHM)

    def _verify(self, token: str, kind: str) -> int | None:
        try:
            claims = jwt.decode(token, self._keys[kind], algorithms=[ALGORITHM])
        except jwt.InvalidTokenError:
            return None
        if claims.get("type") != kind:
            return None
        subject = claims.get("sub")
        return int(subject) if isinstance(subject, str) and subject.isdigit() else None

    def create_access_token(self, user_id: int) -> str:
        return self._issue(user_id, ACCESS)

    def create_refresh_token(self, user_id: int) -> str:
        return self._issue(user_id, REFRESH)

    def verify_access_token(self, token: str) -> int | None:
        return self._verify(token, ACCESS)

    def verify_refresh_token(self, token: str) -> int | None:
        return self._verify(token, REFRESH)

    def create_token_pair(self, user_id: int) -> TokenPair:
        return TokenPair(
            access_token=self.create_access_token(user_id),
            refresh_token=self.create_refresh_token(user_id),
            expires_in=int(self._lifetimes[ACCESS].total_seconds()),
        )
