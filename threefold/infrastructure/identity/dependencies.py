"""FastAPI dependencies that identify the caller."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from slowapi.util import get_remote_address

from threefold.application.identity.use_cases.identity_resolution_use_case import Requester
from threefold.core import container
from threefold.database import DatabaseSession
from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from threefold.exceptions import CredentialsException
from threefold.infrastructure.common.di import request_scope

TOKEN_URL = "api/v1/auth/login"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=TOKEN_URL)
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl=TOKEN_URL, auto_error=False)


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """The authenticated user; 401 for a bad token or a deleted account."""
    with request_scope(db):
        try:
            return container.authentication_use_case().get_user_for_access_token(token)
        except (InvalidCredentialsError, UserNotFoundError):
            raise CredentialsException from None


async def get_optional_user_id(
    token: Annotated[str | None, Depends(optional_oauth2_scheme)],
) -> int | None:
    """
    User id from the bearer token, or None for an anonymous caller.

    A token that is sent but does not verify is a 401, never a guest.
    """
    if token is None:
        return None

    user_id = container.token_service().verify_access_token(token)
    if user_id is None:
        raise CredentialsException
    return user_id


def get_client_ip(request: Request) -> str:
    """Left-most X-Forwarded-For entry when behind a proxy, else the peer address."""
    first_hop = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    return first_hop or get_remote_address(request)


async def get_requester(
    user_id: Annotated[int | None, Depends(get_optional_user_id)],
    client_ip: Annotated[str, Depends(get_client_ip)],
    db: DatabaseSession,
) -> Requester:
    """Quota identity of the caller: a guest IP, a free user or a premium user."""
    with request_scope(db):
        try:
            return container.identity_resolution_use_case().resolve(user_id, client_ip)
        except UserNotFoundError:
            raise CredentialsException from None
