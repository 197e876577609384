"""Account sign-up, login and token refresh."""

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from starlette import status

from threefold.application.identity.protocols.token_service import TokenPair
from threefold.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from threefold.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from threefold.config import get_settings
from threefold.core import container
from threefold.domain.common.exceptions import DomainError
from threefold.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RegistrationDisabledError,
)
from threefold.exceptions import ThreefoldError
from threefold.infrastructure.common.di import inject_use_case
from threefold.infrastructure.common.rate_limit import limiter
from threefold.infrastructure.identity.schemas import (
    RefreshTokenRequest,
    TokenResponse,
    UserRegisterRequest,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/auth", tags=["auth"])

REFRESH_COOKIE = "refresh_token"
# Cookie is only sent to the auth routes
REFRESH_COOKIE_PATH = f"{settings.API_V1_PREFIX}/auth"


def _cookie_options() -> dict[str, object]:
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": "strict",
        "path": REFRESH_COOKIE_PATH,
    }


def _issue(response: Response, pair: TokenPair) -> TokenResponse:
    response.set_cookie(
        REFRESH_COOKIE,
        pair.refresh_token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **_cookie_options(),  # type: ignore[arg-type]
    )
    return TokenResponse.from_pair(pair)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenResponse:
    """Open a free-tier account and return tokens for it."""
    try:
        _, pair = use_case.register_user(register_data.email, register_data.password)
        return _issue(response, pair)
    except RegistrationDisabledError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        ) from None
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Registration failed: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenResponse:
    """Password login. The OAuth2 form's ``username`` field holds the email."""
    try:
        _, pair = use_case.authenticate_user(form_data.username, form_data.password)
    except InvalidCredentialsError:
        raise _unauthorized("Incorrect email or password") from None
    return _issue(response, pair)


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenResponse:
    """Swap a refresh token (cookie first, then body) for a new pair."""
    token = refresh_token or (body.refresh_token if body else None)
    if not token:
        raise _unauthorized("Refresh token required")

    try:
        _, pair = use_case.refresh_access_token(token)
    except InvalidCredentialsError:
        response.delete_cookie(REFRESH_COOKIE, **_cookie_options())  # type: ignore[arg-type]
        raise _unauthorized("Invalid or expired refresh token") from None
    return _issue(response, pair)


@router.post("/logout")
async def logout(response: Response) -> dict[str, str]:
    # Access tokens stay valid until they expire
    response.delete_cookie(REFRESH_COOKIE, **_cookie_options())  # type: ignore[arg-type]
    return {"message": "Logged out successfully"}
