"""Login, token refresh and bearer-token lookups."""

import structlog

from threefold.application.identity.protocols.password_service import PasswordServiceProtocol
from threefold.application.identity.protocols.token_service import (
    TokenPair,
    TokenServiceProtocol,
)
from threefold.application.identity.protocols.user_repository import UserRepositoryProtocol
from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def authenticate_user(self, email: str, password: str) -> tuple[User, TokenPair]:
        """
        Check an email and password and issue a token pair.

        Unknown emails still pay for one hash verification so response times
        do not reveal which accounts exist.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self.user_repository.find_by_email(email)
        stored_hash = user.hashed_password if user else None

        verified = self.password_service.verify_password(
            password, stored_hash or self.password_service.get_dummy_hash()
        )
        if user is None or stored_hash is None or not verified:
            logger.info("login_rejected")
            raise InvalidCredentialsError

        logger.info("user_authenticated", user_id=user.id.value)
        return user, self.token_service.create_token_pair(user.id.value)

    def refresh_access_token(self, refresh_token: str) -> tuple[User, TokenPair]:
        """
        Rotate a refresh token into a new pair.

        Raises:
            InvalidCredentialsError: If the token does not verify or its user is gone
        """
        user_id = self.token_service.verify_refresh_token(refresh_token)
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id is not None else None
        if user is None:
            raise InvalidCredentialsError

        logger.info("access_token_refreshed", user_id=user.id.value)
        return user, self.token_service.create_token_pair(user.id.value)

    def get_user_for_access_token(self, access_token: str) -> User:
        """
        Resolve the user behind a bearer token.

        Raises:
            InvalidCredentialsError: If the token does not verify
            UserNotFoundError: If the token's user no longer exists
        """
        user_id = self.token_service.verify_access_token(access_token)
        if user_id is None:
            raise InvalidCredentialsError

        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user
