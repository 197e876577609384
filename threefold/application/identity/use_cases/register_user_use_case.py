import structlog

from threefold.application.identity.protocols.password_service import PasswordServiceProtocol
from threefold.application.identity.protocols.token_service import (
    TokenPair,
    TokenServiceProtocol,
)
from threefold.application.identity.protocols.user_repository import UserRepositoryProtocol
from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import EmailAlreadyExistsError, RegistrationDisabledError
from threefold.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Open a free-tier account and sign it in."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def register_user(self, email: str, password: str) -> tuple[User, TokenPair]:
        """
        Raises:
            RegistrationDisabledError: If sign-ups are switched off
            EmailAlreadyExistsError: If the email is taken
            ValidationError: If the email is blank or too long
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if self.user_repository.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email.strip())

        hashed = self.password_service.hash_password(password)
        user = self.user_repository.save(User.register(email=email, hashed_password=hashed))

        logger.info("user_registered", user_id=user.id.value)
        return user, self.token_service.create_token_pair(user.id.value)
