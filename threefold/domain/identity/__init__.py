"""Identity domain layer."""

from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RegistrationDisabledError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "RegistrationDisabledError",
    "User",
    "UserNotFoundError",
]
