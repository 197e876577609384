"""Errors raised by account rules."""

from threefold.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    """Another account already uses this email."""

    def __init__(self, email: str) -> None:
        super().__init__("An account with this email already exists", email=email)
        self.email = email


class InvalidCredentialsError(DomainError):
    """Unknown email, wrong password, or a refresh token that no longer verifies."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class RegistrationDisabledError(DomainError):
    def __init__(self) -> None:
        super().__init__("Sign-ups are closed on this server")
