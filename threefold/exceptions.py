"""Custom exception hierarchy for the threefold application."""

import math
from datetime import timedelta

from fastapi import HTTPException
from starlette import status


class ThreefoldError(Exception):
    """Base exception for all threefold errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ThreefoldError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class ValidationError(ThreefoldError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message, status_code=status_code)


class ServiceError(ThreefoldError):
    """Service layer error."""


class PersistenceUnavailableError(ServiceError):
    """The backing store could not be reached or failed mid-operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Storage unavailable during {operation}",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )


class ConcurrentUpdateConflictError(ServiceError):
    """A concurrent writer changed the record between read and write."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"Concurrent update conflict on {key}",
            status_code=status.HTTP_409_CONFLICT,
        )


class QuotaExceededError(ThreefoldError):
    """Request denied by a usage quota."""

    def __init__(self, message: str, retry_after: timedelta) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=status.HTTP_429_TOO_MANY_REQUESTS)

    @property
    def retry_after_ms(self) -> int:
        return math.ceil(self.retry_after / timedelta(milliseconds=1))

    @property
    def retry_after_seconds(self) -> int:
        """Value for the ``Retry-After`` header."""
        return math.ceil(self.retry_after.total_seconds())


class GuestAccessDisabledError(ThreefoldError):
    """Anonymous access to a quota-gated feature is turned off."""

    def __init__(self) -> None:
        super().__init__("Login required.", status_code=status.HTTP_401_UNAUTHORIZED)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
