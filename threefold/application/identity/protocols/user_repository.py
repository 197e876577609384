from typing import Protocol

from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def save(self, user: User) -> User:
        """
        Insert a new user or update an existing one.

        Raises:
            EmailAlreadyExistsError: If a new user's email is taken
            UserNotFoundError: If an existing user was deleted meanwhile
        """
        ...
