from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.entities.user import User
from threefold.infrastructure.common.clock import ensure_utc
from threefold.models import User as UserORM


class UserMapper:
    """Translate between the ``users`` row and the User entity."""

    def to_domain(self, row: UserORM) -> User:
        return User(
            id=UserId(row.id),
            email=row.email,
            hashed_password=row.hashed_password,
            is_premium=row.is_premium,
            created_at=ensure_utc(row.created_at) if row.created_at else None,
            updated_at=ensure_utc(row.updated_at) if row.updated_at else None,
        )

    def apply(self, user: User, row: UserORM) -> UserORM:
        """Copy the mutable account fields onto a row."""
        row.email = user.email
        row.hashed_password = user.hashed_password
        row.is_premium = user.is_premium
        return row

    def new_row(self, user: User) -> UserORM:
        return self.apply(user, UserORM())
