"""SQLAlchemy persistence for accounts."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from threefold.infrastructure.identity.mappers.user_mapper import UserMapper
from threefold.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        row = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        row = self.db.scalars(select(UserORM).where(UserORM.email == email.strip())).first()
        return self.mapper.to_domain(row) if row else None

    def save(self, user: User) -> User:
        """
        Insert or update an account.

        A concurrent sign-up with the same email is caught by the unique
        constraint on ``users.email``.

        Raises:
            EmailAlreadyExistsError: If a new account's email is taken
            UserNotFoundError: If an existing account was deleted meanwhile
        """
        if user.id.is_persisted:
            row = self.db.get(UserORM, user.id.value)
            if row is None:
                raise UserNotFoundError(user.id.value)
            self.mapper.apply(user, row)
        else:
            row = self.mapper.new_row(user)
            self.db.add(row)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise EmailAlreadyExistsError(user.email) from e

        self.db.refresh(row)
        logger.info(f"Saved user {row.id}")
        return self.mapper.to_domain(row)
