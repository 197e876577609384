"""Account holder."""

from dataclasses import dataclass
from datetime import datetime

from threefold.domain.common.entity import Entity
from threefold.domain.common.exceptions import ValidationError
from threefold.domain.common.value_objects.ids import UserId

MAX_EMAIL_LENGTH = 100


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    A registered learner.

    Accounts start on the free tier. ``is_premium`` exempts the user from AI
    usage quotas. Email uniqueness is enforced by the repository.
    """

    id: UserId
    email: str
    hashed_password: str | None = None
    is_premium: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        email = self.email.strip() if self.email else ""
        if not email:
            raise ValidationError("Email is required", field="email")
        if len(email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email is longer than {MAX_EMAIL_LENGTH} characters", field="email", value=email
            )
        self.email = email

    def grant_premium(self) -> None:
        self.is_premium = True

    def revoke_premium(self) -> None:
        self.is_premium = False

    @classmethod
    def register(cls, email: str, hashed_password: str) -> "User":
        """
        New free-tier account, not yet persisted.

        Raises:
            ValidationError: If email is blank or too long
        """
        return cls(id=UserId.unsaved(), email=email, hashed_password=hashed_password)
