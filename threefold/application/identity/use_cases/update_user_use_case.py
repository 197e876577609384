"""Use case for changing a user's account status."""

import structlog

from threefold.application.identity.protocols.premium_status_cache import (
    PremiumStatusCacheProtocol,
)
from threefold.application.identity.protocols.user_repository import UserRepositoryProtocol
from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.entities.user import User
from threefold.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        premium_status_cache: PremiumStatusCacheProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.premium_status_cache = premium_status_cache

    def set_premium_status(self, user_id: int, is_premium: bool) -> User:
        """
        Grant or revoke premium status.

        The cached flag is invalidated after the write so quota checks pick up
        the change immediately.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        if is_premium:
            user.grant_premium()
        else:
            user.revoke_premium()

        user = self.user_repository.save(user)
        self.premium_status_cache.invalidate(user_id)

        logger.info("premium_status_changed", user_id=user_id, is_premium=is_premium)
        return user
