"""Resolve who is making a request, for quota purposes."""

from dataclasses import dataclass

import structlog

from threefold.application.identity.protocols.premium_status_cache import (
    PremiumStatusCacheProtocol,
)
from threefold.application.identity.protocols.user_repository import UserRepositoryProtocol
from threefold.domain.common.value_objects.ids import UserId
from threefold.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Requester:
    """
    The identity a quota is tracked against.

    Guests share one usage record across all gated features; users get one
    record per feature.
    """

    client_ip: str
    user_id: int | None = None
    is_premium: bool = False

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def usage_key(self, feature: str) -> str:
        if self.user_id is None:
            return f"guest:{self.client_ip}"
        return f"user:{self.user_id}:{feature}"


class IdentityResolutionUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        premium_status_cache: PremiumStatusCacheProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.premium_status_cache = premium_status_cache

    def resolve(self, user_id: int | None, client_ip: str) -> Requester:
        """
        Build the requester for an optional authenticated user.

        Raises:
            UserNotFoundError: If user_id is given but the user no longer exists
        """
        if user_id is None:
            return Requester(client_ip=client_ip)
        return Requester(
            client_ip=client_ip,
            user_id=user_id,
            is_premium=self._is_premium(user_id),
        )

    def _is_premium(self, user_id: int) -> bool:
        cached = self.premium_status_cache.get(user_id)
        if cached is not None:
            return cached

        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        self.premium_status_cache.set(user_id, user.is_premium)
        logger.debug("premium_status_loaded", user_id=user_id, is_premium=user.is_premium)
        return user.is_premium
