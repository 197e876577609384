from typing import Protocol


class PremiumStatusCacheProtocol(Protocol):
    """
    Short-lived cache of premium flags keyed by user id.

    Writers of the premium flag must call ``invalidate`` so a downgrade or
    upgrade is visible on the next request.
    """

    def get(self, user_id: int) -> bool | None: ...

    def set(self, user_id: int, is_premium: bool) -> None: ...

    def invalidate(self, user_id: int) -> None: ...
