"""Protocol for usage record persistence."""

from collections.abc import Callable
from typing import Protocol

from threefold.domain.quota.value_objects.usage import UsageRecord


class UsageRecordRepositoryProtocol(Protocol):
    """Per-identity usage records with an atomic read-modify-write."""

    def get(self, identity_key: str) -> UsageRecord | None:
        """
        Load the usage record for an identity.

        Raises:
            PersistenceUnavailableError: If the store cannot be read
        """
        ...

    def transactional_update(
        self,
        identity_key: str,
        update: Callable[[UsageRecord], UsageRecord],
    ) -> UsageRecord:
        """
        Atomically apply ``update`` to the identity's record.

        ``update`` receives ``UsageRecord.empty(identity_key)`` when no record
        exists. Nothing is written when it returns an equal record.

        Returns:
            The record as stored after the update

        Raises:
            ConcurrentUpdateConflictError: If another writer committed first
            PersistenceUnavailableError: If the store cannot be read or written
        """
        ...
