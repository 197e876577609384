from typing import Protocol

from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """A user's deck. Lookups take the owner so foreign cards are invisible."""

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None: ...

    def find_by_user(self, user_id: UserId) -> list[Flashcard]:
        """Newest first."""
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """Create or update, returning the stored card with its id and timestamps."""
        ...

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        """False when the card does not exist for this user."""
        ...
