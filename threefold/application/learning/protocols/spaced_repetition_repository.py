from typing import Protocol

from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.value_objects.spaced_repetition_state import (
    SpacedRepetitionState,
)


class SpacedRepetitionRepositoryProtocol(Protocol):
    """Scheduling state per (flashcard, user) pair."""

    def find(self, flashcard_id: FlashcardId, user_id: UserId) -> SpacedRepetitionState | None: ...

    def find_by_user(self, user_id: UserId) -> dict[int, SpacedRepetitionState]:
        """Return the user's states keyed by flashcard id."""
        ...

    def save(
        self, flashcard_id: FlashcardId, user_id: UserId, state: SpacedRepetitionState
    ) -> SpacedRepetitionState: ...

    def delete_for_flashcard(self, flashcard_id: FlashcardId) -> int:
        """Delete every state of a flashcard; returns the number removed."""
        ...
