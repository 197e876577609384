from typing import Protocol

from threefold.domain.common.value_objects.ids import FlashcardId, UserId


class ReviewSubmissionRepositoryProtocol(Protocol):
    """Client-supplied submission ids of reviews already applied."""

    def claim(
        self, submission_id: str, user_id: UserId, flashcard_id: FlashcardId
    ) -> FlashcardId | None:
        """
        Reserve a submission id for a review of ``flashcard_id``.

        The claim is flushed but not committed; it becomes durable with the
        next commit of the session, together with the scheduling state.

        Returns:
            None if this call made the claim, otherwise the flashcard the id
            was already claimed for
        """
        ...
