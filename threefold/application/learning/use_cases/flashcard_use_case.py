"""Creating, editing and removing cards in a user's deck."""

from collections.abc import Iterable

import structlog

from threefold.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from threefold.application.learning.protocols.spaced_repetition_repository import (
    SpacedRepetitionRepositoryProtocol,
)
from threefold.application.learning.use_cases.exceptions import FlashcardNotFoundError
from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.entities.flashcard import Flashcard
from threefold.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class FlashcardUseCase:
    """Deck management. Reviews live in StudySessionUseCase."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        spaced_repetition_repository: SpacedRepetitionRepositoryProtocol,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.spaced_repetition_repository = spaced_repetition_repository

    def create_flashcard(
        self,
        user_id: int,
        statement: str,
        proof: str,
        hints: str | None = None,
        tags: Iterable[str] = (),
    ) -> Flashcard:
        """
        Add a card to the user's deck.

        Raises:
            ValidationError: If statement or proof is blank or there are too many tags
        """
        flashcard = Flashcard.create(
            user_id=UserId(user_id),
            statement=statement,
            proof=proof,
            hints=hints,
            tags=tags,
        )
        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("created_flashcard", flashcard_id=flashcard.id.value, user_id=user_id)
        return flashcard

    def get_flashcard(self, flashcard_id: int, user_id: int) -> Flashcard:
        """
        Get one of the user's flashcards.

        Raises:
            FlashcardNotFoundError: If flashcard is not found or not owned by the user
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id), UserId(user_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard

    def list_flashcards(self, user_id: int) -> list[Flashcard]:
        """List the user's flashcards, newest first."""
        return self.flashcard_repository.find_by_user(UserId(user_id))

    def update_flashcard(
        self,
        flashcard_id: int,
        user_id: int,
        statement: str | None = None,
        proof: str | None = None,
        hints: str | None = None,
        tags: list[str] | None = None,
    ) -> Flashcard:
        """
        Update any subset of a flashcard's fields.

        ``None`` leaves a field untouched; an empty ``hints`` string clears the hints.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If no field is provided
        """
        if statement is None and proof is None and hints is None and tags is None:
            raise ValidationError("At least one field must be provided")

        flashcard = self.get_flashcard(flashcard_id, user_id)

        if statement is not None:
            flashcard.update_statement(statement)
        if proof is not None:
            flashcard.update_proof(proof)
        if hints is not None:
            flashcard.update_hints(hints)
        if tags is not None:
            flashcard.replace_tags(tags)

        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return flashcard

    def delete_flashcard(self, flashcard_id: int, user_id: int) -> None:
        """
        Delete a flashcard together with its scheduling state.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = self.get_flashcard(flashcard_id, user_id)
        removed_states = self.spaced_repetition_repository.delete_for_flashcard(flashcard.id)

        if not self.flashcard_repository.delete(flashcard.id, flashcard.user_id):
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id, removed_states=removed_states)
