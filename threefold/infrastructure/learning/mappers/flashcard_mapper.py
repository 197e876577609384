from threefold.domain.common.value_objects import FlashcardId, UserId
from threefold.domain.learning.entities.flashcard import Flashcard
from threefold.infrastructure.common.clock import ensure_utc
from threefold.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Translate between the ``flashcards`` row and the Flashcard entity."""

    def to_domain(self, row: FlashcardORM) -> Flashcard:
        return Flashcard(
            id=FlashcardId(row.id),
            user_id=UserId(row.user_id),
            statement=row.statement,
            proof=row.proof,
            hints=row.hints,
            tags=list(row.tags or []),
            created_at=ensure_utc(row.created_at),
            updated_at=ensure_utc(row.updated_at),
        )

    def apply(self, flashcard: Flashcard, row: FlashcardORM) -> FlashcardORM:
        """Copy the editable sides and tags onto a row; ownership never changes."""
        row.statement = flashcard.statement
        row.proof = flashcard.proof
        row.hints = flashcard.hints
        row.tags = list(flashcard.tags)
        return row

    def new_row(self, flashcard: Flashcard) -> FlashcardORM:
        return self.apply(flashcard, FlashcardORM(user_id=flashcard.user_id.value))
