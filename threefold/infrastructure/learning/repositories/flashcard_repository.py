"""SQLAlchemy persistence for flashcards."""

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from threefold.domain.common.exceptions import EntityNotFoundError
from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.entities.flashcard import Flashcard
from threefold.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from threefold.models import Flashcard as FlashcardORM


def _owned_by(user_id: UserId) -> Select[tuple[FlashcardORM]]:
    return select(FlashcardORM).where(FlashcardORM.user_id == user_id.value)


class FlashcardRepository:
    """Every read is scoped to the owner; another user's card looks missing."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def _row(self, flashcard_id: FlashcardId, user_id: UserId) -> FlashcardORM | None:
        stmt = _owned_by(user_id).where(FlashcardORM.id == flashcard_id.value)
        return self.db.scalars(stmt).one_or_none()

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        row = self._row(flashcard_id, user_id)
        return self.mapper.to_domain(row) if row else None

    def find_by_user(self, user_id: UserId) -> list[Flashcard]:
        stmt = _owned_by(user_id).order_by(
            FlashcardORM.created_at.desc(), FlashcardORM.id.desc()
        )
        return [self.mapper.to_domain(row) for row in self.db.scalars(stmt)]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Insert a new card or update an existing one in place.

        Raises:
            EntityNotFoundError: If a persisted card is no longer in the deck
        """
        if flashcard.id.is_persisted:
            row = self._row(flashcard.id, flashcard.user_id)
            if row is None:
                raise EntityNotFoundError("Flashcard", flashcard.id.value)
            self.mapper.apply(flashcard, row)
        else:
            row = self.mapper.new_row(flashcard)
            self.db.add(row)

        self.db.commit()
        self.db.refresh(row)
        return self.mapper.to_domain(row)

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        row = self._row(flashcard_id, user_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True
