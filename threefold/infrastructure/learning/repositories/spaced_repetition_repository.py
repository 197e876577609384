"""Repository for spaced repetition scheduling state."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.value_objects.spaced_repetition_state import (
    SpacedRepetitionState,
)
from threefold.infrastructure.learning.mappers.spaced_repetition_state_mapper import (
    SpacedRepetitionStateMapper,
)
from threefold.models import SpacedRepetitionState as SpacedRepetitionStateORM


class SpacedRepetitionRepository:
    """One row per (flashcard, user); writes are last-write-wins."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SpacedRepetitionStateMapper()

    def _find(self, flashcard_id: FlashcardId, user_id: UserId) -> SpacedRepetitionStateORM | None:
        stmt = select(SpacedRepetitionStateORM).where(
            SpacedRepetitionStateORM.flashcard_id == flashcard_id.value,
            SpacedRepetitionStateORM.user_id == user_id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find(self, flashcard_id: FlashcardId, user_id: UserId) -> SpacedRepetitionState | None:
        orm_model = self._find(flashcard_id, user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> dict[int, SpacedRepetitionState]:
        stmt = select(SpacedRepetitionStateORM).where(
            SpacedRepetitionStateORM.user_id == user_id.value
        )
        return {
            orm.flashcard_id: self.mapper.to_domain(orm)
            for orm in self.db.execute(stmt).scalars().all()
        }

    def save(
        self, flashcard_id: FlashcardId, user_id: UserId, state: SpacedRepetitionState
    ) -> SpacedRepetitionState:
        orm_model = self._find(flashcard_id, user_id)
        if orm_model is None:
            orm_model = SpacedRepetitionStateORM(
                flashcard_id=flashcard_id.value, user_id=user_id.value
            )
            self.db.add(orm_model)

        self.mapper.apply(state, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_for_flashcard(self, flashcard_id: FlashcardId) -> int:
        stmt = delete(SpacedRepetitionStateORM).where(
            SpacedRepetitionStateORM.flashcard_id == flashcard_id.value
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount
