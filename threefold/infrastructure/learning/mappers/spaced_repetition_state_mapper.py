from threefold.domain.learning.value_objects.spaced_repetition_state import (
    SpacedRepetitionState,
)
from threefold.infrastructure.common.clock import ensure_utc
from threefold.models import SpacedRepetitionState as SpacedRepetitionStateORM


class SpacedRepetitionStateMapper:
    def to_domain(self, orm_model: SpacedRepetitionStateORM) -> SpacedRepetitionState:
        return SpacedRepetitionState(
            interval=orm_model.interval,
            repetition_count=orm_model.repetition_count,
            ease_factor=orm_model.ease_factor,
            due_date=ensure_utc(orm_model.due_date),
        )

    def apply(
        self, state: SpacedRepetitionState, orm_model: SpacedRepetitionStateORM
    ) -> SpacedRepetitionStateORM:
        """Copy scheduling fields onto an ORM row."""
        orm_model.interval = state.interval
        orm_model.repetition_count = state.repetition_count
        orm_model.ease_factor = state.ease_factor
        orm_model.due_date = state.due_date
        return orm_model
