"""Schemas for reviews and study queues."""

from datetime import datetime

from pydantic import BaseModel, Field

from threefold.domain.learning.value_objects.spaced_repetition_state import (
    SpacedRepetitionState,
)
from threefold.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class ReviewRequest(BaseModel):
    # Range checked by ReviewQuality.parse
    quality: int = Field(..., description="1 Again, 2 Hard, 3 Good, 4 Easy, 5 Perfect")
    submission_id: str | None = Field(
        None,
        min_length=1,
        max_length=100,
        description="Client-generated id; resubmitting it does not apply the review twice",
    )


class SchedulingState(BaseModel):
    interval: int
    repetition_count: int
    ease_factor: float
    due_date: datetime

    @classmethod
    def from_state(cls, state: SpacedRepetitionState) -> "SchedulingState":
        return cls(
            interval=state.interval,
            repetition_count=state.repetition_count,
            ease_factor=state.ease_factor,
            due_date=state.due_date,
        )


class ReviewResponse(BaseModel):
    flashcard_id: int
    state: SchedulingState
    duplicate: bool = Field(..., description="True if this submission id was already applied")


class DueFlashcard(BaseModel):
    flashcard: Flashcard
    state: SchedulingState


class DueFlashcardsResponse(BaseModel):
    flashcards: list[DueFlashcard]


class StudyProgressResponse(BaseModel):
    total: int
    due: int
    new: int
    learning: int
    reviewing: int
