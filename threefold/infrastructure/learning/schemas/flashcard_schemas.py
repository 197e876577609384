"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from threefold.domain.learning.entities.flashcard import Flashcard as FlashcardEntity


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    statement: str = Field(..., min_length=1, description="Statement shown first")
    proof: str = Field(..., min_length=1, description="Proof or answer revealed last")
    hints: str | None = Field(None, description="Optional hints shown before the proof")
    tags: list[str] = Field(default_factory=list, description="Topic tags")


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard."""


class Flashcard(FlashcardBase):
    """Schema for Flashcard response."""

    id: int
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, entity: FlashcardEntity) -> "Flashcard":
        return cls(
            id=entity.id.value,
            user_id=entity.user_id.value,
            statement=entity.statement,
            proof=entity.proof,
            hints=entity.hints,
            tags=list(entity.tags),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class FlashcardUpdateRequest(BaseModel):
    """Schema for updating a flashcard. Omitted fields are left unchanged."""

    statement: str | None = Field(None, min_length=1, description="New statement")
    proof: str | None = Field(None, min_length=1, description="New proof")
    hints: str | None = Field(None, description="New hints; an empty string clears them")
    tags: list[str] | None = Field(None, description="Replacement tag list")


class FlashcardResponse(BaseModel):
    """Schema for create and update responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class FlashcardsListResponse(BaseModel):
    flashcards: list[Flashcard]
