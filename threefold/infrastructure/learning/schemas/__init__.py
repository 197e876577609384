"""Learning context schemas."""

from threefold.infrastructure.learning.schemas.ai_schemas import (
    AutofillResponse,
    LatexResponse,
    QuotaExceededResponse,
    StatementRequest,
    TagsResponse,
    TextRequest,
)
from threefold.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardBase,
    FlashcardCreateRequest,
    FlashcardDeleteResponse,
    FlashcardResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
)
from threefold.infrastructure.learning.schemas.study_schemas import (
    DueFlashcard,
    DueFlashcardsResponse,
    ReviewRequest,
    ReviewResponse,
    SchedulingState,
    StudyProgressResponse,
)

__all__ = [
    "AutofillResponse",
    "DueFlashcard",
    "DueFlashcardsResponse",
    "Flashcard",
    "FlashcardBase",
    "FlashcardCreateRequest",
    "FlashcardDeleteResponse",
    "FlashcardResponse",
    "FlashcardUpdateRequest",
    "FlashcardsListResponse",
    "LatexResponse",
    "QuotaExceededResponse",
    "ReviewRequest",
    "ReviewResponse",
    "SchedulingState",
    "StatementRequest",
    "StudyProgressResponse",
    "TagsResponse",
    "TextRequest",
]
