from .ai_content_service import AIContentServiceProtocol, AutofillContent
from .flashcard_repository import FlashcardRepositoryProtocol
from .review_submission_repository import ReviewSubmissionRepositoryProtocol
from .spaced_repetition_repository import SpacedRepetitionRepositoryProtocol

__all__ = [
    "AIContentServiceProtocol",
    "AutofillContent",
    "FlashcardRepositoryProtocol",
    "ReviewSubmissionRepositoryProtocol",
    "SpacedRepetitionRepositoryProtocol",
]
