"""Repository for review submission ids."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.exceptions import ConcurrentUpdateConflictError
from threefold.models import ReviewSubmission as ReviewSubmissionORM

logger = structlog.get_logger(__name__)


class ReviewSubmissionRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _claimed_for(self, submission_id: str, user_id: UserId) -> FlashcardId | None:
        stmt = select(ReviewSubmissionORM.flashcard_id).where(
            ReviewSubmissionORM.user_id == user_id.value,
            ReviewSubmissionORM.submission_id == submission_id,
        )
        flashcard_id = self.db.scalars(stmt).one_or_none()
        return FlashcardId(flashcard_id) if flashcard_id is not None else None

    def claim(
        self, submission_id: str, user_id: UserId, flashcard_id: FlashcardId
    ) -> FlashcardId | None:
        existing = self._claimed_for(submission_id, user_id)
        if existing is not None:
            return existing

        self.db.add(
            ReviewSubmissionORM(
                submission_id=submission_id,
                user_id=user_id.value,
                flashcard_id=flashcard_id.value,
            )
        )
        try:
            self.db.flush()
        except IntegrityError as e:
            # Lost the race to a concurrent request with the same id
            self.db.rollback()
            logger.info("review_submission_already_claimed", submission_id=submission_id)
            existing = self._claimed_for(submission_id, user_id)
            if existing is None:
                raise ConcurrentUpdateConflictError(f"review submission {submission_id}") from e
            return existing
        return None
