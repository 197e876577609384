"""Use case for studying flashcards with spaced repetition."""

from dataclasses import dataclass
from datetime import datetime

import structlog

from threefold.application.common.clock import ClockProtocol
from threefold.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from threefold.application.learning.protocols.review_submission_repository import (
    ReviewSubmissionRepositoryProtocol,
)
from threefold.application.learning.protocols.spaced_repetition_repository import (
    SpacedRepetitionRepositoryProtocol,
)
from threefold.application.learning.use_cases.exceptions import FlashcardNotFoundError
from threefold.domain.common.exceptions import ValidationError
from threefold.domain.common.value_objects.ids import FlashcardId, UserId
from threefold.domain.learning.entities.flashcard import Flashcard
from threefold.domain.learning.services.spaced_repetition_scheduler import (
    SpacedRepetitionScheduler,
    StudyProgress,
    order_due_queue,
    summarize_progress,
)
from threefold.domain.learning.value_objects.review_quality import ReviewQuality
from threefold.domain.learning.value_objects.spaced_repetition_state import (
    SpacedRepetitionState,
)
from threefold.exceptions import ConcurrentUpdateConflictError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReviewOutcome:
    """Result of submitting a review."""

    flashcard_id: int
    state: SpacedRepetitionState
    duplicate: bool = False


@dataclass(frozen=True)
class StudyItem:
    """A flashcard paired with its scheduling state."""

    flashcard: Flashcard
    state: SpacedRepetitionState


class StudySessionUseCase:
    """Use case for review submission and study queues."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        spaced_repetition_repository: SpacedRepetitionRepositoryProtocol,
        review_submission_repository: ReviewSubmissionRepositoryProtocol,
        scheduler: SpacedRepetitionScheduler,
        clock: ClockProtocol,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.spaced_repetition_repository = spaced_repetition_repository
        self.review_submission_repository = review_submission_repository
        self.scheduler = scheduler
        self.clock = clock

    def review_flashcard(
        self,
        flashcard_id: int,
        user_id: int,
        quality: int,
        submission_id: str | None = None,
    ) -> ReviewOutcome:
        """
        Record a review of a flashcard and reschedule it.

        A repeated ``submission_id`` is answered with the stored state and
        ``duplicate=True`` without advancing the schedule again.

        Args:
            flashcard_id: ID of the reviewed flashcard
            user_id: ID of the reviewer
            quality: Rating on the 1-5 scale
            submission_id: Optional client-generated id used for deduplication

        Returns:
            ReviewOutcome with the state after the review

        Raises:
            InvalidQualityError: If quality is not on the scale
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If submission_id was already used for another flashcard
        """
        rating = ReviewQuality.parse(quality)
        flashcard_id_vo = FlashcardId(flashcard_id)
        user_id_vo = UserId(user_id)

        if not self.flashcard_repository.find_by_id(flashcard_id_vo, user_id_vo):
            raise FlashcardNotFoundError(flashcard_id)

        now = self.clock.now()

        if submission_id is not None:
            claimed_for = self.review_submission_repository.claim(
                submission_id, user_id_vo, flashcard_id_vo
            )
            if claimed_for is not None:
                return self._duplicate_outcome(
                    flashcard_id_vo, user_id_vo, claimed_for, submission_id
                )

        current = self.spaced_repetition_repository.find(flashcard_id_vo, user_id_vo)
        state = self.scheduler.review(current or SpacedRepetitionState.initial(now), rating, now)
        state = self.spaced_repetition_repository.save(flashcard_id_vo, user_id_vo, state)

        logger.info(
            "flashcard_reviewed",
            flashcard_id=flashcard_id,
            quality=int(rating),
            interval=state.interval,
            ease_factor=state.ease_factor,
        )
        return ReviewOutcome(flashcard_id=flashcard_id, state=state)

    def _duplicate_outcome(
        self,
        flashcard_id: FlashcardId,
        user_id: UserId,
        claimed_for: FlashcardId,
        submission_id: str,
    ) -> ReviewOutcome:
        if claimed_for != flashcard_id:
            raise ValidationError(
                f"Submission id {submission_id!r} was already used for another flashcard",
                field="submission_id",
            )

        # Read after the claim so a racing request's committed review is visible
        stored = self.spaced_repetition_repository.find(flashcard_id, user_id)
        if stored is None:
            raise ConcurrentUpdateConflictError(f"review submission {submission_id}")

        logger.info(
            "duplicate_review_submission",
            flashcard_id=flashcard_id.value,
            submission_id=submission_id,
        )
        return ReviewOutcome(flashcard_id=flashcard_id.value, state=stored, duplicate=True)

    def get_due_flashcards(self, user_id: int, limit: int | None = None) -> list[StudyItem]:
        """
        Get the user's due flashcards, earliest due first.

        Cards that were never studied get a default state, stored on first listing.
        """
        now = self.clock.now()
        items = self._study_items(UserId(user_id), now)
        due = [item for item in items if item.state.is_due(now)]
        queue = order_due_queue(due, lambda item: item.state.due_date)
        return queue[:limit] if limit is not None else queue

    def get_progress(self, user_id: int) -> StudyProgress:
        now = self.clock.now()
        items = self._study_items(UserId(user_id), now)
        return summarize_progress((item.state for item in items), now)

    def _study_items(self, user_id: UserId, now: datetime) -> list[StudyItem]:
        flashcards = self.flashcard_repository.find_by_user(user_id)
        states = self.spaced_repetition_repository.find_by_user(user_id)

        items = []
        for flashcard in flashcards:
            state = states.get(flashcard.id.value)
            if state is None:
                state = self.spaced_repetition_repository.save(
                    flashcard.id, user_id, SpacedRepetitionState.initial(now)
                )
            items.append(StudyItem(flashcard=flashcard, state=state))
        return items
