"""API routes for study queues and progress."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from threefold.application.learning.use_cases.study_session_use_case import StudySessionUseCase
from threefold.core import container
from threefold.domain.common.exceptions import DomainError
from threefold.domain.identity.entities.user import User
from threefold.exceptions import ThreefoldError
from threefold.infrastructure.common.di import inject_use_case
from threefold.infrastructure.identity.dependencies import get_current_user
from threefold.infrastructure.learning.schemas import (
    DueFlashcard,
    DueFlashcardsResponse,
    Flashcard,
    SchedulingState,
    StudyProgressResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study", tags=["study"])


@router.get("/due", response_model=DueFlashcardsResponse)
def get_due_flashcards(
    current_user: Annotated[User, Depends(get_current_user)],
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> DueFlashcardsResponse:
    """Flashcards due for review, earliest due first."""
    try:
        items = use_case.get_due_flashcards(current_user.id.value, limit=limit)
        return DueFlashcardsResponse(
            flashcards=[
                DueFlashcard(
                    flashcard=Flashcard.from_entity(item.flashcard),
                    state=SchedulingState.from_state(item.state),
                )
                for item in items
            ]
        )
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get due flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/progress", response_model=StudyProgressResponse)
def get_progress(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudyProgressResponse:
    try:
        progress = use_case.get_progress(current_user.id.value)
        return StudyProgressResponse(
            total=progress.total,
            due=progress.due,
            new=progress.new,
            learning=progress.learning,
            reviewing=progress.reviewing,
        )
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get study progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
