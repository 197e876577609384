"""API routes for flashcard management and reviews."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from threefold.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from threefold.application.learning.use_cases.study_session_use_case import StudySessionUseCase
from threefold.core import container
from threefold.domain.common.exceptions import DomainError
from threefold.domain.identity.entities.user import User
from threefold.exceptions import ThreefoldError
from threefold.infrastructure.common.di import inject_use_case
from threefold.infrastructure.identity.dependencies import get_current_user
from threefold.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardDeleteResponse,
    FlashcardResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
    ReviewRequest,
    ReviewResponse,
    SchedulingState,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=FlashcardResponse, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardResponse:
    """Create a flashcard owned by the current user."""
    try:
        flashcard = use_case.create_flashcard(
            user_id=current_user.id.value,
            statement=request.statement,
            proof=request.proof,
            hints=request.hints,
            tags=request.tags,
        )
        return FlashcardResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=Flashcard.from_entity(flashcard),
        )
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create flashcard", e) from e


@router.get("", response_model=FlashcardsListResponse)
def list_flashcards(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardsListResponse:
    """List the current user's flashcards, newest first."""
    try:
        flashcards = use_case.list_flashcards(current_user.id.value)
        return FlashcardsListResponse(flashcards=[Flashcard.from_entity(f) for f in flashcards])
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list flashcards", e) from e


@router.get("/{flashcard_id}", response_model=Flashcard)
def get_flashcard(
    flashcard_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    try:
        return Flashcard.from_entity(use_case.get_flashcard(flashcard_id, current_user.id.value))
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get flashcard {flashcard_id}", e) from e


@router.put("/{flashcard_id}", response_model=FlashcardResponse)
def update_flashcard(
    flashcard_id: int,
    request: FlashcardUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardResponse:
    """
    Update any subset of a flashcard's statement, proof, hints and tags.

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        flashcard = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            user_id=current_user.id.value,
            statement=request.statement,
            proof=request.proof,
            hints=request.hints,
            tags=request.tags,
        )
        return FlashcardResponse(
            success=True,
            message="Flashcard updated successfully",
            flashcard=Flashcard.from_entity(flashcard),
        )
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update flashcard {flashcard_id}", e) from e


@router.delete("/{flashcard_id}", response_model=FlashcardDeleteResponse)
def delete_flashcard(
    flashcard_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardDeleteResponse:
    """Delete a flashcard and its study history."""
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id, user_id=current_user.id.value)
        return FlashcardDeleteResponse(success=True, message="Flashcard deleted successfully")
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete flashcard {flashcard_id}", e) from e


@router.post("/{flashcard_id}/reviews", response_model=ReviewResponse)
def review_flashcard(
    flashcard_id: int,
    request: ReviewRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> ReviewResponse:
    """
    Submit a review and get the flashcard's next schedule.

    Quality is rated 1 (Again) to 5 (Perfect); anything else is a 400.
    """
    try:
        outcome = use_case.review_flashcard(
            flashcard_id=flashcard_id,
            user_id=current_user.id.value,
            quality=request.quality,
            submission_id=request.submission_id,
        )
        return ReviewResponse(
            flashcard_id=outcome.flashcard_id,
            state=SchedulingState.from_state(outcome.state),
            duplicate=outcome.duplicate,
        )
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"review flashcard {flashcard_id}", e) from e
