"""API routes for quota-gated AI content generation."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from threefold.application.identity.use_cases.identity_resolution_use_case import Requester
from threefold.application.learning.use_cases.ai_content_use_case import AIContentUseCase
from threefold.core import container
from threefold.dependencies import require_ai_enabled
from threefold.domain.common.exceptions import DomainError
from threefold.exceptions import ThreefoldError
from threefold.infrastructure.common.di import inject_use_case
from threefold.infrastructure.identity.dependencies import get_requester
from threefold.infrastructure.learning.schemas import (
    AutofillResponse,
    LatexResponse,
    QuotaExceededResponse,
    StatementRequest,
    TagsResponse,
    TextRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/ai",
    tags=["ai"],
    dependencies=[Depends(require_ai_enabled)],
    responses={status.HTTP_429_TOO_MANY_REQUESTS: {"model": QuotaExceededResponse}},
)


def _ai_failure(feature: str, e: Exception) -> HTTPException:
    logger.error(f"AI {feature} failed: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("/autofill", response_model=AutofillResponse)
async def autofill(
    request: StatementRequest,
    requester: Annotated[Requester, Depends(get_requester)],
    use_case: AIContentUseCase = Depends(inject_use_case(container.ai_content_use_case)),
) -> AutofillResponse:
    """
    Draft hints, a proof and tags for a statement.

    Open to guests; counts against the caller's quota.
    """
    try:
        content = await use_case.autofill(requester, request.statement)
        return AutofillResponse(hints=content.hints, proof=content.proof, tags=content.tags)
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _ai_failure("autofill", e) from e


@router.post("/latex", response_model=LatexResponse)
async def convert_to_latex(
    request: TextRequest,
    requester: Annotated[Requester, Depends(get_requester)],
    use_case: AIContentUseCase = Depends(inject_use_case(container.ai_content_use_case)),
) -> LatexResponse:
    """Rewrite natural-language math as LaTeX."""
    try:
        return LatexResponse(latex=await use_case.convert_to_latex(requester, request.text))
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _ai_failure("latex", e) from e


@router.post("/tags", response_model=TagsResponse)
async def suggest_tags(
    request: StatementRequest,
    requester: Annotated[Requester, Depends(get_requester)],
    use_case: AIContentUseCase = Depends(inject_use_case(container.ai_content_use_case)),
) -> TagsResponse:
    try:
        return TagsResponse(tags=await use_case.suggest_tags(requester, request.statement))
    except (ThreefoldError, DomainError):
        raise
    except Exception as e:
        raise _ai_failure("tags", e) from e
