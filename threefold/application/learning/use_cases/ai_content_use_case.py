"""Use case for quota-gated AI content generation."""

import structlog

from threefold.application.identity.use_cases.identity_resolution_use_case import Requester
from threefold.application.learning.protocols.ai_content_service import (
    AIContentServiceProtocol,
    AutofillContent,
)
from threefold.application.quota.use_cases.quota_enforcement_use_case import (
    QuotaEnforcementUseCase,
)
from threefold.domain.learning.entities.flashcard import normalize_tags

logger = structlog.get_logger(__name__)

AUTOFILL_FEATURE = "autofill"
LATEX_FEATURE = "latex"
TAGS_FEATURE = "tags"


class AIContentUseCase:
    """Generate flashcard content with AI, one quota unit per call."""

    def __init__(
        self,
        quota_enforcement_use_case: QuotaEnforcementUseCase,
        ai_content_service: AIContentServiceProtocol,
    ) -> None:
        self.quota_enforcement_use_case = quota_enforcement_use_case
        self.ai_content_service = ai_content_service

    async def autofill(self, requester: Requester, statement: str) -> AutofillContent:
        """
        Draft hints, a proof and tags for a statement.

        Raises:
            QuotaExceededError: If the requester's quota is exhausted
            GuestAccessDisabledError: If the requester is a guest and guests are not allowed
        """
        self.quota_enforcement_use_case.enforce(requester, AUTOFILL_FEATURE)

        content = await self.ai_content_service.autofill(statement)

        logger.info("flashcard_autofilled", user_id=requester.user_id, tag_count=len(content.tags))
        return AutofillContent(
            hints=content.hints,
            proof=content.proof,
            tags=normalize_tags(content.tags),
        )

    async def convert_to_latex(self, requester: Requester, text: str) -> str:
        """
        Rewrite natural-language math as LaTeX.

        Raises:
            QuotaExceededError: If the requester's quota is exhausted
            GuestAccessDisabledError: If the requester is a guest and guests are not allowed
        """
        self.quota_enforcement_use_case.enforce(requester, LATEX_FEATURE)

        latex = await self.ai_content_service.convert_to_latex(text)

        logger.info("text_converted_to_latex", user_id=requester.user_id)
        return latex

    async def suggest_tags(self, requester: Requester, statement: str) -> list[str]:
        self.quota_enforcement_use_case.enforce(requester, TAGS_FEATURE)

        tags = normalize_tags(await self.ai_content_service.suggest_tags(statement))

        logger.info("tags_suggested", user_id=requester.user_id, tag_count=len(tags))
        return tags
