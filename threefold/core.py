from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from threefold.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from threefold.application.identity.use_cases.identity_resolution_use_case import (
    IdentityResolutionUseCase,
)
from threefold.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from threefold.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from threefold.application.learning.use_cases.ai_content_use_case import AIContentUseCase
from threefold.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from threefold.application.learning.use_cases.study_session_use_case import StudySessionUseCase
from threefold.application.quota.use_cases.quota_enforcement_use_case import (
    QuotaEnforcementUseCase,
    QuotaPolicies,
)
from threefold.config import get_settings
from threefold.domain.learning.services.spaced_repetition_scheduler import (
    SpacedRepetitionScheduler,
)
from threefold.domain.quota.services.usage_quota_tracker import UsageQuotaTracker
from threefold.infrastructure.ai.ai_service import AIService
from threefold.infrastructure.common.cache import PremiumStatusCache
from threefold.infrastructure.common.clock import SystemClock
from threefold.infrastructure.identity.repositories.user_repository import UserRepository
from threefold.infrastructure.identity.services import JWTTokenService, PepperedPasswordHasher
from threefold.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from threefold.infrastructure.learning.repositories.review_submission_repository import (
    ReviewSubmissionRepository,
)
from threefold.infrastructure.learning.repositories.spaced_repetition_repository import (
    SpacedRepetitionRepository,
)
from threefold.infrastructure.quota.repositories.usage_record_repository import (
    UsageRecordRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, bound per request by inject_use_case
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)
    clock = providers.Singleton(SystemClock)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    spaced_repetition_repository = providers.Factory(SpacedRepetitionRepository, db=db)
    review_submission_repository = providers.Factory(ReviewSubmissionRepository, db=db)
    usage_record_repository = providers.Factory(UsageRecordRepository, db=db)

    # Identity services
    password_service = providers.Singleton(
        PepperedPasswordHasher, pepper=settings.provided.PASSWORD_PEPPER
    )
    token_service = providers.Singleton(JWTTokenService.from_settings, settings=settings)
    premium_status_cache = providers.Singleton(
        PremiumStatusCache,
        ttl_seconds=settings.provided.PREMIUM_STATUS_CACHE_TTL_SECONDS,
    )

    # Domain services (pure domain logic, no db)
    usage_quota_tracker = providers.Factory(UsageQuotaTracker)
    spaced_repetition_scheduler = providers.Factory(SpacedRepetitionScheduler)
    quota_policies = providers.Singleton(QuotaPolicies.from_settings, settings=settings)

    ai_content_service = providers.Singleton(AIService)

    # Identity use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
        premium_status_cache=premium_status_cache,
    )
    identity_resolution_use_case = providers.Factory(
        IdentityResolutionUseCase,
        user_repository=user_repository,
        premium_status_cache=premium_status_cache,
    )

    # Quota use cases
    quota_enforcement_use_case = providers.Factory(
        QuotaEnforcementUseCase,
        usage_record_repository=usage_record_repository,
        clock=clock,
        policies=quota_policies,
        max_conflict_retries=settings.provided.QUOTA_MAX_CONFLICT_RETRIES,
        tracker=usage_quota_tracker,
    )

    # Learning use cases
    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
        spaced_repetition_repository=spaced_repetition_repository,
    )
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        flashcard_repository=flashcard_repository,
        spaced_repetition_repository=spaced_repetition_repository,
        review_submission_repository=review_submission_repository,
        scheduler=spaced_repetition_scheduler,
        clock=clock,
    )
    ai_content_use_case = providers.Factory(
        AIContentUseCase,
        quota_enforcement_use_case=quota_enforcement_use_case,
        ai_content_service=ai_content_service,
    )


container = Container()
