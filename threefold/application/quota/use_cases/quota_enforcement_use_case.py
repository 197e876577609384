"""Use case for admitting requests to quota-gated features."""

from dataclasses import dataclass
from datetime import timedelta

import structlog

from threefold.application.common.clock import ClockProtocol
from threefold.application.identity.use_cases.identity_resolution_use_case import Requester
from threefold.application.quota.protocols.usage_record_repository import (
    UsageRecordRepositoryProtocol,
)
from threefold.config import Settings
from threefold.domain.quota.services.usage_quota_tracker import UsageQuotaTracker
from threefold.domain.quota.value_objects.usage import QuotaDecision, QuotaPolicy, UsageRecord
from threefold.exceptions import (
    ConcurrentUpdateConflictError,
    GuestAccessDisabledError,
    QuotaExceededError,
)
from threefold.feature_flags import is_guest_usage_enabled

logger = structlog.get_logger(__name__)

GUEST_LIMIT_MESSAGE = "Guest rate limit exceeded."
USER_LIMIT_MESSAGE = (
    "Daily limit exceeded for free users. Upgrade to premium for unlimited access."
)


@dataclass(frozen=True)
class QuotaPolicies:
    """Policies applied to guests and to free-tier users."""

    guest: QuotaPolicy
    user: QuotaPolicy

    @classmethod
    def from_settings(cls, settings: Settings) -> "QuotaPolicies":
        """
        Build policies from configuration.

        Raises:
            InvalidPolicyError: If a configured window is not positive
        """
        return cls(
            guest=QuotaPolicy(
                window_duration=timedelta(days=settings.GUEST_QUOTA_WINDOW_DAYS),
                limit=settings.GUEST_QUOTA_LIMIT,
            ),
            user=QuotaPolicy(
                window_duration=timedelta(hours=settings.USER_QUOTA_WINDOW_HOURS),
                limit=settings.USER_QUOTA_LIMIT,
            ),
        )


class QuotaEnforcementUseCase:
    """Admit or throttle requests to quota-gated features."""

    def __init__(
        self,
        usage_record_repository: UsageRecordRepositoryProtocol,
        clock: ClockProtocol,
        policies: QuotaPolicies,
        max_conflict_retries: int,
        tracker: UsageQuotaTracker,
    ) -> None:
        self.usage_record_repository = usage_record_repository
        self.clock = clock
        self.policies = policies
        self.max_conflict_retries = max_conflict_retries
        self.tracker = tracker

    def enforce(self, requester: Requester, feature: str) -> QuotaDecision | None:
        """
        Record one use of ``feature`` or reject it.

        The usage record is committed before this returns, so the caller may
        run the gated side effect right after.

        Args:
            requester: Resolved identity of the caller
            feature: Name of the gated feature

        Returns:
            The admitting decision, or None when the requester is exempt

        Raises:
            GuestAccessDisabledError: If guests are not allowed
            QuotaExceededError: If the quota is exhausted
            ConcurrentUpdateConflictError: If conflicts persist after all retries
            PersistenceUnavailableError: If the usage store is unavailable
        """
        if requester.is_premium:
            logger.debug("quota_bypassed", user_id=requester.user_id, feature=feature)
            return None

        if requester.is_guest and not is_guest_usage_enabled():
            raise GuestAccessDisabledError

        key = requester.usage_key(feature)
        policy = self.policies.guest if requester.is_guest else self.policies.user
        decision = self._evaluate_with_retries(key, policy)

        if not decision.allowed:
            assert decision.retry_after is not None
            logger.info(
                "quota_denied",
                identity=key,
                feature=feature,
                retry_after_ms=decision.retry_after_ms,
            )
            message = GUEST_LIMIT_MESSAGE if requester.is_guest else USER_LIMIT_MESSAGE
            raise QuotaExceededError(message, decision.retry_after)

        logger.info(
            "quota_admitted",
            identity=key,
            feature=feature,
            used=len(decision.updated_record.timestamps),
            limit=policy.limit,
        )
        return decision

    def _evaluate_with_retries(self, key: str, policy: QuotaPolicy) -> QuotaDecision:
        retries = 0
        while True:
            try:
                return self._evaluate_and_commit(key, policy)
            except ConcurrentUpdateConflictError:
                if retries >= self.max_conflict_retries:
                    logger.error("quota_conflict_retries_exhausted", identity=key, retries=retries)
                    raise
                retries += 1
                logger.warning("quota_update_conflict", identity=key, retry=retries)

    def _evaluate_and_commit(self, key: str, policy: QuotaPolicy) -> QuotaDecision:
        # Fresh instant per attempt
        now = self.clock.now()
        decisions: list[QuotaDecision] = []

        def apply(record: UsageRecord) -> UsageRecord:
            decision = self.tracker.evaluate(record, policy, now)
            decisions.append(decision)
            return decision.updated_record if decision.allowed else record

        self.usage_record_repository.transactional_update(key, apply)
        return decisions[-1]
