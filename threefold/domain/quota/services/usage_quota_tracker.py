"""
Sliding-window usage quota.

Pure domain service: it never reads or writes storage. The caller loads the
identity's record, evaluates it and persists ``QuotaDecision.updated_record``
atomically with the admission.
"""

from datetime import datetime

from threefold.domain.quota.value_objects.usage import QuotaDecision, QuotaPolicy, UsageRecord


class UsageQuotaTracker:
    """
    Decide whether an identity may make one more request.

    Only timestamps younger than the policy window count toward the limit.
    Stale timestamps are dropped from the record on every evaluation, so a
    record never grows past ``limit`` entries plus whatever aged out since the
    last write.
    """

    def prune(self, record: UsageRecord, policy: QuotaPolicy, now: datetime) -> UsageRecord:
        """Drop timestamps that have aged out of the window."""
        active = tuple(t for t in record.timestamps if now - t < policy.window_duration)
        if len(active) == len(record.timestamps):
            return record
        return record.with_timestamps(active)

    def evaluate(self, record: UsageRecord, policy: QuotaPolicy, now: datetime) -> QuotaDecision:
        """
        Evaluate one request against the policy.

        Args:
            record: Current usage record (``UsageRecord.empty`` when none exists)
            policy: Applicable quota policy
            now: Request instant

        Returns:
            QuotaDecision. When denied, ``retry_after`` is the time until the
            oldest active timestamp leaves the window.
        """
        pruned = self.prune(record, policy, now)

        if policy.limit <= 0:
            return QuotaDecision(
                allowed=False,
                updated_record=pruned,
                retry_after=policy.window_duration,
            )

        if len(pruned.timestamps) >= policy.limit:
            oldest = min(pruned.timestamps)
            return QuotaDecision(
                allowed=False,
                updated_record=pruned,
                retry_after=policy.window_duration - (now - oldest),
            )

        return QuotaDecision(
            allowed=True,
            updated_record=pruned.with_timestamps((*pruned.timestamps, now)),
        )
