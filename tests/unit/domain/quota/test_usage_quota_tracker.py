"""Tests for UsageQuotaTracker domain service."""

from datetime import UTC, datetime, timedelta

import pytest

from threefold.domain.quota.exceptions import InvalidPolicyError
from threefold.domain.quota.services.usage_quota_tracker import UsageQuotaTracker
from threefold.domain.quota.value_objects.usage import QuotaPolicy, UsageRecord

T = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
DAILY_SINGLE = QuotaPolicy(window_duration=timedelta(hours=24), limit=1)
GUEST = QuotaPolicy(window_duration=timedelta(days=30), limit=5)


def _record(*timestamps: datetime) -> UsageRecord:
    return UsageRecord(identity="guest:203.0.113.7", timestamps=tuple(timestamps))


class TestEvaluate:
    def test_first_request_is_admitted_and_recorded(self) -> None:
        tracker = UsageQuotaTracker()

        decision = tracker.evaluate(UsageRecord.empty("user:1:autofill"), DAILY_SINGLE, T)

        assert decision.allowed
        assert decision.updated_record.timestamps == (T,)
        assert decision.retry_after is None
        assert decision.retry_after_ms is None

    def test_second_request_within_window_is_denied_with_retry_after(self) -> None:
        tracker = UsageQuotaTracker()
        first = tracker.evaluate(UsageRecord.empty("user:1:autofill"), DAILY_SINGLE, T)

        second = tracker.evaluate(first.updated_record, DAILY_SINGLE, T + timedelta(hours=1))

        assert not second.allowed
        assert second.retry_after == timedelta(hours=23)
        assert second.retry_after_ms == 23 * 60 * 60 * 1000
        assert second.updated_record.timestamps == (T,)

    def test_stale_timestamps_are_pruned_before_counting(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(
            T - timedelta(days=40),
            T - timedelta(days=10),
            T - timedelta(days=5),
            T - timedelta(days=1),
        )

        decision = tracker.evaluate(record, GUEST, T)

        assert decision.allowed
        assert decision.updated_record.timestamps == (
            T - timedelta(days=10),
            T - timedelta(days=5),
            T - timedelta(days=1),
            T,
        )

    def test_timestamp_exactly_one_window_old_is_excluded(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(T - timedelta(hours=24))

        decision = tracker.evaluate(record, DAILY_SINGLE, T)

        assert decision.allowed
        assert decision.updated_record.timestamps == (T,)

    def test_limit_minus_one_active_admits(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(*(T - timedelta(days=d) for d in (4, 3, 2, 1)))

        assert tracker.evaluate(record, GUEST, T).allowed

    def test_limit_active_denies(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(*(T - timedelta(days=d) for d in (5, 4, 3, 2, 1)))

        decision = tracker.evaluate(record, GUEST, T)

        assert not decision.allowed
        assert decision.retry_after == timedelta(days=25)

    def test_retry_after_counts_from_oldest_active_timestamp(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(
            T - timedelta(days=31),
            T - timedelta(days=29, hours=23),
            T - timedelta(days=20),
            T - timedelta(days=3),
            T - timedelta(days=2),
            T - timedelta(days=1),
        )

        decision = tracker.evaluate(record, GUEST, T)

        assert not decision.allowed
        assert decision.retry_after == timedelta(hours=1)
        assert decision.retry_after > timedelta(0)
        assert T - timedelta(days=31) not in decision.updated_record.timestamps

    def test_denial_never_adds_a_timestamp(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(*(T - timedelta(hours=h) for h in (5, 4, 3, 2, 1)))

        decision = tracker.evaluate(record, GUEST, T)

        assert not decision.allowed
        assert len(decision.updated_record.timestamps) == 5

    def test_admission_adds_exactly_one_timestamp(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(T - timedelta(days=2))

        decision = tracker.evaluate(record, GUEST, T)

        assert len(decision.updated_record.timestamps) == len(record.timestamps) + 1

    def test_zero_limit_always_denies_for_a_full_window(self) -> None:
        tracker = UsageQuotaTracker()
        policy = QuotaPolicy(window_duration=timedelta(hours=24), limit=0)

        decision = tracker.evaluate(UsageRecord.empty("user:1:latex"), policy, T)

        assert not decision.allowed
        assert decision.retry_after == timedelta(hours=24)

    def test_evaluate_does_not_mutate_input_record(self) -> None:
        tracker = UsageQuotaTracker()
        record = _record(T - timedelta(days=40))

        tracker.evaluate(record, GUEST, T)

        assert record.timestamps == (T - timedelta(days=40),)


class TestQuotaPolicy:
    @pytest.mark.parametrize("window", [timedelta(0), timedelta(seconds=-1)])
    def test_non_positive_window_is_rejected(self, window: timedelta) -> None:
        with pytest.raises(InvalidPolicyError):
            QuotaPolicy(window_duration=window, limit=1)
