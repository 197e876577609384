"""Tests for SpacedRepetitionScheduler domain service."""

import random
from datetime import UTC, datetime, timedelta

import pytest

from threefold.domain.common.exceptions import InvariantViolationError
from threefold.domain.learning.exceptions import InvalidQualityError
from threefold.domain.learning.services.spaced_repetition_scheduler import (
    MAXIMUM_INTERVAL_DAYS,
    SpacedRepetitionScheduler,
    order_due_queue,
    summarize_progress,
)
from threefold.domain.learning.value_objects.review_quality import ReviewQuality
from threefold.domain.learning.value_objects.spaced_repetition_state import (
    MINIMUM_EASE_FACTOR,
    SpacedRepetitionState,
)

T0 = datetime(2026, 1, 10, 8, 0, tzinfo=UTC)
T = datetime(2026, 1, 12, 9, 30, tzinfo=UTC)


def _state(
    interval: int = 1,
    repetition_count: int = 0,
    ease_factor: float = 2.5,
    due_date: datetime = T0,
) -> SpacedRepetitionState:
    return SpacedRepetitionState(
        interval=interval,
        repetition_count=repetition_count,
        ease_factor=ease_factor,
        due_date=due_date,
    )


class TestReview:
    def test_good_recall_multiplies_interval_by_ease(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(_state(), ReviewQuality.GOOD, T)

        assert result.interval == 2
        assert result.ease_factor == pytest.approx(2.6)
        assert result.repetition_count == 1
        assert result.due_date == T + timedelta(days=2)

    def test_failed_recall_resets_interval_and_lowers_ease(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(_state(), ReviewQuality.AGAIN, T)

        assert result.interval == 1
        assert result.ease_factor == pytest.approx(2.3)
        assert result.repetition_count == 1
        assert result.due_date == T + timedelta(days=1)

    def test_hard_recall_stretches_interval_and_keeps_ease(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(_state(interval=10, ease_factor=2.2), ReviewQuality.HARD, T)

        assert result.interval == 11
        assert result.ease_factor == pytest.approx(2.2)

    @pytest.mark.parametrize(
        ("interval", "ease_factor", "expected"),
        [(45, 1.4, 63), (20, 1.35, 27), (7, 2.0, 14), (13, 2.8, 36)],
    )
    def test_good_recall_floors_exact_product(
        self, interval: int, ease_factor: float, expected: int
    ) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(
            _state(interval=interval, repetition_count=7, ease_factor=ease_factor),
            ReviewQuality.GOOD,
            T,
        )

        assert result.interval == expected

    def test_hard_recall_floors_exact_product(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(_state(interval=30, ease_factor=2.2), ReviewQuality.HARD, T)

        assert result.interval == 33

    def test_hard_recall_on_one_day_interval_stays_at_one(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(_state(), ReviewQuality.HARD, T)

        assert result.interval == 1

    def test_plain_integers_are_accepted(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        assert scheduler.review(_state(), 3, T) == scheduler.review(_state(), ReviewQuality.GOOD, T)

    def test_repeated_perfect_reviews_grow_without_bound_errors(self) -> None:
        scheduler = SpacedRepetitionScheduler()
        state = SpacedRepetitionState.initial(T0)
        now = T0
        intervals = [state.interval]
        eases = [state.ease_factor]

        for _ in range(5):
            state = scheduler.review(state, ReviewQuality.PERFECT, now)
            now = state.due_date
            intervals.append(state.interval)
            eases.append(state.ease_factor)

        assert intervals == [1, 2, 5, 13, 36, 104]
        assert all(a < b for a, b in zip(intervals, intervals[1:], strict=False))
        assert all(a <= b for a, b in zip(eases, eases[1:], strict=False))

    def test_ease_never_drops_below_floor(self) -> None:
        scheduler = SpacedRepetitionScheduler()
        state = _state(ease_factor=1.4)

        for _ in range(10):
            state = scheduler.review(state, ReviewQuality.AGAIN, T)

        assert state.ease_factor == MINIMUM_EASE_FACTOR
        assert state.interval == 1

    def test_random_review_sequences_respect_floors(self) -> None:
        scheduler = SpacedRepetitionScheduler()
        rng = random.Random(20260117)

        for _ in range(50):
            state = SpacedRepetitionState.initial(T0)
            for _ in range(30):
                state = scheduler.review(state, rng.randint(1, 5), T)
                assert state.ease_factor >= MINIMUM_EASE_FACTOR
                assert state.interval >= 1

    def test_interval_is_capped(self) -> None:
        scheduler = SpacedRepetitionScheduler()

        result = scheduler.review(
            _state(interval=MAXIMUM_INTERVAL_DAYS, ease_factor=3.0), ReviewQuality.PERFECT, T
        )

        assert result.interval == MAXIMUM_INTERVAL_DAYS

    def test_review_is_deterministic(self) -> None:
        scheduler = SpacedRepetitionScheduler()
        state = _state(interval=6, repetition_count=3, ease_factor=2.36)

        assert scheduler.review(state, 4, T) == scheduler.review(state, 4, T)

    def test_review_does_not_modify_input_state(self) -> None:
        scheduler = SpacedRepetitionScheduler()
        state = _state()

        scheduler.review(state, ReviewQuality.EASY, T)

        assert state == _state()

    @pytest.mark.parametrize("quality", [0, 6, -1, "3", 3.0, None, True])
    def test_out_of_scale_quality_is_rejected(self, quality: object) -> None:
        scheduler = SpacedRepetitionScheduler()

        with pytest.raises(InvalidQualityError):
            scheduler.review(_state(), quality, T)  # type: ignore[arg-type]


class TestSpacedRepetitionState:
    def test_initial_state_is_due_immediately(self) -> None:
        state = SpacedRepetitionState.initial(T0)

        assert state == _state()
        assert state.is_due(T0)
        assert not state.is_due(T0 - timedelta(seconds=1))

    def test_ease_below_floor_is_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            _state(ease_factor=1.2)

    def test_zero_interval_is_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            _state(interval=0)


class TestOrderDueQueue:
    def test_orders_by_due_date_keeping_ties_stable(self) -> None:
        items = [
            ("b", T + timedelta(hours=2)),
            ("a", T),
            ("c", T + timedelta(hours=2)),
            ("d", T - timedelta(days=1)),
        ]

        ordered = order_due_queue(items, lambda item: item[1])

        assert [name for name, _ in ordered] == ["d", "a", "b", "c"]


class TestSummarizeProgress:
    def test_counts_cards_by_stage(self) -> None:
        states = [
            _state(),
            _state(repetition_count=1, due_date=T + timedelta(days=1)),
            _state(repetition_count=4, due_date=T - timedelta(days=1)),
            _state(repetition_count=5, due_date=T + timedelta(days=30)),
            _state(repetition_count=12, due_date=T),
        ]

        progress = summarize_progress(states, T)

        assert progress.total == 5
        assert progress.due == 3
        assert progress.new == 1
        assert progress.learning == 2
        assert progress.reviewing == 2
