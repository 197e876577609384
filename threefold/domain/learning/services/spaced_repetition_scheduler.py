"""
Spaced repetition scheduling.

A simplified SM-2: failed recalls collapse the interval to one day and lower
the ease factor, a hard recall stretches the interval by 10%, and a good or
better recall multiplies the interval by the ease factor and raises it.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypeVar

from threefold.domain.learning.value_objects.review_quality import ReviewQuality
from threefold.domain.learning.value_objects.spaced_repetition_state import (
    MINIMUM_EASE_FACTOR,
    SpacedRepetitionState,
)

EASE_PENALTY = 0.2
EASE_BONUS = 0.1
# Hard recalls stretch the interval by 11/10
HARD_INTERVAL_NUMERATOR = 11
HARD_INTERVAL_DENOMINATOR = 10
# Keeps due dates representable as datetimes
MAXIMUM_INTERVAL_DAYS = 36500
# Cards reviewed this many times count as "reviewing" rather than "learning"
REVIEWING_THRESHOLD = 5

T = TypeVar("T")


def _scale_by_ease(interval: int, ease_factor: float) -> int:
    """floor(interval * ease_factor), exact for eases with two decimals."""
    return interval * round(ease_factor * 100) // 100


@dataclass(frozen=True)
class StudyProgress:
    """Counts shown on the study screen."""

    total: int
    due: int
    new: int
    learning: int
    reviewing: int


class SpacedRepetitionScheduler:
    """Compute the next scheduling state after a review."""

    def review(
        self,
        state: SpacedRepetitionState,
        quality: ReviewQuality | int,
        now: datetime,
    ) -> SpacedRepetitionState:
        """
        Apply one review to a scheduling state.

        Args:
            state: State before the review
            quality: Learner's rating on the 1-5 scale
            now: Review instant

        Returns:
            New state; the input is not modified

        Raises:
            InvalidQualityError: If quality is not on the scale
        """
        rating = ReviewQuality.parse(quality)

        if rating.is_failure:
            interval = 1
            ease_factor = state.ease_factor - EASE_PENALTY
        elif rating.is_marginal:
            interval = state.interval * HARD_INTERVAL_NUMERATOR // HARD_INTERVAL_DENOMINATOR
            ease_factor = state.ease_factor
        else:
            interval = _scale_by_ease(state.interval, state.ease_factor)
            ease_factor = state.ease_factor + EASE_BONUS

        interval = min(max(1, interval), MAXIMUM_INTERVAL_DAYS)
        ease_factor = max(MINIMUM_EASE_FACTOR, round(ease_factor, 2))

        return SpacedRepetitionState(
            interval=interval,
            repetition_count=state.repetition_count + 1,
            ease_factor=ease_factor,
            due_date=now + timedelta(days=interval),
        )


def order_due_queue(items: Iterable[T], due_date: Callable[[T], datetime]) -> list[T]:
    """Order items by due date, earliest first; ties keep their input order."""
    return sorted(items, key=due_date)


def summarize_progress(states: Iterable[SpacedRepetitionState], now: datetime) -> StudyProgress:
    """Count cards by study stage."""
    total = due = new = learning = reviewing = 0
    for state in states:
        total += 1
        if state.is_due(now):
            due += 1
        if state.repetition_count == 0:
            new += 1
        elif state.repetition_count < REVIEWING_THRESHOLD:
            learning += 1
        else:
            reviewing += 1
    return StudyProgress(total=total, due=due, new=new, learning=learning, reviewing=reviewing)
