"""Scheduling state of one flashcard for one learner."""

from dataclasses import dataclass
from datetime import datetime

from threefold.domain.common.exceptions import InvariantViolationError
from threefold.domain.common.value_object import ValueObject

INITIAL_EASE_FACTOR = 2.5
MINIMUM_EASE_FACTOR = 1.3
INITIAL_INTERVAL_DAYS = 1


@dataclass(frozen=True)
class SpacedRepetitionState(ValueObject):
    """
    SM-2 style scheduling state.

    Attributes:
        interval: Days between the last review and the next one (>= 1)
        repetition_count: Reviews recorded so far (>= 0)
        ease_factor: Interval growth rate (>= 1.3)
        due_date: Instant from which the card is due again
    """

    interval: int
    repetition_count: int
    ease_factor: float
    due_date: datetime

    def __post_init__(self) -> None:
        if self.interval < 1:
            raise InvariantViolationError("SpacedRepetitionState", "interval must be at least 1")
        if self.repetition_count < 0:
            raise InvariantViolationError(
                "SpacedRepetitionState", "repetition_count cannot be negative"
            )
        if self.ease_factor < MINIMUM_EASE_FACTOR:
            raise InvariantViolationError(
                "SpacedRepetitionState", f"ease_factor cannot drop below {MINIMUM_EASE_FACTOR}"
            )

    @classmethod
    def initial(cls, now: datetime) -> "SpacedRepetitionState":
        """State of a card that has never been reviewed; due immediately."""
        return cls(
            interval=INITIAL_INTERVAL_DAYS,
            repetition_count=0,
            ease_factor=INITIAL_EASE_FACTOR,
            due_date=now,
        )

    def is_due(self, now: datetime) -> bool:
        return self.due_date <= now
