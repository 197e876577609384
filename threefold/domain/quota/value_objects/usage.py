"""Value objects for sliding-window usage quotas."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from threefold.domain.common.value_object import ValueObject
from threefold.domain.quota.exceptions import InvalidPolicyError


@dataclass(frozen=True)
class QuotaPolicy(ValueObject):
    """
    How many requests an identity may make within a trailing window.

    A ``limit`` of zero or less is a valid policy that never admits.
    """

    window_duration: timedelta
    limit: int

    def __post_init__(self) -> None:
        if self.window_duration <= timedelta(0):
            raise InvalidPolicyError(self.window_duration)


@dataclass(frozen=True)
class UsageRecord(ValueObject):
    """Request timestamps of one identity, oldest first."""

    identity: str
    timestamps: tuple[datetime, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls, identity: str) -> "UsageRecord":
        """Record for an identity that has never made a request."""
        return cls(identity=identity)

    def with_timestamps(self, timestamps: tuple[datetime, ...]) -> "UsageRecord":
        return UsageRecord(identity=self.identity, timestamps=timestamps)


@dataclass(frozen=True)
class QuotaDecision(ValueObject):
    """
    Outcome of evaluating a request against a quota.

    Attributes:
        allowed: Whether the request is admitted
        updated_record: Record the caller must persist (pruned, plus the new
            timestamp when admitted)
        retry_after: Time until capacity frees up, set only when denied
    """

    allowed: bool
    updated_record: UsageRecord
    retry_after: timedelta | None = None

    @property
    def retry_after_ms(self) -> int | None:
        """``retry_after`` in whole milliseconds, rounded up."""
        if self.retry_after is None:
            return None
        return math.ceil(self.retry_after / timedelta(milliseconds=1))
