"""Quota domain exceptions."""

from datetime import timedelta

from threefold.domain.common.exceptions import DomainError


class InvalidPolicyError(DomainError):
    """Raised when a quota policy is misconfigured."""

    def __init__(self, window_duration: timedelta) -> None:
        super().__init__(
            "Quota window duration must be positive",
            window_duration=window_duration,
        )
        self.window_duration = window_duration
