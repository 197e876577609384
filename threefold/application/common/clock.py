from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current instant. Always returns a timezone-aware UTC datetime."""

    def now(self) -> datetime: ...
