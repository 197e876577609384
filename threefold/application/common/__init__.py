from .clock import ClockProtocol

__all__ = ["ClockProtocol"]
