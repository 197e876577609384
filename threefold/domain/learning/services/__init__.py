from .spaced_repetition_scheduler import (
    SpacedRepetitionScheduler,
    StudyProgress,
    order_due_queue,
    summarize_progress,
)

__all__ = [
    "SpacedRepetitionScheduler",
    "StudyProgress",
    "order_due_queue",
    "summarize_progress",
]
