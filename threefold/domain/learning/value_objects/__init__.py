from .review_quality import ReviewQuality
from .spaced_repetition_state import SpacedRepetitionState

__all__ = ["ReviewQuality", "SpacedRepetitionState"]
