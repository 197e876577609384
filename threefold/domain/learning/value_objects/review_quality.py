from enum import IntEnum

from threefold.domain.learning.exceptions import InvalidQualityError


class ReviewQuality(IntEnum):
    """Learner's self-rated recall, as offered by the study screen."""

    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4
    PERFECT = 5

    @classmethod
    def parse(cls, value: object) -> "ReviewQuality":
        """
        Convert a raw rating into a ReviewQuality.

        Raises:
            InvalidQualityError: If the value is not an integer on the scale
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass but never a rating
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidQualityError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidQualityError(value) from None

    @property
    def is_failure(self) -> bool:
        return self < ReviewQuality.HARD

    @property
    def is_marginal(self) -> bool:
        return self == ReviewQuality.HARD
