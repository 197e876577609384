"""Learning domain exceptions."""

from threefold.domain.common.exceptions import ValidationError


class InvalidQualityError(ValidationError):
    """Raised when a review quality is outside the rating scale."""

    def __init__(self, quality: object) -> None:
        super().__init__(
            f"Review quality must be an integer from 1 to 5, got {quality!r}",
            field="quality",
            value=quality,
        )
