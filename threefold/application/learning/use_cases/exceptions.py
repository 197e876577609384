from threefold.exceptions import NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """The flashcard does not exist or belongs to someone else."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__(f"Flashcard {flashcard_id} not found")
        self.flashcard_id = flashcard_id
