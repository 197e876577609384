from .flashcard import Flashcard

__all__ = ["Flashcard"]
