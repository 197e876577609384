"""threefold: flashcard study backend with spaced repetition and quota-gated AI helpers."""
