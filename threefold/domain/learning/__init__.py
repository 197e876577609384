"""Learning domain: flashcards and spaced repetition scheduling."""
