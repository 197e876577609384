"""Learning application layer: flashcards, study sessions and AI content."""
