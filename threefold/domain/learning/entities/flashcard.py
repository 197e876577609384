"""
Flashcard entity.

A flashcard has three sides: the statement shown to the learner, optional
hints, and the proof (or answer) revealed last.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from threefold.domain.common.entity import Entity
from threefold.domain.common.exceptions import ValidationError
from threefold.domain.common.value_objects import FlashcardId, UserId

MAX_TAGS = 20


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim, lowercase and deduplicate tags, keeping first-seen order."""
    seen: list[str] = []
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard owned by a single user.

    Business Rules:
    - Statement and proof cannot be empty
    - Tags are lowercase, unique and at most MAX_TAGS
    """

    id: FlashcardId
    user_id: UserId
    statement: str
    proof: str
    hints: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.statement or not self.statement.strip():
            raise ValidationError("Statement cannot be empty", field="statement")
        if not self.proof or not self.proof.strip():
            raise ValidationError("Proof cannot be empty", field="proof")
        self.tags = normalize_tags(self.tags)
        if len(self.tags) > MAX_TAGS:
            raise ValidationError(f"A flashcard can have at most {MAX_TAGS} tags", field="tags")

    def update_statement(self, statement: str) -> None:
        """
        Update the statement.

        Raises:
            ValidationError: If statement is empty
        """
        if not statement or not statement.strip():
            raise ValidationError("Statement cannot be empty", field="statement")
        self.statement = statement.strip()

    def update_proof(self, proof: str) -> None:
        """
        Update the proof.

        Raises:
            ValidationError: If proof is empty
        """
        if not proof or not proof.strip():
            raise ValidationError("Proof cannot be empty", field="proof")
        self.proof = proof.strip()

    def update_hints(self, hints: str | None) -> None:
        """Update the hints; blank hints are cleared."""
        self.hints = hints.strip() if hints and hints.strip() else None

    def replace_tags(self, tags: Iterable[str]) -> None:
        normalized = normalize_tags(tags)
        if len(normalized) > MAX_TAGS:
            raise ValidationError(f"A flashcard can have at most {MAX_TAGS} tags", field="tags")
        self.tags = normalized

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    @classmethod
    def create(
        cls,
        user_id: UserId,
        statement: str,
        proof: str,
        hints: str | None = None,
        tags: Iterable[str] = (),
    ) -> "Flashcard":
        """New, not yet persisted flashcard."""
        return cls(
            id=FlashcardId.unsaved(),
            user_id=user_id,
            statement=statement.strip(),
            proof=proof.strip(),
            hints=hints.strip() if hints and hints.strip() else None,
            tags=list(tags),
        )
