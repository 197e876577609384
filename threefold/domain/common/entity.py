"""Identifiers and the identity-based entity base class."""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject

UNSAVED = 0


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Integer primary key wrapped in its own type per entity.

    ``UNSAVED`` marks an entity the database has not assigned a key to yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < UNSAVED:
            raise ValueError(f"{type(self).__name__} cannot be negative, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def unsaved(cls) -> Self:
        return cls(UNSAVED)

    @property
    def is_persisted(self) -> bool:
        return self.value != UNSAVED


IdType = TypeVar("IdType", bound=EntityId)


class Entity(Generic[IdType]):
    """
    Mutable domain object with identity.

    Equality and hashing use ``id`` only, so an edited flashcard is still the
    same flashcard. Subclasses are dataclasses declared with ``eq=False``.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.id == self.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
