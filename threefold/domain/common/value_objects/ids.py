"""Typed primary keys, so a flashcard id cannot be passed where a user id is expected."""

from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    pass


@dataclass(frozen=True)
class FlashcardId(EntityId):
    pass
