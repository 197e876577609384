"""Errors raised when a business rule or invariant does not hold."""


class DomainError(Exception):
    """
    Root of the domain error tree.

    ``details`` carries structured context for logs; ``message`` is safe to
    show to API clients.
    """

    def __init__(self, message: str, **details: object) -> None:
        super().__init__(message)
        self.message = message
        self.details = {key: value for key, value in details.items() if value is not None}


class ValidationError(DomainError):
    """Input rejected by a domain rule, e.g. a blank statement."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message, field=field, value=value)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} {entity_id} does not exist",
            entity_type=entity_type,
            entity_id=entity_id,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvariantViolationError(DomainError):
    """A value object or entity would be constructed in an invalid state."""

    def __init__(self, owner: str, invariant: str) -> None:
        super().__init__(f"{owner}: {invariant}", owner=owner, invariant=invariant)
        self.owner = owner
        self.invariant = invariant
