class ValueObject:
    """
    Marker base for immutable values compared by content.

    Subclasses are ``@dataclass(frozen=True)`` and check their own rules in
    ``__post_init__``, so an instance that exists is always valid.
    """

    __slots__ = ()
