"""Bridge between FastAPI's per-request session and the DI container."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from threefold.core import container
from threefold.database import DatabaseSession

T = TypeVar("T")


@contextmanager
def request_scope(db: Session) -> Iterator[None]:
    """Bind ``container.db`` to the request's session for the duration of the block."""
    container.db.override(db)
    try:
        yield
    finally:
        container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """FastAPI dependency that builds ``provider`` against the request's session."""

    def dependency(db: DatabaseSession) -> T:
        with request_scope(db):
            return provider()

    return dependency
