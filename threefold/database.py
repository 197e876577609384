"""Engine lifecycle and per-request sessions."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from threefold.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


def _sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:  # noqa: ANN401
    # Needed for ON DELETE CASCADE; SQLite defaults it off per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: str) -> Engine:
    """SQLite (tests, local runs) shares one connection; PostgreSQL gets a pool."""
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _sqlite_foreign_keys)
    return engine


class _EngineState:
    """Process-wide engine, created at startup or on the first request."""

    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None

    @classmethod
    def open(cls, settings: Settings) -> sessionmaker[Session]:
        cls.engine = create_database_engine(settings.DATABASE_URL)
        cls.sessions = sessionmaker(bind=cls.engine, autoflush=False)
        return cls.sessions

    @classmethod
    def close(cls) -> None:
        if cls.engine is not None:
            cls.engine.dispose()
        cls.engine = None
        cls.sessions = None


def initialize_database(settings: Settings) -> None:
    _EngineState.open(settings)


def dispose_engine() -> None:
    _EngineState.close()


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    return _EngineState.sessions or _EngineState.open(settings)


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
