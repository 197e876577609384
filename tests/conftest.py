"""Pytest configuration and fixtures."""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256-signing"
os.environ["COOKIE_SECURE"] = "false"
os.environ["AI_PROVIDER"] = "openai"
os.environ["AI_MODEL_NAME"] = "gpt-4o-mini"
os.environ["OPENAI_API_KEY"] = "sk-test"

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from threefold import models  # noqa: E402
from threefold.application.learning.protocols.ai_content_service import (  # noqa: E402
    AutofillContent,
)
from threefold.core import container  # noqa: E402
from threefold.database import Base, create_database_engine, get_db  # noqa: E402
from threefold.main import app  # noqa: E402

# Test database (in-memory SQLite, one shared connection)
test_engine = create_database_engine("sqlite:///:memory:")
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "correct-horse-battery"
START = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class FakeAIService:
    """Records prompts instead of calling a model."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def autofill(self, statement: str) -> AutofillContent:
        self.calls.append(("autofill", statement))
        return AutofillContent(
            hints="Consider the parity of both sides.",
            proof="Suppose $\\sqrt{2} = p/q$ in lowest terms...",
            tags=["Number Theory", "proof by contradiction", "number theory"],
        )

    async def convert_to_latex(self, text: str) -> str:
        self.calls.append(("latex", text))
        return "$\\sqrt{2} \\notin \\mathbb{Q}$"

    async def suggest_tags(self, statement: str) -> list[str]:
        self.calls.append(("tags", statement))
        return ["Irrationality", " algebra "]


def _access_token(user_id: int) -> str:
    return container.token_service().create_access_token(user_id)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def second_session(db_session: Session) -> Generator[Session, None, None]:
    """Independent session on the same database, for concurrent writers."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock() -> Generator[FixedClock, None, None]:
    fixed = FixedClock(START)
    container.clock.override(providers.Object(fixed))
    yield fixed
    container.clock.reset_override()


@pytest.fixture
def fake_ai() -> Generator[FakeAIService, None, None]:
    service = FakeAIService()
    container.ai_content_service.override(providers.Object(service))
    yield service
    container.ai_content_service.reset_override()


@pytest.fixture(autouse=True)
def reset_premium_cache() -> Generator[None, None, None]:
    container.premium_status_cache.reset()
    yield
    container.premium_status_cache.reset()


@pytest.fixture
def client(db_session: Session, clock: FixedClock) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a fixed clock."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., models.User]:
    def _make_user(email: str, is_premium: bool = False) -> models.User:
        user = models.User(
            email=email,
            hashed_password=container.password_service().hash_password(TEST_PASSWORD),
            is_premium=is_premium,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def test_user(make_user: Callable[..., models.User]) -> models.User:
    return make_user("learner@example.com")


@pytest.fixture
def premium_user(make_user: Callable[..., models.User]) -> models.User:
    return make_user("patron@example.com", is_premium=True)


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {_access_token(test_user.id)}"}


@pytest.fixture
def premium_headers(premium_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {_access_token(premium_user.id)}"}
