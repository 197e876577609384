"""Tests for quota-gated AI endpoints."""

from datetime import timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from threefold import dependencies, models
from threefold.application.quota.use_cases import quota_enforcement_use_case
from threefold.exceptions import PersistenceUnavailableError
from threefold.infrastructure.quota.repositories.usage_record_repository import (
    UsageRecordRepository,
)

STATEMENT = {"statement": "The square root of two is irrational."}
DAY_MS = 24 * 60 * 60 * 1000


class TestGuestQuota:
    """Anonymous callers share five requests per thirty days across features."""

    @pytest.mark.usefixtures("fake_ai")
    def test_guest_is_throttled_after_five_requests(self, client: TestClient) -> None:
        for path, body in [
            ("/api/v1/ai/autofill", STATEMENT),
            ("/api/v1/ai/latex", {"text": "root two"}),
            ("/api/v1/ai/tags", STATEMENT),
            ("/api/v1/ai/autofill", STATEMENT),
            ("/api/v1/ai/latex", {"text": "root two"}),
        ]:
            assert client.post(path, json=body).status_code == status.HTTP_200_OK

        response = client.post("/api/v1/ai/tags", json=STATEMENT)

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.json() == {
            "detail": "Guest rate limit exceeded.",
            "retryAfter": 30 * DAY_MS,
        }
        assert response.headers["Retry-After"] == str(30 * 24 * 60 * 60)

    def test_guests_are_keyed_by_forwarded_ip(self, client: TestClient, fake_ai) -> None:
        for _ in range(5):
            client.post(
                "/api/v1/ai/tags", json=STATEMENT, headers={"X-Forwarded-For": "203.0.113.1"}
            )

        blocked = client.post(
            "/api/v1/ai/tags", json=STATEMENT, headers={"X-Forwarded-For": "203.0.113.1"}
        )
        other = client.post(
            "/api/v1/ai/tags",
            json=STATEMENT,
            headers={"X-Forwarded-For": "203.0.113.2, 10.0.0.1"},
        )

        assert blocked.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert other.status_code == status.HTTP_200_OK
        assert len(fake_ai.calls) == 6

    def test_denied_request_does_not_call_model(
        self, client: TestClient, db_session: Session, fake_ai
    ) -> None:
        for _ in range(6):
            client.post("/api/v1/ai/latex", json={"text": "x squared"})

        assert len(fake_ai.calls) == 5
        record = db_session.query(models.UsageRecord).one()
        assert len(record.timestamps) == 5

    @pytest.mark.usefixtures("fake_ai")
    def test_guest_is_admitted_again_after_oldest_request_expires(
        self, client: TestClient, clock
    ) -> None:
        client.post("/api/v1/ai/tags", json=STATEMENT)
        clock.advance(timedelta(days=1))
        for _ in range(4):
            client.post("/api/v1/ai/tags", json=STATEMENT)

        clock.advance(timedelta(days=28))
        denied = client.post("/api/v1/ai/tags", json=STATEMENT)
        assert denied.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert denied.json()["retryAfter"] == DAY_MS

        clock.advance(timedelta(days=1))
        assert client.post("/api/v1/ai/tags", json=STATEMENT).status_code == status.HTTP_200_OK

    @pytest.mark.usefixtures("fake_ai")
    def test_guest_usage_disabled(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(quota_enforcement_use_case, "is_guest_usage_enabled", lambda: False)

        response = client.post("/api/v1/ai/autofill", json=STATEMENT)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Login required."}


class TestUserQuota:
    """Free users get one request per feature per day; premium users are unlimited."""

    @pytest.mark.usefixtures("fake_ai")
    def test_free_user_gets_one_request_per_feature(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        first = client.post("/api/v1/ai/autofill", json=STATEMENT, headers=auth_headers)
        second = client.post("/api/v1/ai/autofill", json=STATEMENT, headers=auth_headers)
        latex = client.post("/api/v1/ai/latex", json={"text": "pi"}, headers=auth_headers)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert second.json()["retryAfter"] == DAY_MS
        assert second.json()["detail"].startswith("Daily limit exceeded for free users.")
        assert latex.status_code == status.HTTP_200_OK

    @pytest.mark.usefixtures("fake_ai")
    def test_free_user_quota_resets_after_a_day(
        self, client: TestClient, auth_headers: dict[str, str], clock
    ) -> None:
        client.post("/api/v1/ai/tags", json=STATEMENT, headers=auth_headers)

        clock.advance(timedelta(hours=1))
        denied = client.post("/api/v1/ai/tags", json=STATEMENT, headers=auth_headers)
        assert denied.json()["retryAfter"] == 23 * 60 * 60 * 1000
        assert denied.headers["Retry-After"] == str(23 * 60 * 60)

        clock.advance(timedelta(hours=23))
        allowed = client.post("/api/v1/ai/tags", json=STATEMENT, headers=auth_headers)
        assert allowed.status_code == status.HTTP_200_OK

    def test_premium_user_is_never_throttled(
        self,
        client: TestClient,
        db_session: Session,
        premium_headers: dict[str, str],
        fake_ai,
    ) -> None:
        for _ in range(10):
            response = client.post("/api/v1/ai/autofill", json=STATEMENT, headers=premium_headers)
            assert response.status_code == status.HTTP_200_OK

        assert len(fake_ai.calls) == 10
        assert db_session.query(models.UsageRecord).count() == 0

    @pytest.mark.usefixtures("fake_ai")
    def test_invalid_token_is_rejected_not_treated_as_guest(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ai/autofill",
            json=STATEMENT,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestAIResponses:
    def test_autofill_returns_normalized_content(self, client: TestClient, fake_ai) -> None:
        response = client.post("/api/v1/ai/autofill", json=STATEMENT)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["hints"] == "Consider the parity of both sides."
        assert data["tags"] == ["number theory", "proof by contradiction"]
        assert fake_ai.calls == [("autofill", STATEMENT["statement"])]

    @pytest.mark.usefixtures("fake_ai")
    def test_latex_and_tags(self, client: TestClient) -> None:
        latex = client.post("/api/v1/ai/latex", json={"text": "root two is not rational"})
        tags = client.post("/api/v1/ai/tags", json=STATEMENT)

        assert latex.json() == {"latex": "$\\sqrt{2} \\notin \\mathbb{Q}$"}
        assert tags.json() == {"tags": ["irrationality", "algebra"]}

    @pytest.mark.usefixtures("fake_ai")
    def test_empty_statement_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/ai/autofill", json={"statement": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_ai_disabled_returns_gone_without_spending_quota(
        self,
        client: TestClient,
        db_session: Session,
        monkeypatch: pytest.MonkeyPatch,
        fake_ai,
    ) -> None:
        monkeypatch.setattr(dependencies, "is_ai_enabled", lambda: False)

        response = client.post("/api/v1/ai/autofill", json=STATEMENT)

        assert response.status_code == status.HTTP_410_GONE
        assert fake_ai.calls == []
        assert db_session.query(models.UsageRecord).count() == 0

    @pytest.mark.usefixtures("fake_ai")
    def test_unavailable_usage_store(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def unavailable(self, identity_key, update):
            raise PersistenceUnavailableError("usage record update")

        monkeypatch.setattr(UsageRecordRepository, "transactional_update", unavailable)

        response = client.post("/api/v1/ai/tags", json=STATEMENT)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json() == {"detail": "Storage unavailable during usage record update"}
