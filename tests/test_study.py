"""Tests for study queue API endpoints."""

from datetime import timedelta

from fastapi import status
from fastapi.testclient import TestClient


def _create(client: TestClient, headers: dict[str, str], statement: str) -> int:
    response = client.post(
        "/api/v1/flashcards",
        json={"statement": statement, "proof": "Left to the reader."},
        headers=headers,
    )
    return response.json()["flashcard"]["id"]


def _review(client: TestClient, headers: dict[str, str], flashcard_id: int, quality: int) -> None:
    response = client.post(
        f"/api/v1/flashcards/{flashcard_id}/reviews", json={"quality": quality}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK


class TestDueFlashcards:
    """Test suite for GET /study/due endpoint."""

    def test_new_flashcards_are_due(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        first = _create(client, auth_headers, "Lemma A")
        second = _create(client, auth_headers, "Lemma B")

        response = client.get("/api/v1/study/due", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        items = response.json()["flashcards"]
        assert {item["flashcard"]["id"] for item in items} == {first, second}
        assert all(item["state"]["repetition_count"] == 0 for item in items)

    def test_reviewed_flashcard_returns_when_due(
        self, client: TestClient, auth_headers: dict[str, str], clock
    ) -> None:
        lemma = _create(client, auth_headers, "Lemma A")
        theorem = _create(client, auth_headers, "Theorem B")
        _review(client, auth_headers, theorem, quality=5)

        due_now = client.get("/api/v1/study/due", headers=auth_headers).json()["flashcards"]
        assert [item["flashcard"]["id"] for item in due_now] == [lemma]

        clock.advance(timedelta(days=2))
        due_later = client.get("/api/v1/study/due", headers=auth_headers).json()["flashcards"]
        assert [item["flashcard"]["id"] for item in due_later] == [lemma, theorem]

    def test_limit(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        for n in range(3):
            _create(client, auth_headers, f"Corollary {n}")

        response = client.get("/api/v1/study/due?limit=2", headers=auth_headers)

        assert len(response.json()["flashcards"]) == 2

    def test_invalid_limit(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/v1/study/due?limit=0", headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_requires_auth(self, client: TestClient) -> None:
        assert client.get("/api/v1/study/due").status_code == status.HTTP_401_UNAUTHORIZED


class TestStudyProgress:
    def test_progress_counts_stages(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        reviewed = _create(client, auth_headers, "Lemma A")
        _create(client, auth_headers, "Lemma B")
        _review(client, auth_headers, reviewed, quality=4)

        response = client.get("/api/v1/study/progress", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total": 2, "due": 1, "new": 1, "learning": 1, "reviewing": 0}

    def test_progress_for_empty_deck(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/study/progress", headers=auth_headers)

        assert response.json() == {"total": 0, "due": 0, "new": 0, "learning": 0, "reviewing": 0}
