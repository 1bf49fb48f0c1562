"""Integration tests.

These tests exercise the full request → service → repository → database pipeline.

What is mocked:
  - MongoDB replaced with an in-memory AsyncMongoMockClient (no Docker needed)

What is NOT mocked (runs real code):
  - FastAPI routes, dependency injection, lifespan
  - UrlSummaryService business logic and the URL validation gate
  - UrlSummaryRepository (insert, list_recent, ensure_indexes)
  - Response shaping, error handling
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.main import app


@pytest.fixture
def integration_client():
    """Full-stack client backed by a fresh in-memory MongoDB."""
    with patch("app.core.database.AsyncIOMotorClient", AsyncMongoMockClient):
        with TestClient(app) as client:
            yield client


# ── POST /url-summaries ────────────────────────────────────────────────────────

class TestIntegrationCreate:
    def test_create_without_summary(self, integration_client):
        resp = integration_client.post(
            "/url-summaries", json={"url": "https://example.com/article"}
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["url"] == "https://example.com/article"
        assert body["summary"] is None
        assert body["id"]
        assert body["created_at"] == body["updated_at"]

    def test_create_with_summary(self, integration_client):
        resp = integration_client.post(
            "/url-summaries",
            json={"url": "https://example.com", "summary": "A test page"},
        )

        assert resp.status_code == 201
        assert resp.json()["summary"] == "A test page"
        # Stored exactly as submitted, no trailing slash added
        assert resp.json()["url"] == "https://example.com"

    def test_http_url_is_rejected_and_not_stored(self, integration_client):
        resp = integration_client.post("/url-summaries", json={"url": "http://example.com"})

        assert resp.status_code == 422
        assert resp.json()["code"] == "SchemeNotAllowed"
        assert integration_client.get("/url-summaries").json() == []

    def test_not_a_url_is_rejected_and_not_stored(self, integration_client):
        resp = integration_client.post("/url-summaries", json={"url": "not-a-url"})

        assert resp.status_code == 422
        assert resp.json()["code"] == "InvalidUrl"
        assert integration_client.get("/url-summaries").json() == []


# ── GET /url-summaries ─────────────────────────────────────────────────────────

class TestIntegrationList:
    def test_empty_store_returns_empty_list(self, integration_client):
        resp = integration_client.get("/url-summaries")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_create_then_list_returns_new_record_first(self, integration_client):
        integration_client.post("/url-summaries", json={"url": "https://example.com/a"})
        created = integration_client.post(
            "/url-summaries", json={"url": "https://example.com/b"}
        ).json()

        listed = integration_client.get("/url-summaries").json()

        assert listed[0] == created
        assert len(listed) == 2

    def test_list_is_bounded_by_limit(self, integration_client):
        for i in range(4):
            integration_client.post(
                "/url-summaries", json={"url": f"https://example.com/{i}"}
            )

        resp = integration_client.get("/url-summaries?limit=2")

        assert resp.status_code == 200
        assert [r["url"] for r in resp.json()] == [
            "https://example.com/3",
            "https://example.com/2",
        ]

    def test_list_twice_returns_same_sequence(self, integration_client):
        for i in range(3):
            integration_client.post(
                "/url-summaries", json={"url": f"https://example.com/{i}"}
            )

        first = integration_client.get("/url-summaries").json()
        second = integration_client.get("/url-summaries").json()

        assert first == second

    def test_ids_are_unique(self, integration_client):
        ids = {
            integration_client.post(
                "/url-summaries", json={"url": "https://example.com/same"}
            ).json()["id"]
            for _ in range(3)
        }
        assert len(ids) == 3


# ── Interactive check ──────────────────────────────────────────────────────────

class TestIntegrationValidate:
    def test_validate_does_not_store(self, integration_client):
        resp = integration_client.post(
            "/url-summaries/validate", json={"url": "https://example.com"}
        )

        assert resp.status_code == 200
        assert resp.json()["valid"] is True
        assert integration_client.get("/url-summaries").json() == []
