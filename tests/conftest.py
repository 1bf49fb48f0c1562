from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.collections import CollectionNames
from app.main import app
from app.repositories.url_summary.repository import UrlSummaryRepository


@pytest.fixture
def client():
    """TestClient with lifespan startup/shutdown hooks fully mocked."""
    with (
        patch(
            "app.core.database.DatabaseManager.connect",
            new_callable=AsyncMock,
        ),
        patch(
            "app.core.database.DatabaseManager.disconnect",
            new_callable=AsyncMock,
        ),
        patch(
            "app.core.database.DatabaseManager.get_collection",
            return_value=MagicMock(),
        ),
        patch(
            "app.repositories.url_summary.repository.UrlSummaryRepository.ensure_indexes",
            new_callable=AsyncMock,
        ),
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def mongo_repo() -> UrlSummaryRepository:
    """Repository backed by a fresh in-memory MongoDB collection."""
    collection = AsyncMongoMockClient(tz_aware=True)["test_db"][
        CollectionNames.URL_SUMMARIES
    ]
    return UrlSummaryRepository(collection)
