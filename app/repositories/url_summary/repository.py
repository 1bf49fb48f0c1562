from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from app.core.collections import CollectionNames
from app.core.config import settings
from app.core.validation import validate_url
from app.models.url_summary.document import UrlSummaryDocument
from app.repositories.base import BaseRepository, StorageError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Current UTC time truncated to the millisecond precision BSON stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_document(raw: dict[str, Any]) -> UrlSummaryDocument:
    return UrlSummaryDocument(
        id=str(raw["_id"]),
        url=raw["url"],
        summary=raw.get("summary"),
        created_at=_as_utc(raw["created_at"]),
        updated_at=_as_utc(raw["updated_at"]),
    )


class UrlSummaryRepository(BaseRepository):
    """MongoDB repository for the ``url_summaries`` collection."""

    COLLECTION_NAME = CollectionNames.URL_SUMMARIES

    async def ensure_indexes(self) -> None:
        await self._col.create_index([("created_at", DESCENDING)])
        await self._col.create_index([("url", ASCENDING)])

    async def insert(self, url: str, summary: str | None = None) -> UrlSummaryDocument:
        """Persist a new record for *url* and return it.

        *url* is re-checked against the validation gate here as well, so
        nothing that bypasses the service layer can store a bad URL.

        A single ``insert_one`` writes the whole document, so a record is
        either stored with every field set or not stored at all.

        Raises:
            UrlValidationError: *url* fails the validation gate.
            StorageError: the write could not be completed.
        """
        validate_url(url)

        now = _utcnow()
        record = {
            "_id": str(ObjectId()),
            "url": url,
            "summary": summary,
            "created_at": now,
            "updated_at": now,
        }
        try:
            await self._col.insert_one(record)
        except PyMongoError as exc:
            logger.exception("MongoDB insert failed for url=%s", url)
            raise StorageError("Database write error") from exc

        return _to_document(record)

    async def list_recent(self, limit: int | None = None) -> list[UrlSummaryDocument]:
        """Return at most *limit* records, newest first.

        *limit* defaults to ``settings.list_default_limit``.

        Ties on ``created_at`` fall back to ``_id`` descending; ObjectId
        strings grow with creation order, so the result is deterministic.
        """
        if limit is None:
            limit = settings.list_default_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        try:
            cursor = (
                self._col.find({})
                .sort([("created_at", DESCENDING), ("_id", DESCENDING)])
                .limit(limit)
            )
            rows = await cursor.to_list(length=limit)
        except PyMongoError as exc:
            logger.exception("MongoDB list query failed (limit=%d)", limit)
            raise StorageError("Database read error") from exc

        return [_to_document(row) for row in rows]
