from __future__ import annotations

import logging

from app.core.validation import UrlValidationError, check_url, validate_url
from app.models.url_summary.document import UrlSummaryDocument
from app.repositories.url_summary.repository import UrlSummaryRepository

logger = logging.getLogger(__name__)


class UrlSummaryService:
    """Business logic for submitting and listing URL summaries."""

    def __init__(self, repo: UrlSummaryRepository) -> None:
        self._repo = repo

    async def list_recent(self, limit: int | None = None) -> list[UrlSummaryDocument]:
        """Return the newest records, at most *limit* of them."""
        return await self._repo.list_recent(limit)

    async def create(self, url: str, summary: str | None = None) -> UrlSummaryDocument:
        """Validate *url* and persist it with an optional *summary*.

        This is the authoritative check: any early check a client ran
        is ignored here.

        Raises:
            UrlValidationError: *url* was rejected; nothing is stored.
            StorageError: raised by repository on database failure.
        """
        try:
            validate_url(url)
        except UrlValidationError as exc:
            logger.info("Rejected URL submission (%s): %r", exc.code, url)
            raise
        doc = await self._repo.insert(url, summary)
        logger.info("Stored URL summary id=%s url=%s", doc.id, doc.url)
        return doc

    def check(self, url: str) -> UrlValidationError | None:
        """Run the validation gate without storing anything."""
        return check_url(url)
