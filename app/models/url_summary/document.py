from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UrlSummaryDocument(BaseModel):
    """Internal representation of a stored URL summary.

    ``id`` is persisted as the collection's ``_id``.
    """

    id: str
    url: str
    summary: str | None = None
    created_at: datetime
    updated_at: datetime
