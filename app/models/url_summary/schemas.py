from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UrlSummaryCreateRequest(BaseModel):
    """Request body for POST /url-summaries.

    ``url`` is a plain string here; the validation gate in the service
    layer decides whether it is acceptable so rejections carry a code.
    """

    url: str
    summary: str | None = None


class UrlSummaryResponse(BaseModel):
    """API response shape for a stored URL summary."""

    id: str
    url: str
    summary: str | None
    created_at: datetime
    updated_at: datetime


class UrlCheckRequest(BaseModel):
    """Request body for POST /url-summaries/validate."""

    url: str


class UrlCheckResponse(BaseModel):
    url: str
    valid: bool
    code: str | None = None
    detail: str | None = None
