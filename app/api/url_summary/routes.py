from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import db
from app.core.validation import UrlValidationError
from app.models.common import ErrorResponse, RejectionResponse
from app.models.url_summary.schemas import (
    UrlCheckRequest,
    UrlCheckResponse,
    UrlSummaryCreateRequest,
    UrlSummaryResponse,
)
from app.repositories.base import StorageError
from app.repositories.url_summary.repository import UrlSummaryRepository
from app.services.url_summary.service import UrlSummaryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/url-summaries", tags=["url-summaries"])

_STORAGE_UNAVAILABLE = "Storage is unavailable, please try again later."


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------


def _get_service() -> UrlSummaryService:
    """FastAPI dependency that builds a ``UrlSummaryService`` for each request."""
    return UrlSummaryService(UrlSummaryRepository.from_db(db))


# ---------------------------------------------------------------------------
# GET /url-summaries
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=list[UrlSummaryResponse],
    responses={503: {"model": ErrorResponse}},
    summary="List the most recent URL summaries",
)
async def list_url_summaries(
    limit: int = Query(
        default=settings.list_default_limit, ge=1, le=settings.list_max_limit
    ),
    service: UrlSummaryService = Depends(_get_service),
) -> list[UrlSummaryResponse]:
    """Return the newest stored records first.

    - **200** - up to ``limit`` records, newest first
    - **422** - ``limit`` out of range
    - **503** - database unreachable
    """
    try:
        docs = await service.list_recent(limit)
    except StorageError as exc:
        logger.error("GET /url-summaries storage error: %s", exc)
        raise HTTPException(status_code=503, detail=_STORAGE_UNAVAILABLE)
    return [UrlSummaryResponse(**doc.model_dump()) for doc in docs]


# ---------------------------------------------------------------------------
# POST /url-summaries
# ---------------------------------------------------------------------------


@router.post(
    "",
    status_code=201,
    response_model=UrlSummaryResponse,
    responses={
        422: {"model": RejectionResponse},
        503: {"model": ErrorResponse},
    },
    summary="Submit a URL with an optional summary",
)
async def create_url_summary(
    request: UrlSummaryCreateRequest,
    service: UrlSummaryService = Depends(_get_service),
) -> UrlSummaryResponse | JSONResponse:
    """Validate and store a URL.

    - **201** - record stored and returned
    - **422** - URL rejected (``InvalidUrl`` or ``SchemeNotAllowed``)
    - **503** - database unreachable
    - **500** - unexpected failure
    """
    try:
        doc = await service.create(request.url, request.summary)
    except UrlValidationError as exc:
        return JSONResponse(
            status_code=422,
            content=RejectionResponse(code=exc.code, detail=str(exc)).model_dump(),
        )
    except StorageError as exc:
        logger.error("POST /url-summaries storage error for %s: %s", request.url, exc)
        raise HTTPException(status_code=503, detail=_STORAGE_UNAVAILABLE)
    except Exception as exc:
        logger.exception("POST /url-summaries failed for %s", request.url)
        raise HTTPException(status_code=500, detail=str(exc))
    return UrlSummaryResponse(**doc.model_dump())


# ---------------------------------------------------------------------------
# POST /url-summaries/validate
# ---------------------------------------------------------------------------


@router.post(
    "/validate",
    response_model=UrlCheckResponse,
    summary="Check a URL without storing it",
)
async def validate_url_summary(
    request: UrlCheckRequest,
    service: UrlSummaryService = Depends(_get_service),
) -> UrlCheckResponse:
    """Early feedback for interactive callers.

    Runs the same check ``POST /url-summaries`` enforces, which still
    re-validates on submission.
    """
    rejection = service.check(request.url)
    if rejection is None:
        return UrlCheckResponse(url=request.url, valid=True)
    return UrlCheckResponse(
        url=request.url,
        valid=False,
        code=rejection.code,
        detail=str(rejection),
    )
