from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.router import router
from app.core.config import settings
from app.core.database import db
from app.repositories.url_summary.repository import UrlSummaryRepository


def _configure_logging() -> None:
    """Send ``app.*`` logs to stdout at ``settings.log_level``, independent of uvicorn."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )
    app_log = logging.getLogger("app")
    app_log.setLevel(level)
    if not app_log.handlers:
        app_log.addHandler(handler)
    app_log.propagate = False


_configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await db.connect()
    await UrlSummaryRepository.from_db(db).ensure_indexes()
    yield
    await db.disconnect()


app = FastAPI(
    title="URL Summaries",
    description="Stores submitted HTTPS URLs with optional summaries.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
