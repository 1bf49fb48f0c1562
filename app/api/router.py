from fastapi import APIRouter

from app.api.url_summary.routes import router as url_summary_router

router = APIRouter()
router.include_router(url_summary_router)
