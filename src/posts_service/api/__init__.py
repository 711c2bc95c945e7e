from fastapi import APIRouter

from .health import router as health_router
from .posts import router as posts_router

router = APIRouter()
router.include_router(health_router)
router.include_router(posts_router)
