"""ASGI entry point: ``uvicorn posts_service.main:app``."""

from .api import router
from .core.config import settings
from .core.setup import create_application, lifespan_factory

# Posts table is created on startup once the database answers
app = create_application(
    router=router,
    settings=settings,
    lifespan=lifespan_factory(settings, create_tables_on_start=True),
)
