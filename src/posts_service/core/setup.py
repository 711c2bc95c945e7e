import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..middleware.request_logging_middleware import RequestLoggingMiddleware
from ..storage import build_post_storage
from .config import Settings
from .exceptions import http_exception_handler, validation_exception_handler
from .logger import setup_logging

logger = logging.getLogger(__name__)


def lifespan_factory(
    settings: Settings,
    create_tables_on_start: bool = True,
) -> Callable[[FastAPI], AbstractAsyncContextManager[Any]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    On startup the storage backend is built, connectivity is awaited (retrying
    at ``DB_CONNECT_RETRY_INTERVAL``) and the posts table is created if
    missing. The storage object lives on ``app.state.storage`` until shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        storage = build_post_storage(settings)
        logger.info(f"Using {storage.name} storage backend")
        try:
            await storage.connect(
                retry_interval=settings.DB_CONNECT_RETRY_INTERVAL,
                max_attempts=settings.DB_CONNECT_MAX_ATTEMPTS,
            )
            if create_tables_on_start:
                await storage.create_tables()

            app.state.storage = storage
            yield
        finally:
            await storage.close()
            logger.info("Storage closed")

    return lifespan


def create_application(
    router: APIRouter,
    settings: Settings,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]] | None = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures a FastAPI application.

    Args:
        router: Router holding every endpoint
        settings: Settings instance; also exposed as ``app.state.settings``
        lifespan: Lifespan to attach, built from ``settings`` when omitted
        **kwargs: Extra keyword arguments passed to FastAPI

    Returns:
        The configured application
    """
    setup_logging(settings.LOG_LEVEL)

    if lifespan is None:
        lifespan = lifespan_factory(settings)

    application = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        **kwargs,
    )
    application.state.settings = settings

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_middleware(RequestLoggingMiddleware)
    application.include_router(router)

    return application
