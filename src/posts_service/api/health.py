import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..core.health import check_database_health
from ..core.schemas import HealthCheck, ReadyCheck
from ..storage import PostStorage, get_post_storage

router = APIRouter(tags=["health"])

STATUS_HEALTHY = "healthy"
STATUS_UNHEALTHY = "unhealthy"

LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthCheck)
async def health(request: Request):
    settings = request.app.state.settings
    response = {
        "status": STATUS_HEALTHY,
        "environment": settings.ENVIRONMENT.value,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
    }

    return JSONResponse(status_code=status.HTTP_200_OK, content=response)


@router.get("/ready", response_model=ReadyCheck)
async def ready(
    request: Request,
    storage: Annotated[PostStorage, Depends(get_post_storage)],
):
    settings = request.app.state.settings

    database_status = await check_database_health(storage=storage)
    LOGGER.debug(f"Database health check status: {database_status}")

    overall_status = STATUS_HEALTHY if database_status else STATUS_UNHEALTHY
    http_status = status.HTTP_200_OK if database_status else status.HTTP_503_SERVICE_UNAVAILABLE

    response = {
        "status": overall_status,
        "environment": settings.ENVIRONMENT.value,
        "version": settings.APP_VERSION,
        "app": STATUS_HEALTHY,
        "database": STATUS_HEALTHY if database_status else STATUS_UNHEALTHY,
        "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
    }

    return JSONResponse(status_code=http_status, content=response)
