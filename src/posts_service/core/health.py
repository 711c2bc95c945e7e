import logging

from ..storage.base import PostStorage

LOGGER = logging.getLogger(__name__)


async def check_database_health(storage: PostStorage) -> bool:
    """Check that the configured storage backend answers queries."""
    healthy = await storage.ping()
    if not healthy:
        LOGGER.warning(f"Database health check failed for backend {storage.name}")
    return healthy
