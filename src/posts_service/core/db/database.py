import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase, MappedAsDataclass):
    pass


async def ping(engine: AsyncEngine) -> None:
    """Run a trivial query to prove the engine can reach the database."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def wait_for_connection(
    engine: AsyncEngine,
    retry_interval: float = 5.0,
    max_attempts: int | None = None,
) -> int:
    """Block until the database answers, retrying at a fixed interval.

    Args:
        engine: Engine to connect through
        retry_interval: Seconds to sleep between failed attempts
        max_attempts: Give up after this many attempts; None retries forever

    Returns:
        Number of attempts it took to connect

    Raises:
        DatabaseConnectionError: If max_attempts is reached without success
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            await ping(engine)
        except (DBAPIError, OSError) as e:
            if max_attempts is not None and attempt >= max_attempts:
                logger.error(f"Giving up on database after {attempt} attempts: {e}")
                raise DatabaseConnectionError(
                    f"Could not connect to database after {attempt} attempts"
                ) from e
            logger.warning(
                f"Failed to connect to database (attempt {attempt}): {e}; "
                f"retrying in {retry_interval:g}s"
            )
            await asyncio.sleep(retry_interval)
        else:
            logger.info(f"Connected to database {engine.url.render_as_string(hide_password=True)}")
            return attempt
