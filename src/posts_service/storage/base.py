"""Storage access for posts.

`PostStorage` is the interface the HTTP handlers depend on. The SQLAlchemy
implementation runs exactly one statement per call over an async engine;
backends only differ in how that engine is built.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ..core.config import Settings
from ..core.db.database import Base, wait_for_connection
from ..core.db.database import ping as ping_database
from ..core.exceptions import SchemaInitializationError, StorageError
from ..models.post import Post
from ..schemas.post import PostRead

logger = logging.getLogger(__name__)


class PostStorage(ABC):
    """Operations the posts API needs from a storage backend."""

    name: str = "abstract"

    @abstractmethod
    async def connect(self, retry_interval: float = 5.0, max_attempts: int | None = None) -> None:
        ...

    @abstractmethod
    async def create_tables(self) -> None:
        ...

    @abstractmethod
    async def ping(self) -> bool:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...

    @abstractmethod
    async def list_posts(self) -> list[PostRead]:
        ...

    @abstractmethod
    async def create_post(self, content: str) -> PostRead:
        ...

    @abstractmethod
    async def update_post(self, post_id: int, content: str) -> bool:
        ...

    @abstractmethod
    async def delete_post(self, post_id: int) -> bool:
        ...


class SQLAlchemyPostStorage(PostStorage):
    """Post storage over a SQLAlchemy async engine."""

    name = "sqlalchemy"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "SQLAlchemyPostStorage":
        raise NotImplementedError

    async def connect(self, retry_interval: float = 5.0, max_attempts: int | None = None) -> None:
        """Wait until the backend accepts connections.

        Args:
            retry_interval: Seconds between attempts
            max_attempts: Attempt bound, None for unbounded

        Raises:
            DatabaseConnectionError: If the bound is exhausted
        """
        await wait_for_connection(self.engine, retry_interval=retry_interval, max_attempts=max_attempts)

    async def create_tables(self) -> None:
        """Create the posts table if it does not exist yet.

        Raises:
            SchemaInitializationError: If the DDL fails
        """
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.critical(f"Failed to create table: {e}")
            raise SchemaInitializationError(f"Failed to create table: {e}") from e
        logger.info("DB schema ready")

    async def ping(self) -> bool:
        try:
            await ping_database(self.engine)
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.exception(f"Database health check failed with error: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()

    async def list_posts(self) -> list[PostRead]:
        """Return every post in the backend's natural row order."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(select(Post.id, Post.content))
                rows = result.all()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to fetch posts: {e}")
            raise StorageError("Failed to fetch posts") from e
        return [PostRead(id=row.id, content=row.content or "") for row in rows]

    async def create_post(self, content: str) -> PostRead:
        """Insert a post and return it with the id the database assigned."""
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(insert(Post).values(content=content))
                post_id = result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.exception(f"Failed to create post: {e}")
            raise StorageError("Failed to create post") from e
        if post_id is None:
            raise StorageError("Failed to fetch last insert ID")
        return PostRead(id=post_id, content=content)

    async def update_post(self, post_id: int, content: str) -> bool:
        """Replace the content of a post.

        Returns:
            False when no row has the given id
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    update(Post).where(Post.id == post_id).values(content=content)
                )
                matched = result.rowcount
        except SQLAlchemyError as e:
            logger.exception(f"Failed to update post {post_id}: {e}")
            raise StorageError("Failed to update post") from e
        return matched > 0

    async def delete_post(self, post_id: int) -> bool:
        """Delete a post by id.

        Returns:
            False when no row has the given id
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(delete(Post).where(Post.id == post_id))
                deleted = result.rowcount
        except SQLAlchemyError as e:
            logger.exception(f"Failed to delete post {post_id}: {e}")
            raise StorageError("Failed to delete post") from e
        return deleted > 0
