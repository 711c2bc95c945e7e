"""Storage backends for posts."""

from fastapi import Request

from ..core.config import DatabaseBackend, Settings
from .base import PostStorage, SQLAlchemyPostStorage
from .mysql import MySQLPostStorage
from .sqlite import SQLitePostStorage

STORAGE_BACKENDS: dict[DatabaseBackend, type[SQLAlchemyPostStorage]] = {
    DatabaseBackend.SQLITE: SQLitePostStorage,
    DatabaseBackend.MYSQL: MySQLPostStorage,
}


def build_post_storage(settings: Settings) -> SQLAlchemyPostStorage:
    """Create the storage object for the configured backend."""
    storage_cls = STORAGE_BACKENDS[settings.DATABASE_BACKEND]
    return storage_cls.from_settings(settings)


def get_post_storage(request: Request) -> PostStorage:
    """Dependency injection for the storage object owned by the application."""
    return request.app.state.storage


__all__ = [
    "PostStorage",
    "SQLAlchemyPostStorage",
    "MySQLPostStorage",
    "SQLitePostStorage",
    "build_post_storage",
    "get_post_storage",
]
