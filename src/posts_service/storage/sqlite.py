from pathlib import Path

from sqlalchemy.ext.asyncio import create_async_engine

from ..core.config import Settings
from .base import SQLAlchemyPostStorage


class SQLitePostStorage(SQLAlchemyPostStorage):
    """Posts stored in an embedded SQLite database file."""

    name = "sqlite"

    @classmethod
    def from_settings(cls, settings: Settings) -> "SQLitePostStorage":
        db_path = Path(settings.SQLITE_PATH)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        engine = create_async_engine(
            f"sqlite+aiosqlite:///{db_path}",
            echo=settings.DB_ECHO,
        )
        return cls(engine)
