from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import create_async_engine

from ..core.config import Settings
from .base import SQLAlchemyPostStorage


def build_mysql_url(settings: Settings) -> URL:
    return URL.create(
        "mysql+aiomysql",
        username=settings.MYSQL_USER,
        password=settings.MYSQL_PASSWORD,
        host=settings.MYSQL_SERVER,
        port=settings.MYSQL_PORT,
        database=settings.MYSQL_DB,
        query={"charset": "utf8mb4"},
    )


class MySQLPostStorage(SQLAlchemyPostStorage):
    """Posts stored on a networked MySQL server."""

    name = "mysql"

    @classmethod
    def from_settings(cls, settings: Settings) -> "MySQLPostStorage":
        # Connections idle past the server's wait_timeout get dropped; recycle before then.
        engine = create_async_engine(
            build_mysql_url(settings),
            echo=settings.DB_ECHO,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        return cls(engine)
