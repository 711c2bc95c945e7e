from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentOption(str, Enum):
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class DatabaseBackend(str, Enum):
    SQLITE = "sqlite"
    MYSQL = "mysql"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Metadata
    APP_NAME: str = Field(default="posts-service")
    APP_DESCRIPTION: str = Field(default="CRUD API over the posts table")
    APP_VERSION: str = Field(default="0.1.0")
    ENVIRONMENT: EnvironmentOption = Field(default=EnvironmentOption.LOCAL)

    # Storage backend selection
    DATABASE_BACKEND: DatabaseBackend = Field(default=DatabaseBackend.SQLITE)
    DB_ECHO: bool = Field(default=False)

    # SQLite (embedded file)
    SQLITE_PATH: str = Field(default="./data/posts.db")

    # MySQL (networked)
    MYSQL_USER: str = Field(default="test")
    MYSQL_PASSWORD: str = Field(default="test")
    MYSQL_SERVER: str = Field(default="db")
    MYSQL_PORT: int = Field(default=3306)
    MYSQL_DB: str = Field(default="test")

    # Startup connection retry
    DB_CONNECT_RETRY_INTERVAL: float = Field(default=5.0, ge=0)
    DB_CONNECT_MAX_ATTEMPTS: int | None = Field(default=None, ge=1)

    # HTTP server
    SERVER_HOST: str = Field(default="0.0.0.0")
    SERVER_PORT: int = Field(default=8080)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


settings = get_settings()
