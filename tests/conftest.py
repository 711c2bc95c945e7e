"""Shared fixtures: every test gets its own SQLite file under tmp_path."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from posts_service.api import router
from posts_service.core.config import DatabaseBackend, Settings
from posts_service.core.setup import create_application, lifespan_factory
from posts_service.storage import SQLitePostStorage


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        DATABASE_BACKEND=DatabaseBackend.SQLITE,
        SQLITE_PATH=str(tmp_path / "db" / "posts.db"),
        DB_CONNECT_RETRY_INTERVAL=0,
        DB_CONNECT_MAX_ATTEMPTS=1,
    )


@pytest.fixture
def app(settings):
    return create_application(
        router=router,
        settings=settings,
        lifespan=lifespan_factory(settings, create_tables_on_start=True),
    )


@pytest.fixture
def client(app):
    """Test client with the lifespan (connect + create table) already run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def storage(settings):
    sqlite_storage = SQLitePostStorage.from_settings(settings)
    await sqlite_storage.create_tables()
    yield sqlite_storage
    await sqlite_storage.close()
