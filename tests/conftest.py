"""Shared test fixtures for LandSite."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from landsite.config import Settings
from landsite.database import create_schema, open_database
from landsite.main import create_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from fastapi import FastAPI

TEST_ADMIN_KEY = "test-admin-key-with-enough-entropy"
ADMIN_HEADERS = {"X-Admin-Key": TEST_ADMIN_KEY}


@asynccontextmanager
async def create_test_client(settings: Settings) -> AsyncGenerator[tuple[FastAPI, AsyncClient]]:
    """Create an HTTP test client with a fully initialized app.

    Manually performs the work of the application lifespan (engine, schema)
    because ASGITransport does not trigger it.
    """
    app = create_app(settings)
    settings.validate_runtime_security()

    engine, session_factory = open_database(settings)
    app.state.engine = engine
    app.state.session_factory = session_factory

    await create_schema(engine)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield app, ac

    await engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with a temporary database."""
    db_path = tmp_path / "test.db"
    return Settings(
        _env_file=None,
        debug=True,
        database_url=f"sqlite+aiosqlite:///{db_path}",
        admin_api_key=TEST_ADMIN_KEY,
        site_url="https://example.test/",
    )


@pytest.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(
    db_engine: AsyncEngine,
) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
