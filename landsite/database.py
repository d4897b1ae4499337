"""Engine, session factory and schema setup for the content store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from landsite.models import Base

if TYPE_CHECKING:
    from landsite.config import Settings


class Database(NamedTuple):
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]


def sqlite_file_path(database_url: str) -> Path | None:
    """Return the file behind a SQLite URL, or None for other backends and ``:memory:``."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return None
    return Path(url.database)


def open_database(settings: Settings) -> Database:
    """Build the engine and session factory the app keeps on ``app.state``.

    A file-backed SQLite database gets its parent directory created first, so
    a fresh checkout can start against the default ``data/db`` location.
    Sessions keep attribute values after commit; route handlers serialize
    documents once the write has been committed.
    """
    db_file = sqlite_file_path(settings.database_url)
    if db_file is not None:
        db_file.parent.mkdir(parents=True, exist_ok=True)
    # SQL echo is driven by the "sqlalchemy.engine" logger level instead.
    engine = create_async_engine(settings.database_url)
    return Database(engine, async_sessionmaker(engine, expire_on_commit=False))


async def create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
