import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy import event, inspect

from epg_guide.config import settings
from epg_guide.models import Base, ChannelRecord

logger = logging.getLogger(__name__)

# Engine and session factory - initialized in init_db() before the run
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _create_session_factory(engine):
    """Create async session factory from engine"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory (initialized in init_db)"""
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() before generating the guide.")
    return _session_factory


class StoreUnavailableError(RuntimeError):
    """Raised when the record store file or its schema is missing"""
    pass


async def init_db(database_path: str | None = None, *, create_schema: bool = True) -> None:
    """
    Initialize database engine and, optionally, its schema

    Args:
        database_path: SQLite file; defaults to settings.database_path
        create_schema: Create missing tables. When False the store must
            already exist with its channels table.

    Raises:
        StoreUnavailableError: If create_schema is False and the store is missing
    """
    global _engine, _session_factory

    path = database_path or settings.database_path
    logger.info(f"Initializing database at {path}")

    if not create_schema and not Path(path).is_file():
        raise StoreUnavailableError(f"Record store not found at {path}")

    _engine = create_async_engine(
        f"sqlite+aiosqlite:///{path}",
        echo=False,
        future=True,
        connect_args={"timeout": 30, "check_same_thread": False},
    )

    def configure_sqlite(dbapi_conn, _):
        """Configure SQLite connection parameters"""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode = WAL")
        cursor.close()

    event.listen(_engine.sync_engine, "connect", configure_sqlite)

    async with _engine.begin() as conn:
        if create_schema:
            await conn.run_sync(Base.metadata.create_all)
        else:
            has_table = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table(ChannelRecord.__tablename__)
            )
            if not has_table:
                raise StoreUnavailableError(
                    f"Record store at {path} has no '{ChannelRecord.__tablename__}' table"
                )

    _session_factory = _create_session_factory(_engine)

    logger.info("Database initialized successfully")


async def close_db() -> None:
    """Close database connections after the run"""
    global _engine, _session_factory
    if _engine:
        await _engine.dispose()
        logger.info("Database connections closed")
    _engine = None
    _session_factory = None


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Provide an async session wrapped in a transaction that commits or rolls back."""
    session_factory = get_session_factory()

    async with session_factory() as session:
        async with session.begin():
            yield session
