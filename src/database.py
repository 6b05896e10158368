from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator

from sqlalchemy import MetaData, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from src.config import config
from src.errors import AppError, PersistenceError
from src.logging_config import get_logger

logger = get_logger(__name__)

# Naming convention for constraints
INDEXES_NAMING_CONVENTION = {
    "ix": "%(column_0_label)s_idx",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}

metadata = MetaData(naming_convention=INDEXES_NAMING_CONVENTION)
Base = declarative_base(metadata=metadata)


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # Cascades on word/history rows depend on this pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; in-memory SQLite shares one connection."""
    kwargs = {}
    if url in ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, echo=echo, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = build_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency to get database session."""
    async with async_session_maker() as session:
        yield session


async def init_db(bind: AsyncEngine = engine) -> None:
    """Initialize database (create tables)."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a block of writes as one transaction.

    Commits when the block exits normally and rolls back on any exception.
    Storage errors are re-raised as PersistenceError; application errors
    raised inside the block propagate unchanged after the rollback.

    The session must not hold unflushed changes on entry: they would be
    committed outside the block, so RuntimeError is raised instead.
    """
    if db.new or db.dirty or db.deleted:
        raise RuntimeError("unit_of_work entered with pending session changes")

    try:
        if db.in_transaction():
            # Close out the read-only transaction left open by autobegin
            await db.commit()

        async with db.begin():
            yield db
    except AppError:
        raise
    except SQLAlchemyError as exc:
        logger.error(f"💥 Transaction rolled back: {exc}")
        raise PersistenceError(f"Veritabanı hatası: {exc}") from exc
