"""
Employee API - Database Engine Management
==========================================

What:  Async SQLAlchemy engine construction, declarative base, and lifecycle helpers.
How:   `build_engine()` turns a connection URL into an AsyncEngine. The
       module-level `engine` is built once from settings at import time and
       handed to EmployeeService, which acquires one connection per operation.
Who:   Used by the application factory, the health check, and the test suite.

Connection Model:
    There is no session-per-request here. Every service call does

        async with engine.connect() as conn:    # or engine.begin() for writes
            await conn.execute(<one statement>)

    so the connection is checked out for exactly one statement and returned
    on every exit path, including exceptions. Pooling is whatever the
    driver-level SQLAlchemy pool does transparently.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Holds the shared metadata used by `create_tables()`.
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool sizing options are only passed for server databases; SQLite
    in-memory engines use a static pool that rejects them.
    """
    url = make_url(database_url)
    options = {"echo": echo}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(url, **options)


# Echo SQL only in DEBUG mode
engine = build_engine(settings.database_url, echo=settings.log_level == "DEBUG")


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(target: AsyncEngine) -> None:
    """
    What:  Issues CREATE TABLE IF NOT EXISTS for every mapped model.
    When:  On startup when DB_CREATE_TABLES is set, and in tests.
    """
    # Import registers EmployeeDetails on Base.metadata
    from app.models.employee import EmployeeDetails  # noqa: F401

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(target: AsyncEngine = engine) -> None:
    """
    What:  Gracefully closes all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    await target.dispose()
