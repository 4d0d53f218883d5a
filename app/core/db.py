# app/core/db.py
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured backend.
    The caller owns it and must dispose it on shutdown.
    """
    kwargs = {"echo": settings.sql_echo, "future": True}
    if not settings.is_sqlite:
        kwargs.update(pool_size=5, max_overflow=10)

    engine = create_async_engine(settings.database_url, **kwargs)

    # ✅ SQLite foreign key enforcement (needed for ON DELETE CASCADE)
    if settings.is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session from the factory the application was started with.
    Use with `Depends(get_db)` in routes.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def init_models(engine: AsyncEngine) -> None:
    """
    Create all tables defined in app.models (called on startup).
    """
    import app.models  # noqa: F401  registers every mapper on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
