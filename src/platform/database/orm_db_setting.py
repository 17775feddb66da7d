"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop aware engine / session maker holder
2. Base: declarative base for every ORM model
3. Database: session provider handed to repositories through the DI container

The engine is bound to the event loop that first used it. When the running
loop changes (test loops, reloads) the engine is rebuilt, otherwise asyncpg
fails with "Future attached to a different loop".
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    def __init__(self, database_url: Optional[str] = None) -> None:
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._database_url or settings.DATABASE_URL_ASYNC

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (CLI, alembic): no loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engine...')
                # dispose() is async; the old pool is left to garbage collection
                self._engine = None
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        assert self._engine is not None
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            Logger.base.info('🔌 [DB] Engine disposed')
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        return create_async_engine(
            self.database_url,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Register models on Base.metadata
    import src.service.webinar.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')


class Database:
    """
    Session provider for dependency injection

    Repositories receive `database.session` as their session_factory and open
    one session per operation.
    """

    def __init__(self, *, engine_manager: Optional[AsyncEngineManager] = None) -> None:
        self._engine_manager = engine_manager or _engine_manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Rolls back automatically if the block raises before commit."""
        session_maker = self._engine_manager.get_session_maker()
        async with session_maker() as session:
            yield session
