"""
Webinar Management FastAPI Application

Run with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Webinar Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Webinar Service] Dependency injection wired')

    uses_database = settings.WEBINAR_REPO_BACKEND == 'postgres'
    if uses_database and settings.DB_CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()

    Logger.base.info(
        f'✅ [Webinar Service] Ready (repository backend: {settings.WEBINAR_REPO_BACKEND})'
    )

    yield

    Logger.base.info('🛑 [Webinar Service] Shutting down...')

    if uses_database:
        await dispose_engine()

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Webinar Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
