"""
Test-specific FastAPI Application

Same routes and exception handlers as production, without touching PostgreSQL.
Uses shared app factory for common setup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """
    Minimal lifespan for testing.

    Only wires dependency injection; the webinar repository is whatever the
    test overrode Container.webinar_repo with.
    """
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    container.unwire()
    cleanup()
    Logger.base.info('🧪 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
