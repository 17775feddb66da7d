"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application modules read settings
- Unit/integration markers derived from the test path
- An in-memory webinar repository shared by the HTTP client and the test
- TestClient bound to the test app (test/test_main.py)

Architecture:
- Unit tests (test/**/unit/): Build use cases directly with in-memory adapters
- Integration tests: Go through FastAPI, or through a live PostgreSQL when reachable
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are instantiated at import time of src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ.setdefault('POSTGRES_DB', 'webinar_test_db')
    os.environ['WEBINAR_REPO_BACKEND'] = 'memory'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.webinar.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.webinar.domain.entity.webinar_entity import Webinar  # noqa: E402
from src.service.webinar.driven_adapter.repo.webinar_repo_in_memory import (  # noqa: E402
    InMemoryWebinarRepo,
)
from test.constants import (  # noqa: E402
    ALICE_ID,
    BOB_ID,
    WEBINAR_ID,
    WEBINAR_SEATS,
    WEBINAR_TITLE,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' in markers or 'integration' in markers:
            continue
        path = str(item.path)
        if '/unit/' in path or '\\unit\\' in path:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Shared Fixtures
# =============================================================================
@pytest.fixture
def alice() -> UserEntity:
    return UserEntity(id=ALICE_ID)


@pytest.fixture
def bob() -> UserEntity:
    return UserEntity(id=BOB_ID)


@pytest.fixture
def now() -> datetime:
    return datetime(2030, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def webinar(now: datetime) -> Webinar:
    """Webinar organized by alice with 50 seats."""
    return Webinar(
        id=WEBINAR_ID,
        organizer_id=ALICE_ID,
        title=WEBINAR_TITLE,
        start_date=now + timedelta(days=7),
        end_date=now + timedelta(days=7, hours=1),
        seats=WEBINAR_SEATS,
        created_at=now,
    )


@pytest.fixture
def webinar_repo(webinar: Webinar) -> InMemoryWebinarRepo:
    return InMemoryWebinarRepo([webinar])


@pytest.fixture
def client(webinar_repo: InMemoryWebinarRepo) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with container.webinar_repo.override(providers.Object(webinar_repo)):
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
