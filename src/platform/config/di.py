"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from datetime import timedelta

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.webinar.driven_adapter.generator.system_date_generator import (
    SystemDateGenerator,
)
from src.service.webinar.driven_adapter.generator.uuid7_id_generator import Uuid7IdGenerator
from src.service.webinar.driven_adapter.repo.webinar_repo_impl import WebinarRepoImpl
from src.service.webinar.driven_adapter.repo.webinar_repo_in_memory import (
    InMemoryWebinarRepo,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database
    database = providers.Singleton(Database)

    # Generators
    id_generator = providers.Singleton(Uuid7IdGenerator)
    date_generator = providers.Singleton(SystemDateGenerator)

    # Repositories (stateless - open a session per call), picked by WEBINAR_REPO_BACKEND
    webinar_repo = providers.Selector(
        config_service.provided.WEBINAR_REPO_BACKEND,
        postgres=providers.Singleton(WebinarRepoImpl, session_factory=database.provided.session),
        memory=providers.Singleton(InMemoryWebinarRepo),
    )

    # Business rules
    webinar_min_lead_time = providers.Factory(
        timedelta, days=config_service.provided.WEBINAR_MIN_LEAD_DAYS
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
