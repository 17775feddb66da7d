from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarAlreadyExistsError,
    WebinarNotFoundError,
)
from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel


class WebinarRepoImpl(IWebinarRepo):
    """PostgreSQL-backed webinar repository; every call is its own transaction."""

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(WebinarModel).where(WebinarModel.id == webinar_id)
            )
            webinar_model = result.scalar_one_or_none()

            if not webinar_model:
                return None

            return self._model_to_entity(webinar_model)

    @Logger.io
    async def create(self, webinar: Webinar) -> None:
        async with self.session_factory() as session:
            session.add(
                WebinarModel(
                    id=webinar.id,
                    organizer_id=webinar.organizer_id,
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                    created_at=webinar.created_at,
                )
            )
            try:
                await session.commit()
            except IntegrityError as e:
                # Primary key violation on webinar.id
                if 'duplicate key' in str(e).lower():
                    raise WebinarAlreadyExistsError(webinar.id) from e
                raise

    @Logger.io
    async def update(self, webinar: Webinar) -> None:
        async with self.session_factory() as session:
            stmt = (
                sql_update(WebinarModel)
                .where(WebinarModel.id == webinar.id)
                .values(
                    organizer_id=webinar.organizer_id,
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                )
                .returning(WebinarModel.id)
            )
            result = await session.execute(stmt)
            if result.scalar_one_or_none() is None:
                raise WebinarNotFoundError(webinar.id)
            await session.commit()

    @staticmethod
    def _model_to_entity(webinar_model: WebinarModel) -> Webinar:
        return Webinar(
            id=webinar_model.id,
            organizer_id=webinar_model.organizer_id,
            title=webinar_model.title,
            start_date=webinar_model.start_date,
            end_date=webinar_model.end_date,
            seats=webinar_model.seats,
            created_at=webinar_model.created_at,
        )
