from datetime import datetime, timedelta
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_date_generator import IDateGenerator
from src.service.webinar.app.interface.i_id_generator import IIdGenerator
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarInvalidDatesError,
    WebinarNotEnoughSeatsError,
    WebinarTooEarlyError,
    WebinarTooManySeatsError,
)


DEFAULT_MIN_LEAD_TIME = timedelta(days=3)


class OrganizeWebinarUseCase:
    """
    Create a webinar owned by the requesting user.

    Flow:
    1. Validate seats, date ordering and lead time (fail fast, nothing persisted)
    2. Generate id and creation timestamp through the injected generators
    3. Persist through the repository and return the new id
    """

    def __init__(
        self,
        *,
        webinar_repo: IWebinarRepo,
        id_generator: IIdGenerator,
        date_generator: IDateGenerator,
        min_lead_time: timedelta = DEFAULT_MIN_LEAD_TIME,
    ) -> None:
        self.webinar_repo = webinar_repo
        self.id_generator = id_generator
        self.date_generator = date_generator
        self.min_lead_time = min_lead_time

    @classmethod
    @inject
    def depends(
        cls,
        webinar_repo: IWebinarRepo = Depends(Provide[Container.webinar_repo]),
        id_generator: IIdGenerator = Depends(Provide[Container.id_generator]),
        date_generator: IDateGenerator = Depends(Provide[Container.date_generator]),
        min_lead_time: timedelta = Depends(Provide[Container.webinar_min_lead_time]),
    ) -> Self:
        return cls(
            webinar_repo=webinar_repo,
            id_generator=id_generator,
            date_generator=date_generator,
            min_lead_time=min_lead_time,
        )

    @Logger.io
    async def execute(
        self,
        *,
        user_id: str,
        title: str,
        seats: int,
        start_date: datetime,
        end_date: datetime,
    ) -> str:
        if Webinar.below_seat_minimum(seats):
            raise WebinarNotEnoughSeatsError()

        if Webinar.exceeds_seat_limit(seats):
            raise WebinarTooManySeatsError()

        if end_date <= start_date:
            raise WebinarInvalidDatesError()

        now = self.date_generator.now()
        if start_date < now + self.min_lead_time:
            raise WebinarTooEarlyError()

        webinar = Webinar(
            id=self.id_generator.generate(),
            organizer_id=user_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
            created_at=now,
        )
        await self.webinar_repo.create(webinar)

        Logger.base.info(
            f'🎤 [ORGANIZE_WEBINAR] Created webinar {webinar.id} for organizer {user_id} '
            f'({seats} seats)'
        )
        return webinar.id
