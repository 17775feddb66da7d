from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.webinar_errors import (
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)


class ChangeSeatsUseCase:
    """
    Raise the seat capacity of a webinar.

    Checks run in this order and the first failure wins:
    1. webinar exists
    2. acting user is the organizer
    3. new count is strictly greater than the current one
    4. new count does not exceed the seat cap

    The repository is only written after every check passed, so a rejected
    request leaves the stored webinar untouched.
    """

    def __init__(self, *, webinar_repo: IWebinarRepo) -> None:
        self.webinar_repo = webinar_repo

    @classmethod
    @inject
    def depends(
        cls,
        webinar_repo: IWebinarRepo = Depends(Provide[Container.webinar_repo]),
    ) -> Self:
        return cls(webinar_repo=webinar_repo)

    @Logger.io
    async def execute(self, *, user: UserEntity, webinar_id: str, seats: int) -> None:
        webinar = await self.webinar_repo.find_by_id(webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(webinar_id)

        if not webinar.is_organizer(user):
            raise WebinarNotOrganizerError()

        if webinar.is_reducing_seats(seats):
            raise WebinarReduceSeatsError()

        if webinar.exceeds_seat_limit(seats):
            raise WebinarTooManySeatsError()

        previous_seats = webinar.seats
        webinar.change_seats(seats)
        await self.webinar_repo.update(webinar)

        Logger.base.info(
            f'💺 [CHANGE_SEATS] Webinar {webinar_id}: {previous_seats} -> {seats} seats'
        )
