from typing import Iterable, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarAlreadyExistsError,
    WebinarNotFoundError,
)


class InMemoryWebinarRepo(IWebinarRepo):
    """
    List-backed repository for unit tests and database-less local runs.

    Entities are copied on the way in and out, so changing a webinar returned
    by find_by_id has no effect until update() is called.
    """

    def __init__(self, webinars: Optional[Iterable[Webinar]] = None) -> None:
        self.database: list[Webinar] = [attrs.evolve(webinar) for webinar in webinars or []]

    @Logger.io
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        return self.find_by_id_sync(webinar_id)

    def find_by_id_sync(self, webinar_id: str) -> Optional[Webinar]:
        for webinar in self.database:
            if webinar.id == webinar_id:
                return attrs.evolve(webinar)
        return None

    @Logger.io
    async def create(self, webinar: Webinar) -> None:
        if self._index_of(webinar.id) is not None:
            raise WebinarAlreadyExistsError(webinar.id)
        self.database.append(attrs.evolve(webinar))

    @Logger.io
    async def update(self, webinar: Webinar) -> None:
        index = self._index_of(webinar.id)
        if index is None:
            raise WebinarNotFoundError(webinar.id)
        self.database[index] = attrs.evolve(webinar)

    def _index_of(self, webinar_id: str) -> Optional[int]:
        for index, webinar in enumerate(self.database):
            if webinar.id == webinar_id:
                return index
        return None
