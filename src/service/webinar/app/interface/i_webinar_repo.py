from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.webinar_entity import Webinar


class IWebinarRepo(ABC):
    """Webinar persistence. Implementations are picked by the DI container."""

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Return the persisted webinar, or None if no record has this id."""
        pass

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """Raises WebinarAlreadyExistsError when webinar.id is taken."""
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """Overwrite the full record keyed by webinar.id."""
        pass
