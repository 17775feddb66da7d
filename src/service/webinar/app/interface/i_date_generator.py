from abc import ABC, abstractmethod
from datetime import datetime


class IDateGenerator(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware."""
        pass
