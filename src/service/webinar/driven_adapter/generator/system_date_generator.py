from datetime import datetime, timezone

from src.service.webinar.app.interface.i_date_generator import IDateGenerator


class SystemDateGenerator(IDateGenerator):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedDateGenerator(IDateGenerator):
    def __init__(self, value: datetime) -> None:
        self.value = value

    def now(self) -> datetime:
        return self.value
