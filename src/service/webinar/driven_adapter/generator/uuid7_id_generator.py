import uuid_utils

from src.service.webinar.app.interface.i_id_generator import IIdGenerator


class Uuid7IdGenerator(IIdGenerator):
    """Time-ordered ids, so webinar primary keys insert in roughly increasing order."""

    def generate(self) -> str:
        return str(uuid_utils.uuid7())


class FixedIdGenerator(IIdGenerator):
    def __init__(self, value: str = 'id-1') -> None:
        self.value = value

    def generate(self) -> str:
        return self.value
