from datetime import datetime
from typing import Optional

import attrs

from src.service.webinar.domain.entity.user_entity import UserEntity


MIN_SEATS = 1
MAX_SEATS = 1000


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f'Webinar {attribute.name} cannot be empty')


def _validate_not_bool(instance: object, attribute: attrs.Attribute, value: object) -> None:
    # bool is an int subclass, True would otherwise pass as one seat
    if isinstance(value, bool):
        raise TypeError(f'Webinar {attribute.name} must be an integer, got bool')


def _validate_seats_range(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not MIN_SEATS <= value <= MAX_SEATS:
        raise ValueError(f'Webinar seats must be between {MIN_SEATS} and {MAX_SEATS}, got {value}')


@attrs.define
class Webinar:
    """
    Webinar entity.

    Seats are validated on construction and on every assignment, so an
    instance never holds a count outside [MIN_SEATS, MAX_SEATS]. Who may change
    the seats is decided by the use case, not here.
    """

    id: str = attrs.field(validator=_validate_non_empty_string)
    organizer_id: str = attrs.field(validator=_validate_non_empty_string)
    title: str = attrs.field(validator=_validate_non_empty_string)
    start_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    end_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    seats: int = attrs.field(
        validator=[attrs.validators.instance_of(int), _validate_not_bool, _validate_seats_range]
    )
    created_at: Optional[datetime] = None

    def is_organizer(self, user: UserEntity) -> bool:
        return user.id == self.organizer_id

    def is_reducing_seats(self, seats: int) -> bool:
        return seats <= self.seats

    @staticmethod
    def exceeds_seat_limit(seats: int) -> bool:
        return seats > MAX_SEATS

    @staticmethod
    def below_seat_minimum(seats: int) -> bool:
        return seats < MIN_SEATS

    def change_seats(self, seats: int) -> None:
        self.seats = seats
