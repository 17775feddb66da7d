"""Webinar domain errors."""

from enum import StrEnum

from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS, MIN_SEATS


class WebinarErrorMessage(StrEnum):
    WEBINAR_NOT_FOUND = 'Webinar not found'
    ALREADY_EXISTS = 'Webinar already exists'
    NOT_ORGANIZER = 'Only the organizer can change the webinar'
    REDUCE_SEATS = 'Webinar seats can only be increased'
    TOO_MANY_SEATS = f'Webinar must have at most {MAX_SEATS} seats'
    NOT_ENOUGH_SEATS = f'Webinar must have at least {MIN_SEATS} seat'
    INVALID_DATES = 'Webinar must end after it starts'
    TOO_EARLY = 'Webinar must be scheduled further in advance'


class WebinarNotFoundError(NotFoundError):
    def __init__(self, webinar_id: str) -> None:
        super().__init__(WebinarErrorMessage.WEBINAR_NOT_FOUND)
        self.webinar_id = webinar_id


class WebinarAlreadyExistsError(ConflictError):
    def __init__(self, webinar_id: str) -> None:
        super().__init__(WebinarErrorMessage.ALREADY_EXISTS)
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.NOT_ORGANIZER)


class WebinarReduceSeatsError(DomainError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.REDUCE_SEATS)


class WebinarTooManySeatsError(DomainError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.TOO_MANY_SEATS)


class WebinarNotEnoughSeatsError(DomainError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.NOT_ENOUGH_SEATS)


class WebinarInvalidDatesError(DomainError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.INVALID_DATES)


class WebinarTooEarlyError(DomainError):
    def __init__(self) -> None:
        super().__init__(WebinarErrorMessage.TOO_EARLY)
