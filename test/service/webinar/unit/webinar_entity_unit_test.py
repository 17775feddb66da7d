from datetime import datetime, timedelta

import attrs
import pytest

from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS, MIN_SEATS, Webinar


def _build(now: datetime, **overrides: object) -> Webinar:
    fields: dict[str, object] = {
        'id': 'webinar-1',
        'organizer_id': 'alice',
        'title': 'Domain Modeling',
        'start_date': now,
        'end_date': now + timedelta(hours=1),
        'seats': 100,
    }
    fields.update(overrides)
    return Webinar(**fields)  # type: ignore[arg-type]


class TestWebinarInvariants:
    @pytest.mark.parametrize('seats', [MIN_SEATS, MAX_SEATS])
    def test_accepts_seats_on_the_bounds(self, now: datetime, seats: int) -> None:
        assert _build(now, seats=seats).seats == seats

    @pytest.mark.parametrize('seats', [0, -1, MAX_SEATS + 1])
    def test_rejects_seats_out_of_range(self, now: datetime, seats: int) -> None:
        with pytest.raises(ValueError, match='between'):
            _build(now, seats=seats)

    def test_rejects_non_integer_seats(self, now: datetime) -> None:
        with pytest.raises(TypeError):
            _build(now, seats='30')

    @pytest.mark.parametrize('seats', [True, False])
    def test_rejects_bool_seats(self, now: datetime, seats: bool) -> None:
        with pytest.raises(TypeError, match='bool'):
            _build(now, seats=seats)

    def test_assignment_rejects_bool_seats(self, webinar: Webinar) -> None:
        with pytest.raises(TypeError):
            webinar.change_seats(True)

        assert webinar.seats == 50

    @pytest.mark.parametrize('field', ['id', 'organizer_id', 'title'])
    def test_rejects_blank_identity_fields(self, now: datetime, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            _build(now, **{field: '  '})

    def test_assignment_is_validated(self, webinar: Webinar) -> None:
        with pytest.raises(ValueError):
            webinar.seats = MAX_SEATS + 1

        assert webinar.seats == 50

    def test_created_at_is_optional(self, now: datetime) -> None:
        assert _build(now).created_at is None


class TestWebinarBehaviour:
    def test_is_organizer(self, webinar: Webinar, alice: UserEntity, bob: UserEntity) -> None:
        assert webinar.is_organizer(alice)
        assert not webinar.is_organizer(bob)

    @pytest.mark.parametrize(('seats', 'expected'), [(49, True), (50, True), (51, False)])
    def test_is_reducing_seats(self, webinar: Webinar, seats: int, expected: bool) -> None:
        assert webinar.is_reducing_seats(seats) is expected

    @pytest.mark.parametrize(('seats', 'expected'), [(1000, False), (1001, True)])
    def test_exceeds_seat_limit(self, seats: int, expected: bool) -> None:
        assert Webinar.exceeds_seat_limit(seats) is expected

    @pytest.mark.parametrize(('seats', 'expected'), [(0, True), (1, False)])
    def test_below_seat_minimum(self, seats: int, expected: bool) -> None:
        assert Webinar.below_seat_minimum(seats) is expected

    def test_change_seats_only_touches_seats(self, webinar: Webinar) -> None:
        before = attrs.evolve(webinar)

        webinar.change_seats(200)

        assert webinar.seats == 200
        assert attrs.evolve(webinar, seats=before.seats) == before
