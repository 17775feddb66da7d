import pytest

from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarAlreadyExistsError,
    WebinarNotFoundError,
)
from src.service.webinar.driven_adapter.repo.webinar_repo_in_memory import InMemoryWebinarRepo
from test.constants import WEBINAR_ID, WEBINAR_SEATS


class TestInMemoryWebinarRepo:
    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_when_missing(self) -> None:
        repo = InMemoryWebinarRepo()

        assert await repo.find_by_id('missing') is None
        assert repo.find_by_id_sync('missing') is None

    @pytest.mark.asyncio
    async def test_create_then_find(self, webinar: Webinar) -> None:
        repo = InMemoryWebinarRepo()

        await repo.create(webinar)

        found = await repo.find_by_id(WEBINAR_ID)
        assert found == webinar

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_id(
        self, webinar_repo: InMemoryWebinarRepo, webinar: Webinar
    ) -> None:
        with pytest.raises(WebinarAlreadyExistsError) as exc_info:
            await webinar_repo.create(webinar)

        assert exc_info.value.status_code == 409
        assert len(webinar_repo.database) == 1

    @pytest.mark.asyncio
    async def test_update_replaces_stored_webinar(self, webinar_repo: InMemoryWebinarRepo) -> None:
        webinar = await webinar_repo.find_by_id(WEBINAR_ID)
        assert webinar is not None
        webinar.change_seats(75)

        await webinar_repo.update(webinar)

        stored = webinar_repo.find_by_id_sync(WEBINAR_ID)
        assert stored is not None
        assert stored.seats == 75
        assert len(webinar_repo.database) == 1

    @pytest.mark.asyncio
    async def test_update_unknown_webinar(self, webinar: Webinar) -> None:
        repo = InMemoryWebinarRepo()

        with pytest.raises(WebinarNotFoundError):
            await repo.update(webinar)

    @pytest.mark.asyncio
    async def test_returned_webinar_is_a_copy(self, webinar_repo: InMemoryWebinarRepo) -> None:
        webinar = await webinar_repo.find_by_id(WEBINAR_ID)
        assert webinar is not None

        webinar.change_seats(900)

        stored = webinar_repo.find_by_id_sync(WEBINAR_ID)
        assert stored is not None
        assert stored.seats == WEBINAR_SEATS

    def test_seeded_webinars_are_copied(self, webinar: Webinar) -> None:
        repo = InMemoryWebinarRepo([webinar])

        webinar.change_seats(900)

        stored = repo.find_by_id_sync(WEBINAR_ID)
        assert stored is not None
        assert stored.seats == WEBINAR_SEATS
