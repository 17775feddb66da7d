from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.app.command.organize_webinar_use_case import OrganizeWebinarUseCase
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.webinar.driving_adapter.http_controller.schema.webinar_schema import (
    ChangeSeatsRequest,
    ChangeSeatsResponse,
    OrganizeWebinarRequest,
    OrganizeWebinarResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def organize_webinar(
    request: OrganizeWebinarRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: OrganizeWebinarUseCase = Depends(OrganizeWebinarUseCase.depends),
) -> OrganizeWebinarResponse:
    webinar_id = await use_case.execute(
        user_id=current_user.id,
        title=request.title,
        seats=request.seats,
        start_date=request.start_date,
        end_date=request.end_date,
    )
    return OrganizeWebinarResponse(id=webinar_id)


@router.post('/{webinar_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ChangeSeatsUseCase = Depends(ChangeSeatsUseCase.depends),
) -> ChangeSeatsResponse:
    # Domain errors propagate to the registered exception handlers (404 / 401 / 400)
    await use_case.execute(user=current_user, webinar_id=webinar_id, seats=request.seats)
    return ChangeSeatsResponse(message='Seats updated')
