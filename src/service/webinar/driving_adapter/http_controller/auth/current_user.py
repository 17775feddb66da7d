from typing import Optional

from fastapi import Header

from src.platform.config.core_setting import settings
from src.service.webinar.domain.entity.user_entity import UserEntity


async def get_current_user(
    user_id: Optional[str] = Header(None, alias='X-User-Id'),
) -> UserEntity:
    """
    Resolve the acting user from the X-User-Id header.

    Authentication is handled upstream (gateway); requests without the header
    act as settings.DEFAULT_USER_ID.
    """
    return UserEntity(id=user_id or settings.DEFAULT_USER_ID)
