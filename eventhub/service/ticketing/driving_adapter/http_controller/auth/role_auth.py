from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventhub.platform.config.core_setting import settings
from eventhub.platform.config.di import Container
from eventhub.platform.exception.exceptions import ForbiddenError
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole
from eventhub.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthStrategy:
    @staticmethod
    def is_attendee(user: UserEntity) -> bool:
        return user.role == UserRole.ATTENDEE

    @staticmethod
    def is_organizer(user: UserEntity) -> bool:
        return user.role == UserRole.ORGANIZER

    @staticmethod
    def is_admin(user: UserEntity) -> bool:
        return user.role == UserRole.ADMIN


@inject
async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    token = credentials.credentials if credentials else request.cookies.get(settings.AUTH_COOKIE_NAME)
    return jwt_auth.get_current_user_info_from_jwt(token)


async def require_attendee(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.is_attendee(current_user):
        raise ForbiddenError('Only attendees can perform this action')
    return current_user


async def require_organizer(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.is_organizer(current_user):
        raise ForbiddenError('Only organizers can perform this action')
    return current_user


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.is_admin(current_user):
        raise ForbiddenError('Only admins can perform this action')
    return current_user


async def require_organizer_or_admin(
    current_user: UserEntity = Depends(get_current_user),
) -> UserEntity:
    if current_user.role not in [UserRole.ORGANIZER, UserRole.ADMIN]:
        raise ForbiddenError("You don't have permission to perform this action")
    return current_user
