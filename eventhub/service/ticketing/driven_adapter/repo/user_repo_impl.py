from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_user_repo import IUserRepo
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole
from eventhub.service.ticketing.driven_adapter.model.user_model import UserModel


class UserRepoImpl(IUserRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_user: UserModel) -> UserEntity:
        return UserEntity(
            id=db_user.id,
            role=UserRole(db_user.role),
            name=db_user.name,
            email=db_user.email,
            created_at=db_user.created_at,
        )

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        db_user = result.scalar_one_or_none()
        return self._to_entity(db_user) if db_user else None

    @Logger.io
    async def upsert(self, *, user: UserEntity) -> UserEntity:
        db_user = await self.session.get(UserModel, user.id)
        if db_user is None:
            db_user = UserModel(id=user.id, name=user.name, email=user.email, role=user.role.value)
            self.session.add(db_user)
        else:
            db_user.name = user.name or db_user.name
            db_user.email = user.email or db_user.email
            db_user.role = user.role.value
        await self.session.flush()
        await self.session.refresh(db_user)
        return self._to_entity(db_user)

    @Logger.io
    async def delete(self, *, user_id: int) -> bool:
        result = await self.session.execute(
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]
