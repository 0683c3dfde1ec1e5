from abc import ABC, abstractmethod
from typing import Optional

from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    """Directory of principals known to this service (rows owned by the auth provider)."""

    @abstractmethod
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def upsert(self, *, user: UserEntity) -> UserEntity:
        """Record the latest name/email/role seen for a principal."""
        pass

    @abstractmethod
    async def delete(self, *, user_id: int) -> bool:
        pass
