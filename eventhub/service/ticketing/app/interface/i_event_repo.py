from abc import ABC, abstractmethod
from typing import Optional

from eventhub.service.ticketing.domain.entity.event_entity import Event


class IEventRepo(ABC):
    @abstractmethod
    async def create(self, *, event: Event) -> Event:
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def update(self, *, event: Event) -> Event:
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_by_organizer(self, *, organizer_id: int) -> int:
        """Bulk delete every event of the organizer. Returns the number removed."""
        pass
