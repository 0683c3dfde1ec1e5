from decimal import Decimal
from typing import Optional, Self

from fastapi import Depends

from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


class UpdateEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        event_id: int,
        organizer: UserEntity,
        name: Optional[str] = None,
        description: Optional[str] = None,
        genre: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[Decimal] = None,
    ) -> Event:
        """Partial update by the owning organizer. organizer_id never changes."""
        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if not event:
                raise NotFoundError('Event not found')
            event.ensure_owned_by(organizer, action='update')

            event.apply_changes(
                name=name, description=description, genre=genre, category=category, price=price
            )
            updated_event = await self.uow.event_repo.update(event=event)
            await self.uow.commit()

        Logger.base.info(f'✅ [UPDATE_EVENT] Event {event_id} updated')
        return updated_event
