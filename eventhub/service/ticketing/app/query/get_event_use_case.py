from typing import Self

from fastapi import Depends

from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.dto.ticketing_dto import EventDetail
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


class GetEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, event_id: int, requester: UserEntity) -> EventDetail:
        """Owner and admins see every ticket, everyone else only what is still on sale."""
        Logger.base.info(f'🎫 [GET_EVENT] Loading event {event_id}')

        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if not event:
                Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
                raise NotFoundError('Event not found')

            sees_all = requester.is_admin or event.is_owned_by(requester)
            tickets = await self.uow.ticket_repo.list_by_event(
                event_id=event_id, only_available=not sees_all
            )
            organizer = await self.uow.user_repo.get_by_id(user_id=event.organizer_id)

        Logger.base.info(f'✅ [GET_EVENT] Found event {event_id} with {len(tickets)} tickets')
        return EventDetail(event=event, organizer=organizer, tickets=tickets)
