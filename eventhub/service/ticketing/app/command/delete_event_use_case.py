from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventhub.platform.config.di import Container
from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.service import email_template
from eventhub.service.ticketing.app.service.notification_dispatcher import NotificationDispatcher
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


class DeleteEventUseCase:
    """
    Delete an event together with all of its tickets.

    Flow:
    1. Owning organizer or admin only
    2. Bulk delete tickets by event_id
    3. Delete the event
    4. Both in one transaction, then notify the requester
    """

    def __init__(self, *, uow: AbstractUnitOfWork, notification_dispatcher: NotificationDispatcher):
        self.uow = uow
        self.notification_dispatcher = notification_dispatcher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        notification_dispatcher: NotificationDispatcher = Depends(
            Provide[Container.notification_dispatcher]
        ),
    ) -> Self:
        return cls(uow=uow, notification_dispatcher=notification_dispatcher)

    @Logger.io
    async def execute(self, *, event_id: int, requester: UserEntity) -> int:
        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if not event:
                raise NotFoundError('Event not found')
            if not requester.is_admin:
                event.ensure_owned_by(requester, action='delete')

            organizer = await self.uow.user_repo.get_by_id(user_id=event.organizer_id)
            deleted_tickets = await self.uow.ticket_repo.delete_by_event(event_id=event_id)
            await self.uow.event_repo.delete(event_id=event_id)
            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [DELETE_EVENT] Event {event_id} deleted with {deleted_tickets} tickets'
        )
        await self.notification_dispatcher.notify(
            to=requester.email,
            content=email_template.event_deleted(
                recipient=requester,
                event=event,
                organizer=organizer,
                deleted_tickets=deleted_tickets,
            ),
        )
        return deleted_tickets
