from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventhub.platform.config.di import Container
from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.dto.ticketing_dto import OrganizerDeletion
from eventhub.service.ticketing.app.service import email_template
from eventhub.service.ticketing.app.service.notification_dispatcher import NotificationDispatcher
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole


class DeleteOrganizerUseCase:
    """
    Remove an organizer account with everything they own.

    Tickets are deleted first (keyed by the organizer's event ids), then the
    events, then the account, all in one transaction.
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
    async def execute(self, *, user_id: int, admin: UserEntity) -> OrganizerDeletion:
        async with self.uow:
            organizer = await self.uow.user_repo.get_by_id(user_id=user_id)
            if not organizer or organizer.role != UserRole.ORGANIZER:
                raise NotFoundError('Organizer not found')

            deleted_tickets = await self.uow.ticket_repo.delete_by_organizer(organizer_id=user_id)
            deleted_events = await self.uow.event_repo.delete_by_organizer(organizer_id=user_id)
            await self.uow.user_repo.delete(user_id=user_id)
            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [DELETE_ORGANIZER] Organizer {user_id} deleted: '
            f'{deleted_events} events, {deleted_tickets} tickets'
        )
        await self.notification_dispatcher.notify(
            to=admin.email,
            content=email_template.organizer_deleted(
                recipient=admin,
                organizer=organizer,
                deleted_events=deleted_events,
                deleted_tickets=deleted_tickets,
            ),
        )
        return OrganizerDeletion(deleted_events=deleted_events, deleted_tickets=deleted_tickets)
