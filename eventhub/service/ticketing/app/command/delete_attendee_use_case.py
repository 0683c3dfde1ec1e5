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
from eventhub.service.ticketing.domain.enum.user_role import UserRole


class DeleteAttendeeUseCase:
    """Remove an attendee account. Their tickets go back on sale instead of being deleted."""

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
    async def execute(self, *, user_id: int, admin: UserEntity) -> int:
        async with self.uow:
            attendee = await self.uow.user_repo.get_by_id(user_id=user_id)
            if not attendee or attendee.role != UserRole.ATTENDEE:
                raise NotFoundError('Attendee not found')

            released_tickets = await self.uow.ticket_repo.release_by_attendee(attendee_id=user_id)
            await self.uow.user_repo.delete(user_id=user_id)
            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [DELETE_ATTENDEE] Attendee {user_id} deleted, {released_tickets} tickets released'
        )
        await self.notification_dispatcher.notify(
            to=admin.email,
            content=email_template.attendee_deleted(
                recipient=admin, attendee=attendee, released_tickets=released_tickets
            ),
        )
        return released_tickets
