from decimal import Decimal
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventhub.platform.config.di import Container
from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.service import email_template
from eventhub.service.ticketing.app.service.notification_dispatcher import NotificationDispatcher
from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


class CreateEventUseCase:
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
    async def execute(
        self,
        *,
        organizer: UserEntity,
        name: str | None,
        description: str | None,
        genre: str | None,
        category: str | None,
        price: Decimal | None,
    ) -> Event:
        event = Event.create(
            name=name,
            description=description,
            genre=genre,
            category=category,
            price=price,
            organizer_id=organizer.id,
        )

        async with self.uow:
            await self.uow.user_repo.upsert(user=organizer)
            saved_event = await self.uow.event_repo.create(event=event)
            await self.uow.commit()

        Logger.base.info(f'✅ [CREATE_EVENT] Event {saved_event.id} created by {organizer.id}')
        await self.notification_dispatcher.notify(
            to=organizer.email,
            content=email_template.event_created(recipient=organizer, event=saved_event),
        )
        return saved_event
