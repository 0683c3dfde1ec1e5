from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventhub.platform.config.di import Container
from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.dto.ticketing_dto import TicketDetail
from eventhub.service.ticketing.app.interface.i_qr_renderer import IQrRenderer
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.qr_payload_codec import encode_qr_payload


class CreateTicketUseCase:
    """
    Issue an Available ticket for an event the organizer owns.

    The ticket row, its QR payload and the rendered image are written in one
    transaction; a renderer failure aborts the whole call.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, qr_renderer: IQrRenderer):
        self.uow = uow
        self.qr_renderer = qr_renderer

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        qr_renderer: IQrRenderer = Depends(Provide[Container.qr_renderer]),
    ) -> Self:
        return cls(uow=uow, qr_renderer=qr_renderer)

    @Logger.io
    async def execute(
        self, *, event_id: int, organizer: UserEntity, ticket_type: Optional[str]
    ) -> TicketDetail:
        ticket = Ticket.create(event_id=event_id, ticket_type=ticket_type)

        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if not event:
                raise NotFoundError('Event not found')
            event.ensure_owned_by(organizer, action='create tickets for')

            await self.uow.user_repo.upsert(user=organizer)
            saved_ticket = await self.uow.ticket_repo.create(ticket=ticket)

            # Payload embeds the ticket id, so it is built after the insert
            payload = encode_qr_payload(ticket=saved_ticket, event=event, organizer=organizer)
            qr_code = self.qr_renderer.render(payload)
            await self.uow.ticket_repo.update_qr_code(ticket_id=saved_ticket.id, qr_code=qr_code)
            saved_ticket.qr_code = qr_code

            await self.uow.commit()

        Logger.base.info(f'🎫 [CREATE_TICKET] Ticket {saved_ticket.id} issued for event {event_id}')
        return TicketDetail(ticket=saved_ticket, event=event, organizer=organizer)
