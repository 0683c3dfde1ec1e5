from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventhub.platform.config.di import Container
from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import ConflictError, NotFoundError
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.dto.ticketing_dto import TicketDetail
from eventhub.service.ticketing.app.interface.i_qr_renderer import IQrRenderer
from eventhub.service.ticketing.app.service import email_template
from eventhub.service.ticketing.app.service.notification_dispatcher import NotificationDispatcher
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.qr_payload_codec import encode_qr_payload


class PurchaseTicketUseCase:
    """
    Sell an Available ticket to an attendee.

    Flow:
    1. Load ticket, reject if missing or already sold
    2. Re-encode and render the QR payload
    3. Compare-and-set Available -> Sold in one UPDATE; zero rows means someone else won
    4. Commit, then hand the confirmation email to the dispatcher

    The email is best-effort: its failure never undoes or fails the purchase.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        qr_renderer: IQrRenderer,
        notification_dispatcher: NotificationDispatcher,
    ):
        self.uow = uow
        self.qr_renderer = qr_renderer
        self.notification_dispatcher = notification_dispatcher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        qr_renderer: IQrRenderer = Depends(Provide[Container.qr_renderer]),
        notification_dispatcher: NotificationDispatcher = Depends(
            Provide[Container.notification_dispatcher]
        ),
    ) -> Self:
        return cls(
            uow=uow, qr_renderer=qr_renderer, notification_dispatcher=notification_dispatcher
        )

    @Logger.io
    async def execute(self, *, ticket_id: int, attendee: UserEntity) -> TicketDetail:
        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id=ticket_id)
            if not ticket:
                raise NotFoundError('Ticket not found')
            ticket.purchase(attendee_id=attendee.id)

            event = await self.uow.event_repo.get_by_id(event_id=ticket.event_id)
            if not event:
                raise NotFoundError('Event not found')
            organizer = await self.uow.user_repo.get_by_id(user_id=event.organizer_id)

            payload = encode_qr_payload(ticket=ticket, event=event, organizer=organizer)
            qr_code = self.qr_renderer.render(payload)

            await self.uow.user_repo.upsert(user=attendee)
            sold = await self.uow.ticket_repo.purchase_if_available(
                ticket_id=ticket_id, attendee_id=attendee.id, qr_code=qr_code
            )
            if not sold:
                Logger.base.warning(f'⚠️ [PURCHASE] Ticket {ticket_id} lost the race')
                raise ConflictError('Ticket is no longer available')

            await self.uow.commit()
            ticket.mark_sold(attendee_id=attendee.id, qr_code=qr_code)

        Logger.base.info(f'✅ [PURCHASE] Ticket {ticket_id} sold to attendee {attendee.id}')
        await self.notification_dispatcher.notify(
            to=attendee.email,
            content=email_template.ticket_purchased(
                recipient=attendee, ticket=ticket, event=event, organizer=organizer
            ),
        )
        return TicketDetail(ticket=ticket, event=event, organizer=organizer)
