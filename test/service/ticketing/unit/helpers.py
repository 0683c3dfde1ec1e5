from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from unittest.mock import AsyncMock, Mock

from eventhub.platform.database.unit_of_work import AbstractUnitOfWork
from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.value_object.ticket_state import (
    TicketAvailable,
    TicketSold,
    TicketState,
)


FIXED_CREATED_AT = datetime(2026, 10, 18, 15, 4, 5, tzinfo=timezone.utc)
FAKE_QR_CODE = 'data:image/png;base64,iVBORw0KGgo='


class FakeUnitOfWork(AbstractUnitOfWork):
    """UoW whose repositories are AsyncMocks; records commit/rollback calls."""

    def __init__(self) -> None:
        self.event_repo = AsyncMock()
        self.ticket_repo = AsyncMock()
        self.user_repo = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


def make_event(
    *,
    event_id: int = 1,
    organizer_id: int = 101,
    name: str = 'Summer Jazz Night',
    price: Decimal = Decimal('25.00'),
) -> Event:
    return Event(
        id=event_id,
        name=name,
        description='Open-air jazz with local bands',
        genre='Jazz',
        category='Concert',
        price=price,
        organizer_id=organizer_id,
        created_at=FIXED_CREATED_AT,
        updated_at=FIXED_CREATED_AT,
    )


def make_ticket(
    *,
    ticket_id: int = 7,
    event_id: int = 1,
    ticket_type: str = 'VIP',
    attendee_id: Optional[int] = None,
    qr_code: Optional[str] = FAKE_QR_CODE,
) -> Ticket:
    state: TicketState = (
        TicketAvailable() if attendee_id is None else TicketSold(attendee_id=attendee_id)
    )
    return Ticket(
        id=ticket_id,
        event_id=event_id,
        ticket_type=ticket_type,
        state=state,
        qr_code=qr_code,
        created_at=FIXED_CREATED_AT,
        updated_at=FIXED_CREATED_AT,
    )


def make_qr_renderer(data_uri: str = FAKE_QR_CODE) -> Mock:
    renderer = Mock()
    renderer.render = Mock(return_value=data_uri)
    return renderer


def make_dispatcher() -> Mock:
    dispatcher = Mock()
    dispatcher.notify = AsyncMock()
    return dispatcher
