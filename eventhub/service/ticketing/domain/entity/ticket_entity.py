from datetime import datetime, timezone
from typing import Optional

import attrs

from eventhub.platform.exception.exceptions import ConflictError, DomainError
from eventhub.service.ticketing.domain.value_object.ticket_state import (
    TicketAvailable,
    TicketSold,
    TicketState,
)


# Column width of ticket.ticket_type
TICKET_TYPE_MAX_LENGTH = 100


@attrs.define
class Ticket:
    event_id: int
    ticket_type: str
    state: TicketState = attrs.field(factory=TicketAvailable)
    qr_code: Optional[str] = attrs.field(default=None, repr=False)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def attendee_id(self) -> Optional[int]:
        return self.state.attendee_id

    @property
    def is_available(self) -> bool:
        return self.state.is_available

    @classmethod
    def create(cls, *, event_id: int, ticket_type: Optional[str]) -> 'Ticket':
        ticket_type = (ticket_type or '').strip()
        if not ticket_type:
            raise DomainError('Ticket type is required')
        if len(ticket_type) > TICKET_TYPE_MAX_LENGTH:
            raise DomainError(f'Ticket type cannot exceed {TICKET_TYPE_MAX_LENGTH} characters')
        now = datetime.now(timezone.utc)
        return cls(event_id=event_id, ticket_type=ticket_type, created_at=now, updated_at=now)

    def purchase(self, *, attendee_id: int) -> TicketSold:
        """Available -> Sold(attendee_id). Returns the new state without mutating the ticket."""
        if not self.is_available:
            raise ConflictError('Ticket is no longer available')
        # Unreachable while the availability guard holds
        if self.attendee_id == attendee_id:
            raise ConflictError('You have already purchased this ticket')
        return TicketSold(attendee_id=attendee_id)

    def mark_sold(self, *, attendee_id: int, qr_code: str) -> None:
        self.state = TicketSold(attendee_id=attendee_id)
        self.qr_code = qr_code
        self.updated_at = datetime.now(timezone.utc)
