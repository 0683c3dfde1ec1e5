from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from eventhub.service.ticketing.app.dto.ticketing_dto import TicketDetail
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.qr_payload_codec import MISSING_VALUE
from eventhub.service.ticketing.driving_adapter.schema.camel_model import CamelModel


class TicketCreateRequest(CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'ticketType': 'VIP'}})

    ticket_type: Optional[str] = None


class TicketResponse(CamelModel):
    id: int
    event_id: int
    ticket_type: str
    attendee_id: Optional[int] = None
    qr_code: Optional[str] = None
    is_available: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketResponse':
        if ticket.id is None:
            raise RuntimeError('Ticket ID should not be None after persistence.')
        return cls(
            id=ticket.id,
            event_id=ticket.event_id,
            ticket_type=ticket.ticket_type,
            attendee_id=ticket.attendee_id,
            qr_code=ticket.qr_code,
            is_available=ticket.is_available,
            created_at=ticket.created_at,
        )


class TicketEventSummary(CamelModel):
    id: int
    name: str
    description: str
    genre: str
    price: float
    organizer_id: int
    organizer_name: str
    organizer_email: str


class TicketDetailResponse(TicketResponse):
    event: TicketEventSummary

    @classmethod
    def from_detail(cls, detail: TicketDetail) -> 'TicketDetailResponse':
        event, organizer = detail.event, detail.organizer
        base = TicketResponse.from_entity(detail.ticket)
        return cls(
            **base.model_dump(),
            event=TicketEventSummary(
                id=event.id,  # type: ignore[arg-type]
                name=event.name,
                description=event.description,
                genre=event.genre,
                price=float(event.price),
                organizer_id=event.organizer_id,
                organizer_name=(organizer.name if organizer else '') or MISSING_VALUE,
                organizer_email=(organizer.email if organizer else '') or MISSING_VALUE,
            ),
        )


class MyTicketsResponse(BaseModel):
    tickets: List[TicketResponse]
    total: int


class MessageResponse(BaseModel):
    message: str


class DeleteAttendeeResponse(CamelModel):
    message: str
    released_tickets: int


class DeleteOrganizerResponse(CamelModel):
    message: str
    deleted_events: int
    deleted_tickets: int
