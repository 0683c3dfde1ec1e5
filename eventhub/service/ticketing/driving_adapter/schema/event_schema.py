from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict

from eventhub.service.ticketing.app.dto.ticketing_dto import EventDetail
from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.driving_adapter.schema.camel_model import CamelModel
from eventhub.service.ticketing.driving_adapter.schema.ticket_schema import TicketResponse


class EventCreateRequest(CamelModel):
    # Optional so that missing fields get the domain's message instead of a schema error
    name: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Summer Jazz Night',
                'description': 'Open-air jazz with local bands',
                'genre': 'Jazz',
                'category': 'Concert',
                'price': 25.00,
            }
        },
    )


class EventUpdateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None


class OrganizerSummary(CamelModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, organizer: Optional[UserEntity]) -> Optional['OrganizerSummary']:
        if organizer is None:
            return None
        return cls(id=organizer.id, name=organizer.name, email=organizer.email)


class EventResponse(CamelModel):
    id: int
    name: str
    description: str
    genre: str
    category: str
    price: float
    organizer_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, event: Event) -> 'EventResponse':
        if event.id is None:
            raise RuntimeError('Event ID should not be None after persistence.')
        return cls(
            id=event.id,
            name=event.name,
            description=event.description,
            genre=event.genre,
            category=event.category,
            price=float(event.price),
            organizer_id=event.organizer_id,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventDetailResponse(EventResponse):
    organizer: Optional[OrganizerSummary] = None
    tickets: List[TicketResponse] = []

    @classmethod
    def from_detail(cls, detail: EventDetail) -> 'EventDetailResponse':
        base = EventResponse.from_entity(detail.event)
        return cls(
            **base.model_dump(),
            organizer=OrganizerSummary.from_entity(detail.organizer),
            tickets=[TicketResponse.from_entity(ticket) for ticket in detail.tickets],
        )


class DeleteEventResponse(CamelModel):
    message: str
    deleted_tickets: int
