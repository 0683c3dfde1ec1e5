from typing import List, Optional

import attrs

from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


@attrs.define
class EventDetail:
    event: Event
    organizer: Optional[UserEntity]
    tickets: List[Ticket] = attrs.field(factory=list)


@attrs.define
class TicketDetail:
    ticket: Ticket
    event: Event
    organizer: Optional[UserEntity]


@attrs.define
class OrganizerDeletion:
    deleted_events: int
    deleted_tickets: int
