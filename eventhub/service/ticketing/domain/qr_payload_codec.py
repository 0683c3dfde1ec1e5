"""
QR payload codec

Builds the plain-text block that gets rendered into a ticket's QR image.
The block proves which ticket/event/organizer it belongs to and carries no
attendee data, before or after purchase.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


LABEL_WIDTH = 15
MISSING_VALUE = 'N/A'


def _line(label: str, value: object) -> str:
    return f'{label[:LABEL_WIDTH].ljust(LABEL_WIDTH)}: {value}'.strip()


def format_price(price: Decimal) -> str:
    """25.00 -> $25, 19.90 -> $19.9"""
    normalized = price.normalize()
    return f'${normalized:f}'


def format_timestamp(value: Optional[datetime]) -> str:
    """en-US style: 10/18/2026, 3:04:05 PM"""
    if value is None:
        return MISSING_VALUE
    hour = value.hour % 12 or 12
    meridiem = 'AM' if value.hour < 12 else 'PM'
    return (
        f'{value.month}/{value.day}/{value.year}, '
        f'{hour}:{value.minute:02d}:{value.second:02d} {meridiem}'
    )


def encode_qr_payload(*, ticket: Ticket, event: Event, organizer: Optional[UserEntity]) -> str:
    organizer_name = (organizer.name if organizer else '') or MISSING_VALUE
    organizer_email = (organizer.email if organizer else '') or MISSING_VALUE

    lines = [
        _line('Ticket ID', ticket.id),
        _line('Ticket Type', ticket.ticket_type),
        _line('Event Name', event.name),
        _line('Event Genre', event.genre),
        _line('Event Price', format_price(event.price)),
        _line('Organizer Name', organizer_name),
        _line('Organizer Email', organizer_email),
        _line('Created At', format_timestamp(ticket.created_at)),
    ]
    return '\n'.join(lines)
