from datetime import datetime, timezone
from typing import Optional

import attrs

from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.qr_payload_codec import MISSING_VALUE, format_price


SIGNATURE = 'Best regards,\nEventHub Team'


@attrs.frozen
class EmailContent:
    subject: str
    body: str
    image_data_uri: Optional[str] = attrs.field(default=None, repr=False)


def _today() -> str:
    now = datetime.now(timezone.utc)
    return f'{now.month}/{now.day}/{now.year}'


def _organizer_label(organizer: Optional[UserEntity]) -> str:
    if not organizer:
        return MISSING_VALUE
    return f'{organizer.name or MISSING_VALUE} ({organizer.email or MISSING_VALUE})'


def event_created(*, recipient: UserEntity, event: Event) -> EmailContent:
    return EmailContent(
        subject='EventHub - Event Created Successfully',
        body=(
            f'Dear {recipient.name},\n\n'
            'Your event has been created successfully.\n\n'
            'Event Details:\n'
            f'- Name: {event.name}\n'
            f'- Description: {event.description}\n'
            f'- Genre: {event.genre}\n'
            f'- Category: {event.category}\n'
            f'- Price: {format_price(event.price)}\n\n'
            'You can now create tickets for this event.\n\n'
            f'{SIGNATURE}'
        ),
    )


def event_deleted(
    *,
    recipient: UserEntity,
    event: Event,
    organizer: Optional[UserEntity],
    deleted_tickets: int,
) -> EmailContent:
    subject = (
        'EventHub - Event Deleted (Admin Action)'
        if recipient.is_admin
        else 'EventHub - Event Deleted Successfully'
    )
    return EmailContent(
        subject=subject,
        body=(
            f'Dear {recipient.name},\n\n'
            'The following event has been deleted.\n\n'
            'Deleted Event Details:\n'
            f'- Name: {event.name}\n'
            f'- Description: {event.description}\n'
            f'- Genre: {event.genre}\n'
            f'- Price: {format_price(event.price)}\n'
            f'- Organizer: {_organizer_label(organizer)}\n'
            f'- Deleted Date: {_today()}\n'
            f'- Tickets Deleted: {deleted_tickets}\n\n'
            f'{SIGNATURE}'
        ),
    )


def ticket_purchased(
    *, recipient: UserEntity, ticket: Ticket, event: Event, organizer: Optional[UserEntity]
) -> EmailContent:
    return EmailContent(
        subject='EventHub - Ticket Purchase Confirmation',
        body=(
            f'Dear {recipient.name},\n\n'
            'Congratulations! You have successfully purchased a ticket.\n\n'
            'Ticket Details:\n'
            f'- Event: {event.name}\n'
            f'- Ticket Type: {ticket.ticket_type}\n'
            f'- Genre: {event.genre}\n'
            f'- Price: {format_price(event.price)}\n'
            f'- Organizer: {_organizer_label(organizer)}\n'
            f'- Ticket ID: {ticket.id}\n\n'
            'Your QR code is attached. Present it at the entrance.\n\n'
            f'{SIGNATURE}'
        ),
        image_data_uri=ticket.qr_code,
    )


def attendee_deleted(
    *, recipient: UserEntity, attendee: UserEntity, released_tickets: int
) -> EmailContent:
    return EmailContent(
        subject='EventHub - Attendee Deleted (Admin Action)',
        body=(
            f'Dear {recipient.name},\n\n'
            'You have successfully deleted an attendee account.\n\n'
            'Deleted Attendee Details:\n'
            f'- Name: {attendee.name}\n'
            f'- Email: {attendee.email}\n'
            f'- Role: {attendee.role.value}\n'
            f'- Deleted Date: {_today()}\n\n'
            f'{released_tickets} ticket(s) purchased by this attendee are available again.\n\n'
            f'{SIGNATURE}'
        ),
    )


def organizer_deleted(
    *,
    recipient: UserEntity,
    organizer: UserEntity,
    deleted_events: int,
    deleted_tickets: int,
) -> EmailContent:
    return EmailContent(
        subject='EventHub - Organizer Deleted (Admin Action)',
        body=(
            f'Dear {recipient.name},\n\n'
            'You have successfully deleted an organizer account.\n\n'
            'Deleted Organizer Details:\n'
            f'- Name: {organizer.name}\n'
            f'- Email: {organizer.email}\n'
            f'- Role: {organizer.role.value}\n'
            f'- Deleted Date: {_today()}\n'
            f'- Events Deleted: {deleted_events}\n'
            f'- Tickets Deleted: {deleted_tickets}\n\n'
            f'{SIGNATURE}'
        ),
    )
