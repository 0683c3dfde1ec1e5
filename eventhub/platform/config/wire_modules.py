"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from eventhub.service.ticketing.app.command import (
    create_event_use_case,
    create_ticket_use_case,
    delete_attendee_use_case,
    delete_event_use_case,
    delete_organizer_use_case,
    purchase_ticket_use_case,
)
from eventhub.service.ticketing.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_event_use_case,
    create_ticket_use_case,
    purchase_ticket_use_case,
    delete_event_use_case,
    delete_attendee_use_case,
    delete_organizer_use_case,
    role_auth,
]
