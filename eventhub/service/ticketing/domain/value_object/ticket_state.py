"""
Ticket state variant

A ticket is either Available or Sold to exactly one attendee. The storage
pair (attendee_id, is_available) is derived from this and never set
independently.
"""

from typing import Optional, Union

import attrs


@attrs.frozen
class TicketAvailable:
    @property
    def attendee_id(self) -> None:
        return None

    @property
    def is_available(self) -> bool:
        return True


@attrs.frozen
class TicketSold:
    attendee_id: int

    @property
    def is_available(self) -> bool:
        return False


TicketState = Union[TicketAvailable, TicketSold]


def ticket_state_from_columns(*, attendee_id: Optional[int], is_available: bool) -> TicketState:
    if is_available != (attendee_id is None):
        raise RuntimeError(
            f'Inconsistent ticket state: is_available={is_available}, attendee_id={attendee_id}'
        )
    return TicketAvailable() if attendee_id is None else TicketSold(attendee_id=attendee_id)
