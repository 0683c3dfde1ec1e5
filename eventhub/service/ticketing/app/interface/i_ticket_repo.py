"""
Ticket Repository Interface

Every state change goes through a single conditional statement; callers never
read-modify-write the (attendee_id, is_available) pair.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket


class ITicketRepo(ABC):
    @abstractmethod
    async def create(self, *, ticket: Ticket) -> Ticket:
        """Insert an Available ticket and return it with its id."""
        pass

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def update_qr_code(self, *, ticket_id: int, qr_code: str) -> None:
        pass

    @abstractmethod
    async def purchase_if_available(self, *, ticket_id: int, attendee_id: int, qr_code: str) -> bool:
        """
        Compare-and-set Available -> Sold(attendee_id).

        Returns False when the ticket was not Available at write time.
        """
        pass

    @abstractmethod
    async def release_by_attendee(self, *, attendee_id: int) -> int:
        """Return every ticket sold to the attendee to Available. Returns the count."""
        pass

    @abstractmethod
    async def delete(self, *, ticket_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_by_event(self, *, event_id: int) -> int:
        pass

    @abstractmethod
    async def delete_by_organizer(self, *, organizer_id: int) -> int:
        """Delete tickets of every event the organizer owns. Must run before the events go."""
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: int, only_available: bool = False) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_attendee(self, *, attendee_id: int) -> List[Ticket]:
        pass
