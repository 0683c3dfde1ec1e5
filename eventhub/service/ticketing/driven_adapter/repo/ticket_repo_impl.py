from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket
from eventhub.service.ticketing.domain.value_object.ticket_state import ticket_state_from_columns
from eventhub.service.ticketing.driven_adapter.model.event_model import EventModel
from eventhub.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class TicketRepoImpl(ITicketRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        return Ticket(
            event_id=db_ticket.event_id,
            ticket_type=db_ticket.ticket_type,
            state=ticket_state_from_columns(
                attendee_id=db_ticket.attendee_id, is_available=db_ticket.is_available
            ),
            qr_code=db_ticket.qr_code,
            id=db_ticket.id,
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )

    @Logger.io
    async def create(self, *, ticket: Ticket) -> Ticket:
        db_ticket = TicketModel(
            event_id=ticket.event_id,
            ticket_type=ticket.ticket_type,
            attendee_id=ticket.attendee_id,
            is_available=ticket.is_available,
            qr_code=ticket.qr_code,
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )
        self.session.add(db_ticket)
        await self.session.flush()
        await self.session.refresh(db_ticket)
        return self._to_entity(db_ticket)

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        result = await self.session.execute(select(TicketModel).where(TicketModel.id == ticket_id))
        db_ticket = result.scalar_one_or_none()
        return self._to_entity(db_ticket) if db_ticket else None

    @Logger.io
    async def update_qr_code(self, *, ticket_id: int, qr_code: str) -> None:
        await self.session.execute(
            update(TicketModel)
            .where(TicketModel.id == ticket_id)
            .values(qr_code=qr_code, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )

    @Logger.io
    async def purchase_if_available(self, *, ticket_id: int, attendee_id: int, qr_code: str) -> bool:
        # Availability check and write happen in one statement
        result = await self.session.execute(
            update(TicketModel)
            .where(TicketModel.id == ticket_id, TicketModel.is_available.is_(True))
            .values(
                attendee_id=attendee_id,
                is_available=False,
                qr_code=qr_code,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]

    @Logger.io
    async def release_by_attendee(self, *, attendee_id: int) -> int:
        result = await self.session.execute(
            update(TicketModel)
            .where(TicketModel.attendee_id == attendee_id)
            .values(attendee_id=None, is_available=True, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete(self, *, ticket_id: int) -> bool:
        result = await self.session.execute(
            delete(TicketModel)
            .where(TicketModel.id == ticket_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def delete_by_event(self, *, event_id: int) -> int:
        result = await self.session.execute(
            delete(TicketModel)
            .where(TicketModel.event_id == event_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete_by_organizer(self, *, organizer_id: int) -> int:
        organizer_event_ids = select(EventModel.id).where(EventModel.organizer_id == organizer_id)
        result = await self.session.execute(
            delete(TicketModel)
            .where(TicketModel.event_id.in_(organizer_event_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def list_by_event(self, *, event_id: int, only_available: bool = False) -> List[Ticket]:
        stmt = select(TicketModel).where(TicketModel.event_id == event_id)
        if only_available:
            stmt = stmt.where(TicketModel.is_available.is_(True))
        result = await self.session.execute(stmt.order_by(TicketModel.id))
        return [self._to_entity(db_ticket) for db_ticket in result.scalars().all()]

    @Logger.io
    async def list_by_attendee(self, *, attendee_id: int) -> List[Ticket]:
        result = await self.session.execute(
            select(TicketModel)
            .where(TicketModel.attendee_id == attendee_id)
            .order_by(TicketModel.id.desc())
        )
        return [self._to_entity(db_ticket) for db_ticket in result.scalars().all()]
