from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_event_repo import IEventRepo
from eventhub.service.ticketing.domain.entity.event_entity import Event
from eventhub.service.ticketing.driven_adapter.model.event_model import EventModel


class EventRepoImpl(IEventRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_event: EventModel) -> Event:
        return Event(
            name=db_event.name,
            description=db_event.description,
            genre=db_event.genre,
            category=db_event.category,
            price=db_event.price,
            organizer_id=db_event.organizer_id,
            id=db_event.id,
            created_at=db_event.created_at,
            updated_at=db_event.updated_at,
        )

    @Logger.io
    async def create(self, *, event: Event) -> Event:
        db_event = EventModel(
            name=event.name,
            description=event.description,
            genre=event.genre,
            category=event.category,
            price=event.price,
            organizer_id=event.organizer_id,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
        self.session.add(db_event)
        await self.session.flush()
        await self.session.refresh(db_event)
        return self._to_entity(db_event)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        result = await self.session.execute(select(EventModel).where(EventModel.id == event_id))
        db_event = result.scalar_one_or_none()
        return self._to_entity(db_event) if db_event else None

    @Logger.io
    async def update(self, *, event: Event) -> Event:
        db_event = await self.session.get(EventModel, event.id)
        if db_event is None:
            raise RuntimeError(f'Event {event.id} does not exist')

        db_event.name = event.name
        db_event.description = event.description
        db_event.genre = event.genre
        db_event.category = event.category
        db_event.price = event.price
        db_event.updated_at = event.updated_at  # type: ignore[assignment]
        await self.session.flush()
        await self.session.refresh(db_event)
        return self._to_entity(db_event)

    @Logger.io
    async def delete(self, *, event_id: int) -> bool:
        result = await self.session.execute(
            delete(EventModel)
            .where(EventModel.id == event_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def delete_by_organizer(self, *, organizer_id: int) -> int:
        result = await self.session.execute(
            delete(EventModel)
            .where(EventModel.organizer_id == organizer_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
