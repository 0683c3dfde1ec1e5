from typing import List, Self

from fastapi import Depends

from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.domain.entity.ticket_entity import Ticket


class ListMyTicketsUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, attendee_id: int) -> List[Ticket]:
        async with self.uow:
            return await self.uow.ticket_repo.list_by_attendee(attendee_id=attendee_id)
