from typing import Self

from fastapi import Depends

from eventhub.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from eventhub.platform.exception.exceptions import NotFoundError
from eventhub.platform.logging.loguru_io import Logger


class DeleteTicketUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, ticket_id: int) -> None:
        async with self.uow:
            if not await self.uow.ticket_repo.delete(ticket_id=ticket_id):
                raise NotFoundError('Ticket not found')
            await self.uow.commit()

        Logger.base.info(f'🗑️ [DELETE_TICKET] Ticket {ticket_id} deleted')
