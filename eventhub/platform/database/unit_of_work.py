"""
Unit of Work Pattern - one database session shared by all repositories

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories get the shared session from the UoW
- Use cases coordinate several repositories through the UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from eventhub.service.ticketing.app.interface import IEventRepo, ITicketRepo, IUserRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the ticketing service

    Usage:
        async with uow:
            ticket = await uow.ticket_repo.create(ticket=...)
            await uow.commit()
    """

    event_repo: IEventRepo
    ticket_repo: ITicketRepo
    user_repo: IUserRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from eventhub.service.ticketing.driven_adapter.repo.event_repo_impl import EventRepoImpl
        from eventhub.service.ticketing.driven_adapter.repo.ticket_repo_impl import (
            TicketRepoImpl,
        )
        from eventhub.service.ticketing.driven_adapter.repo.user_repo_impl import UserRepoImpl

        self.event_repo = EventRepoImpl(session=self.session)
        self.ticket_repo = TicketRepoImpl(session=self.session)
        self.user_repo = UserRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        async def buy(uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            async with uow:
                ...
                await uow.commit()
    """
    return SqlAlchemyUnitOfWork(session)
