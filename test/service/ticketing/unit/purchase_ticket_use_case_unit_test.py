"""
Unit tests for PurchaseTicketUseCase

Flow under test:
1. Ticket lookup (404 when missing)
2. Availability guard (409 when already sold)
3. Compare-and-set in the repository (409 when another buyer won)
4. Commit, then a best-effort confirmation email
"""

from unittest.mock import AsyncMock, Mock

import pytest

from eventhub.platform.exception.exceptions import ConflictError, NotFoundError
from eventhub.service.ticketing.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole
from test.service.ticketing.unit.helpers import (
    FakeUnitOfWork,
    make_dispatcher,
    make_event,
    make_qr_renderer,
    make_ticket,
)


ATTENDEE = UserEntity(id=201, role=UserRole.ATTENDEE, name='Alice', email='alice@example.com')
ORGANIZER = UserEntity(id=101, role=UserRole.ORGANIZER, name='Olivia', email='olivia@example.com')
SOLD_QR = 'data:image/png;base64,SOLD'


@pytest.fixture
def uow() -> FakeUnitOfWork:
    fake_uow = FakeUnitOfWork()
    fake_uow.ticket_repo.get_by_id = AsyncMock(return_value=make_ticket(qr_code=None))
    fake_uow.ticket_repo.purchase_if_available = AsyncMock(return_value=True)
    fake_uow.event_repo.get_by_id = AsyncMock(return_value=make_event())
    fake_uow.user_repo.get_by_id = AsyncMock(return_value=ORGANIZER)
    return fake_uow


@pytest.fixture
def dispatcher() -> Mock:
    return make_dispatcher()


@pytest.fixture
def use_case(uow: FakeUnitOfWork, dispatcher: Mock) -> PurchaseTicketUseCase:
    return PurchaseTicketUseCase(
        uow=uow, qr_renderer=make_qr_renderer(SOLD_QR), notification_dispatcher=dispatcher
    )


@pytest.mark.unit
class TestPurchaseTicketUseCase:
    @pytest.mark.asyncio
    async def test_purchase_success(
        self, use_case: PurchaseTicketUseCase, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        """
        Given: an Available ticket
        When: an attendee buys it
        Then: the CAS runs with the fresh QR, the UoW commits and the attendee is emailed
        """
        # Act
        detail = await use_case.execute(ticket_id=7, attendee=ATTENDEE)

        # Assert - ticket sold to the caller with the regenerated QR
        assert detail.ticket.attendee_id == 201
        assert detail.ticket.is_available is False
        assert detail.ticket.qr_code == SOLD_QR
        assert detail.organizer == ORGANIZER

        # Assert - single conditional write, then commit
        uow.ticket_repo.purchase_if_available.assert_awaited_once_with(
            ticket_id=7, attendee_id=201, qr_code=SOLD_QR
        )
        uow.user_repo.upsert.assert_awaited_once_with(user=ATTENDEE)
        assert uow.committed is True

        # Assert - confirmation carries the QR image
        dispatcher.notify.assert_awaited_once()
        kwargs = dispatcher.notify.await_args.kwargs
        assert kwargs['to'] == 'alice@example.com'
        assert kwargs['content'].subject == 'EventHub - Ticket Purchase Confirmation'
        assert kwargs['content'].image_data_uri == SOLD_QR

    @pytest.mark.asyncio
    async def test_purchase_missing_ticket(
        self, use_case: PurchaseTicketUseCase, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        uow.ticket_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(ticket_id=999, attendee=ATTENDEE)

        assert exc_info.value.message == 'Ticket not found'
        uow.ticket_repo.purchase_if_available.assert_not_awaited()
        dispatcher.notify.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_purchase_already_sold(
        self, use_case: PurchaseTicketUseCase, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        uow.ticket_repo.get_by_id = AsyncMock(return_value=make_ticket(attendee_id=202))

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(ticket_id=7, attendee=ATTENDEE)

        assert exc_info.value.message == 'Ticket is no longer available'
        assert exc_info.value.status_code == 409
        uow.ticket_repo.purchase_if_available.assert_not_awaited()
        assert uow.committed is False
        dispatcher.notify.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_purchase_lost_race(
        self, use_case: PurchaseTicketUseCase, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        """
        Given: the ticket looked Available when loaded
        When: the conditional write matches no row (another buyer won)
        Then: ConflictError, nothing committed, rollback on exit, no email
        """
        uow.ticket_repo.purchase_if_available = AsyncMock(return_value=False)

        with pytest.raises(ConflictError, match='Ticket is no longer available'):
            await use_case.execute(ticket_id=7, attendee=ATTENDEE)

        assert uow.committed is False
        assert uow.rolled_back is True
        dispatcher.notify.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_purchase_renderer_failure_is_fatal(
        self, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        renderer = Mock()
        renderer.render = Mock(side_effect=RuntimeError('encoder exploded'))
        use_case = PurchaseTicketUseCase(
            uow=uow, qr_renderer=renderer, notification_dispatcher=dispatcher
        )

        with pytest.raises(RuntimeError):
            await use_case.execute(ticket_id=7, attendee=ATTENDEE)

        uow.ticket_repo.purchase_if_available.assert_not_awaited()
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_purchase_qr_payload_has_no_attendee(
        self, uow: FakeUnitOfWork, dispatcher: Mock
    ) -> None:
        renderer = make_qr_renderer(SOLD_QR)
        use_case = PurchaseTicketUseCase(
            uow=uow, qr_renderer=renderer, notification_dispatcher=dispatcher
        )

        await use_case.execute(ticket_id=7, attendee=ATTENDEE)

        payload = renderer.render.call_args.args[0]
        assert payload.startswith('Ticket ID      : 7')
        assert 'Alice' not in payload
        assert 'alice@example.com' not in payload
        assert 'Organizer Name : Olivia' in payload
