from fastapi import APIRouter, Depends, status

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.command.delete_ticket_use_case import DeleteTicketUseCase
from eventhub.service.ticketing.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from eventhub.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from eventhub.service.ticketing.app.query.list_my_tickets_use_case import ListMyTicketsUseCase
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
    require_attendee,
)
from eventhub.service.ticketing.driving_adapter.schema.ticket_schema import (
    MessageResponse,
    MyTicketsResponse,
    TicketDetailResponse,
    TicketResponse,
)


router = APIRouter()


# Registered before /{ticket_id} so "mine" is not parsed as an id
@router.get('/mine', status_code=status.HTTP_200_OK)
@Logger.io
async def list_my_tickets(
    current_user: UserEntity = Depends(require_attendee),
    use_case: ListMyTicketsUseCase = Depends(ListMyTicketsUseCase.depends),
) -> MyTicketsResponse:
    tickets = await use_case.execute(attendee_id=current_user.id)
    return MyTicketsResponse(
        tickets=[TicketResponse.from_entity(ticket) for ticket in tickets],
        total=len(tickets),
    )


@router.get('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id)
    return TicketResponse.from_entity(ticket)


@router.post('/{ticket_id}/buy', status_code=status.HTTP_200_OK)
@Logger.io
async def buy_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(require_attendee),
    use_case: PurchaseTicketUseCase = Depends(PurchaseTicketUseCase.depends),
) -> TicketDetailResponse:
    detail = await use_case.execute(ticket_id=ticket_id, attendee=current_user)
    return TicketDetailResponse.from_detail(detail)


@router.delete('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> MessageResponse:
    await use_case.execute(ticket_id=ticket_id)
    return MessageResponse(message='Ticket deleted successfully')
