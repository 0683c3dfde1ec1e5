from fastapi import APIRouter, Depends, status

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from eventhub.service.ticketing.app.command.create_ticket_use_case import CreateTicketUseCase
from eventhub.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from eventhub.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from eventhub.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_organizer,
    require_organizer_or_admin,
)
from eventhub.service.ticketing.driving_adapter.schema.event_schema import (
    DeleteEventResponse,
    EventCreateRequest,
    EventDetailResponse,
    EventResponse,
    EventUpdateRequest,
)
from eventhub.service.ticketing.driving_adapter.schema.ticket_schema import (
    TicketCreateRequest,
    TicketDetailResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.execute(
        organizer=current_user,
        name=request.name,
        description=request.description,
        genre=request.genre,
        category=request.category,
        price=request.price,
    )
    return EventResponse.from_entity(event)


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventDetailResponse:
    detail = await use_case.execute(event_id=event_id, requester=current_user)
    return EventDetailResponse.from_detail(detail)


@router.patch('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.execute(
        event_id=event_id,
        organizer=current_user,
        name=request.name,
        description=request.description,
        genre=request.genre,
        category=request.category,
        price=request.price,
    )
    return EventResponse.from_entity(event)


@router.delete('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_event(
    event_id: int,
    current_user: UserEntity = Depends(require_organizer_or_admin),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> DeleteEventResponse:
    deleted_tickets = await use_case.execute(event_id=event_id, requester=current_user)
    return DeleteEventResponse(
        message='Event and associated tickets deleted successfully',
        deleted_tickets=deleted_tickets,
    )


@router.post('/{event_id}/tickets', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    event_id: int,
    request: TicketCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketDetailResponse:
    detail = await use_case.execute(
        event_id=event_id, organizer=current_user, ticket_type=request.ticket_type
    )
    return TicketDetailResponse.from_detail(detail)
