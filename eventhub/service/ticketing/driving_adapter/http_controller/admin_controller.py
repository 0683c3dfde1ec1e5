from fastapi import APIRouter, Depends, status

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.command.delete_attendee_use_case import DeleteAttendeeUseCase
from eventhub.service.ticketing.app.command.delete_organizer_use_case import (
    DeleteOrganizerUseCase,
)
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from eventhub.service.ticketing.driving_adapter.schema.ticket_schema import (
    DeleteAttendeeResponse,
    DeleteOrganizerResponse,
)


router = APIRouter()


@router.delete('/attendees/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_attendee(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteAttendeeUseCase = Depends(DeleteAttendeeUseCase.depends),
) -> DeleteAttendeeResponse:
    released_tickets = await use_case.execute(user_id=user_id, admin=current_user)
    return DeleteAttendeeResponse(
        message='Attendee deleted successfully. Associated tickets made available again.',
        released_tickets=released_tickets,
    )


@router.delete('/organizers/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_organizer(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteOrganizerUseCase = Depends(DeleteOrganizerUseCase.depends),
) -> DeleteOrganizerResponse:
    result = await use_case.execute(user_id=user_id, admin=current_user)
    return DeleteOrganizerResponse(
        message='Organizer deleted successfully. Associated events and tickets removed.',
        deleted_events=result.deleted_events,
        deleted_tickets=result.deleted_tickets,
    )
