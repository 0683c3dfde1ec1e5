from typing import Any, Dict

from fastapi.testclient import TestClient

from eventhub.platform.constant.route_constant import EVENT_BASE, EVENT_TICKETS, TICKET_BUY
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.util_constant import DEFAULT_EVENT


_jwt_auth = JwtAuth()


def auth_header(user: UserEntity) -> Dict[str, str]:
    return {'Authorization': f'Bearer {_jwt_auth.create_jwt_token(user)}'}


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_event(client: TestClient, organizer: UserEntity, **overrides: Any) -> Dict[str, Any]:
    response = client.post(
        EVENT_BASE, json={**DEFAULT_EVENT, **overrides}, headers=auth_header(organizer)
    )
    assert_response_status(response, 201, 'Failed to create event')
    return response.json()


def create_ticket(
    client: TestClient, organizer: UserEntity, event_id: int, ticket_type: str = 'VIP'
) -> Dict[str, Any]:
    response = client.post(
        EVENT_TICKETS.format(event_id=event_id),
        json={'ticketType': ticket_type},
        headers=auth_header(organizer),
    )
    assert_response_status(response, 201, 'Failed to create ticket')
    return response.json()


def buy_ticket(client: TestClient, attendee: UserEntity, ticket_id: int) -> Any:
    return client.post(TICKET_BUY.format(ticket_id=ticket_id), headers=auth_header(attendee))
