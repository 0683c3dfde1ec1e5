from decimal import Decimal
from typing import Any

import attrs
import pytest

from eventhub.platform.exception.exceptions import DomainError, ForbiddenError
from eventhub.service.ticketing.domain.entity.event_entity import REQUIRED_FIELDS_MESSAGE, Event
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole
from test.service.ticketing.unit.helpers import make_event


@pytest.fixture
def valid_event_params() -> dict[str, Any]:
    return {
        'name': 'Summer Jazz Night',
        'description': 'Open-air jazz with local bands',
        'genre': 'Jazz',
        'category': 'Concert',
        'price': Decimal('25.00'),
        'organizer_id': 101,
    }


@pytest.mark.unit
class TestEventCreate:
    def test_create_success(self, valid_event_params: dict[str, Any]) -> None:
        event = Event.create(**valid_event_params)

        assert event.name == 'Summer Jazz Night'
        assert event.price == Decimal('25.00')
        assert event.organizer_id == 101
        assert event.id is None
        assert event.created_at is not None

    def test_create_strips_whitespace(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['name'] = '  Summer Jazz Night  '

        event = Event.create(**valid_event_params)

        assert event.name == 'Summer Jazz Night'

    @pytest.mark.parametrize('field', ['name', 'description', 'genre', 'category', 'price'])
    def test_create_missing_field(self, valid_event_params: dict[str, Any], field: str) -> None:
        valid_event_params[field] = None

        with pytest.raises(DomainError) as exc_info:
            Event.create(**valid_event_params)

        assert exc_info.value.message == REQUIRED_FIELDS_MESSAGE

    def test_create_blank_field(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['genre'] = '   '

        with pytest.raises(DomainError, match='required'):
            Event.create(**valid_event_params)

    def test_create_negative_price(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['price'] = Decimal('-1')

        with pytest.raises(DomainError, match='Price cannot be negative'):
            Event.create(**valid_event_params)

    @pytest.mark.parametrize('price', ['abc', 'NaN', True])
    def test_create_non_numeric_price(self, valid_event_params: dict[str, Any], price: Any) -> None:
        valid_event_params['price'] = price

        with pytest.raises(DomainError, match='Price must be a number'):
            Event.create(**valid_event_params)

    def test_create_zero_price_allowed(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['price'] = 0

        event = Event.create(**valid_event_params)

        assert event.price == Decimal('0.00')

    def test_price_quantized_to_cents(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['price'] = '19.9'

        event = Event.create(**valid_event_params)

        assert event.price == Decimal('19.90')
        assert str(event.price) == '19.90'

    @pytest.mark.parametrize('price', [1e30, '1E+30', Decimal('100000000'), '99999999.999'])
    def test_create_price_above_column_range(
        self, valid_event_params: dict[str, Any], price: Any
    ) -> None:
        valid_event_params['price'] = price

        with pytest.raises(DomainError) as exc_info:
            Event.create(**valid_event_params)

        assert exc_info.value.message == 'Price cannot exceed 99999999.99'
        assert exc_info.value.status_code == 400

    def test_create_huge_negative_price(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['price'] = -1e30

        with pytest.raises(DomainError, match='Price cannot be negative'):
            Event.create(**valid_event_params)

    def test_create_price_at_column_max(self, valid_event_params: dict[str, Any]) -> None:
        valid_event_params['price'] = '99999999.99'

        event = Event.create(**valid_event_params)

        assert event.price == Decimal('99999999.99')

    @pytest.mark.parametrize('field,limit', [('name', 255), ('genre', 100), ('category', 100)])
    def test_create_over_length_label(
        self, valid_event_params: dict[str, Any], field: str, limit: int
    ) -> None:
        valid_event_params[field] = 'x' * (limit + 1)

        with pytest.raises(DomainError) as exc_info:
            Event.create(**valid_event_params)

        assert exc_info.value.message == f'Event {field} cannot exceed {limit} characters'


@pytest.mark.unit
class TestEventOwnership:
    def test_owner_passes(self) -> None:
        owner = UserEntity(id=101, role=UserRole.ORGANIZER)

        make_event(organizer_id=101).ensure_owned_by(owner, action='update')

    def test_other_organizer_forbidden(self) -> None:
        other = UserEntity(id=102, role=UserRole.ORGANIZER)

        with pytest.raises(ForbiddenError) as exc_info:
            make_event(organizer_id=101).ensure_owned_by(other, action='update')

        assert exc_info.value.message == 'You can only update your own events'
        assert exc_info.value.status_code == 403


@pytest.mark.unit
class TestEventApplyChanges:
    def test_partial_update_touches_only_given_fields(self) -> None:
        event = make_event()

        event.apply_changes(name='Autumn Jazz Night', price=Decimal('30'))

        assert event.name == 'Autumn Jazz Night'
        assert event.price == Decimal('30.00')
        assert event.genre == 'Jazz'
        assert event.description == 'Open-air jazz with local bands'

    def test_update_validates_values(self) -> None:
        event = make_event()

        with pytest.raises(DomainError, match='Price cannot be negative'):
            event.apply_changes(price=Decimal('-5'))

    def test_update_rejects_price_above_column_range(self) -> None:
        event = make_event()

        with pytest.raises(DomainError, match='Price cannot exceed'):
            event.apply_changes(price=Decimal('1E+30'))

        assert event.price == Decimal('25.00')

    def test_update_rejects_blank_name(self) -> None:
        event = make_event()

        with pytest.raises(DomainError, match='name cannot be empty'):
            event.apply_changes(name='   ')

    def test_organizer_cannot_change(self) -> None:
        event = make_event(organizer_id=101)

        event.apply_changes(organizer_id=999)
        assert event.organizer_id == 101

        with pytest.raises(attrs.exceptions.FrozenAttributeError):
            event.organizer_id = 999  # type: ignore[misc]
