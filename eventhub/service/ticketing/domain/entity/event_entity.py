from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import attrs

from eventhub.platform.exception.exceptions import DomainError, ForbiddenError
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity


REQUIRED_FIELDS_MESSAGE = 'Name, description, genre, category, and price are required'
EDITABLE_FIELDS = ('name', 'description', 'genre', 'category', 'price')

# Column widths of the event table
NAME_MAX_LENGTH = 255
LABEL_MAX_LENGTH = 100
MAX_PRICE = Decimal('99999999.99')


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Event {attribute.name} cannot be empty')


def _max_length(limit: int):
    def _validate(instance: object, attribute: attrs.Attribute, value: str) -> None:
        if len(value) > limit:
            raise DomainError(f'Event {attribute.name} cannot exceed {limit} characters')

    return _validate


def _validate_price(instance: object, attribute: attrs.Attribute, value: Decimal) -> None:
    if value < 0:
        raise DomainError('Price cannot be negative')
    if value > MAX_PRICE:
        raise DomainError(f'Price cannot exceed {MAX_PRICE}')


def to_price(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise DomainError('Price must be a number')
    try:
        price = Decimal(str(value))
        if not price.is_finite():
            raise DomainError('Price must be a number')
        # Out-of-range values are left to the price validator
        if abs(price) > MAX_PRICE:
            return price
        return price.quantize(Decimal('0.01'))
    except (InvalidOperation, ValueError) as e:
        raise DomainError('Price must be a number') from e


@attrs.define
class Event:
    name: str = attrs.field(
        validator=[_validate_non_empty_string, _max_length(NAME_MAX_LENGTH)]
    )
    description: str = attrs.field(validator=_validate_non_empty_string)
    genre: str = attrs.field(
        validator=[_validate_non_empty_string, _max_length(LABEL_MAX_LENGTH)]
    )
    category: str = attrs.field(
        validator=[_validate_non_empty_string, _max_length(LABEL_MAX_LENGTH)]
    )
    price: Decimal = attrs.field(converter=to_price, validator=_validate_price)
    organizer_id: int = attrs.field(on_setattr=attrs.setters.frozen)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        name: Optional[str],
        description: Optional[str],
        genre: Optional[str],
        category: Optional[str],
        price: Any,
        organizer_id: int,
    ) -> 'Event':
        fields = [name, description, genre, category]
        if any(value is None or not str(value).strip() for value in fields) or price is None:
            raise DomainError(REQUIRED_FIELDS_MESSAGE)

        now = datetime.now(timezone.utc)
        return cls(
            name=name.strip(),  # type: ignore[union-attr]
            description=description.strip(),  # type: ignore[union-attr]
            genre=genre.strip(),  # type: ignore[union-attr]
            category=category.strip(),  # type: ignore[union-attr]
            price=price,
            organizer_id=organizer_id,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, user: UserEntity) -> bool:
        return self.organizer_id == user.id

    def ensure_owned_by(self, user: UserEntity, *, action: str) -> None:
        if not self.is_owned_by(user):
            raise ForbiddenError(f'You can only {action} your own events')

    def apply_changes(self, **changes: Any) -> None:
        """Partial update; fields left as None are untouched."""
        for field_name in EDITABLE_FIELDS:
            value = changes.get(field_name)
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
            setattr(self, field_name, value)
        self.updated_at = datetime.now(timezone.utc)
