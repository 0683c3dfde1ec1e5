"""
Unit tests for the QR payload codec

The payload is a fixed 8-line block with 15-column labels. It never carries
attendee data, so a ticket encodes the same before and after purchase.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole
from eventhub.service.ticketing.domain.qr_payload_codec import (
    LABEL_WIDTH,
    encode_qr_payload,
    format_price,
    format_timestamp,
)
from test.service.ticketing.unit.helpers import make_event, make_ticket


ORGANIZER = UserEntity(
    id=101, role=UserRole.ORGANIZER, name='Olivia Organizer', email='olivia@example.com'
)


@pytest.mark.unit
class TestEncodeQrPayload:
    def test_lines_in_fixed_order_with_padded_labels(self) -> None:
        # Arrange
        ticket = make_ticket()
        event = make_event()

        # Act
        payload = encode_qr_payload(ticket=ticket, event=event, organizer=ORGANIZER)

        # Assert
        assert payload.split('\n') == [
            'Ticket ID      : 7',
            'Ticket Type    : VIP',
            'Event Name     : Summer Jazz Night',
            'Event Genre    : Jazz',
            'Event Price    : $25',
            'Organizer Name : Olivia Organizer',
            'Organizer Email: olivia@example.com',
            'Created At     : 10/18/2026, 3:04:05 PM',
        ]

    def test_every_label_occupies_label_width(self) -> None:
        payload = encode_qr_payload(ticket=make_ticket(), event=make_event(), organizer=ORGANIZER)

        for line in payload.split('\n'):
            assert line[LABEL_WIDTH] == ':'

    def test_missing_organizer_falls_back_to_na(self) -> None:
        payload = encode_qr_payload(ticket=make_ticket(), event=make_event(), organizer=None)

        lines = payload.split('\n')
        assert lines[5] == 'Organizer Name : N/A'
        assert lines[6] == 'Organizer Email: N/A'

    def test_blank_organizer_fields_fall_back_to_na(self) -> None:
        organizer = UserEntity(id=101, role=UserRole.ORGANIZER)

        payload = encode_qr_payload(ticket=make_ticket(), event=make_event(), organizer=organizer)

        assert 'Organizer Name : N/A' in payload
        assert 'Organizer Email: N/A' in payload

    def test_payload_identical_before_and_after_purchase(self) -> None:
        """
        Given: the same ticket Available and then Sold
        When: both are encoded
        Then: payloads are identical and mention no attendee
        """
        # Arrange
        available = make_ticket()
        sold = make_ticket(attendee_id=201)

        # Act
        before = encode_qr_payload(ticket=available, event=make_event(), organizer=ORGANIZER)
        after = encode_qr_payload(ticket=sold, event=make_event(), organizer=ORGANIZER)

        # Assert
        assert before == after
        assert '201' not in after
        assert 'Attendee' not in after

    def test_no_trailing_whitespace_on_any_line(self) -> None:
        payload = encode_qr_payload(ticket=make_ticket(), event=make_event(), organizer=None)

        assert all(line == line.strip() for line in payload.split('\n'))


@pytest.mark.unit
class TestFormatters:
    @pytest.mark.parametrize(
        'price,expected',
        [
            (Decimal('25.00'), '$25'),
            (Decimal('19.90'), '$19.9'),
            (Decimal('0.00'), '$0'),
            (Decimal('100.00'), '$100'),
            (Decimal('12.34'), '$12.34'),
        ],
    )
    def test_format_price(self, price: Decimal, expected: str) -> None:
        assert format_price(price) == expected

    @pytest.mark.parametrize(
        'value,expected',
        [
            (datetime(2026, 1, 2, 0, 5, 9, tzinfo=timezone.utc), '1/2/2026, 12:05:09 AM'),
            (datetime(2026, 7, 4, 12, 0, 0, tzinfo=timezone.utc), '7/4/2026, 12:00:00 PM'),
            (datetime(2026, 12, 31, 23, 59, 59, tzinfo=timezone.utc), '12/31/2026, 11:59:59 PM'),
        ],
    )
    def test_format_timestamp(self, value: datetime, expected: str) -> None:
        assert format_timestamp(value) == expected

    def test_format_timestamp_missing(self) -> None:
        assert format_timestamp(None) == 'N/A'
