import base64
from unittest.mock import MagicMock, patch

import pytest

from eventhub.service.ticketing.driven_adapter.mailer.smtp_email_service import (
    QR_ATTACHMENT_NAME,
    SmtpEmailService,
    decode_png_data_uri,
)


PNG_BYTES = b'\x89PNG\r\n\x1a\nfake-image'
PNG_DATA_URI = 'data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode('ascii')


@pytest.fixture
def smtp_service() -> SmtpEmailService:
    return SmtpEmailService(
        host='smtp.example.com',
        port=587,
        username='mailer',
        password='app-password',
        use_tls=True,
        sender='EventHub <no-reply@eventhub.local>',
    )


@pytest.mark.unit
class TestDecodePngDataUri:
    def test_decodes_payload(self) -> None:
        assert decode_png_data_uri(PNG_DATA_URI) == PNG_BYTES

    @pytest.mark.parametrize(
        'data_uri', ['data:image/jpeg;base64,AAAA', 'data:image/png;base64,', 'not-a-uri']
    )
    def test_rejects_other_uris(self, data_uri: str) -> None:
        with pytest.raises(ValueError):
            decode_png_data_uri(data_uri)


@pytest.mark.unit
class TestSmtpEmailService:
    def test_build_message_without_image(self, smtp_service: SmtpEmailService) -> None:
        msg = smtp_service.build_message(
            to='olivia@example.com', subject='EventHub - Event Created Successfully', body='Hi'
        )

        assert msg['To'] == 'olivia@example.com'
        assert msg['From'] == 'EventHub <no-reply@eventhub.local>'
        assert msg['Subject'] == 'EventHub - Event Created Successfully'
        assert not msg.is_multipart()
        assert msg.get_content().strip() == 'Hi'

    def test_build_message_attaches_qr_png(self, smtp_service: SmtpEmailService) -> None:
        msg = smtp_service.build_message(
            to='alice@example.com',
            subject='EventHub - Ticket Purchase Confirmation',
            body='Your ticket',
            image_data_uri=PNG_DATA_URI,
        )

        attachments = list(msg.iter_attachments())
        assert len(attachments) == 1
        assert attachments[0].get_filename() == QR_ATTACHMENT_NAME
        assert attachments[0].get_content_type() == 'image/png'
        assert attachments[0].get_content() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_send_email_uses_starttls_and_login(self, smtp_service: SmtpEmailService) -> None:
        with patch(
            'eventhub.service.ticketing.driven_adapter.mailer.smtp_email_service.smtplib.SMTP'
        ) as mock_smtp_cls:
            server = MagicMock()
            mock_smtp_cls.return_value.__enter__.return_value = server

            await smtp_service.send_email(to='alice@example.com', subject='Hello', body='Body')

        mock_smtp_cls.assert_called_once_with('smtp.example.com', 587, timeout=10)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with('mailer', 'app-password')
        server.send_message.assert_called_once()
        sent = server.send_message.call_args.args[0]
        assert sent['To'] == 'alice@example.com'

    @pytest.mark.asyncio
    async def test_send_email_propagates_smtp_errors(self, smtp_service: SmtpEmailService) -> None:
        with patch(
            'eventhub.service.ticketing.driven_adapter.mailer.smtp_email_service.smtplib.SMTP',
            side_effect=ConnectionRefusedError('no smtp'),
        ):
            with pytest.raises(ConnectionRefusedError):
                await smtp_service.send_email(to='alice@example.com', subject='Hello', body='Body')
