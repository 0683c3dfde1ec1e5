from typing import Any, Dict, List, Optional

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_email_service import IEmailService


class MockEmailService(IEmailService):
    """Records messages instead of sending them (EMAIL_BACKEND=mock)."""

    def __init__(self) -> None:
        self.sent_emails: List[Dict[str, Any]] = []

    @Logger.io
    async def send_email(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        image_data_uri: Optional[str] = None,
    ) -> None:
        self.sent_emails.append(
            {'to': to, 'subject': subject, 'body': body, 'image_data_uri': image_data_uri}
        )
        Logger.base.info(f'📧 [MOCK_EMAIL] To: {to} | Subject: {subject}')

    def get_sent_emails(self) -> List[Dict[str, Any]]:
        return self.sent_emails

    def clear_sent_emails(self) -> None:
        self.sent_emails.clear()
