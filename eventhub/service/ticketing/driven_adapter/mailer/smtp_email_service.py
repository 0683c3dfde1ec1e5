import base64
from email.message import EmailMessage
import smtplib
from typing import Optional

from anyio import to_thread

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_email_service import IEmailService


QR_ATTACHMENT_NAME = 'ticket-qr-code.png'


def decode_png_data_uri(image_data_uri: str) -> bytes:
    header, _, payload = image_data_uri.partition(',')
    if not header.startswith('data:image/png;base64') or not payload:
        raise ValueError('Expected a data:image/png;base64 URI')
    return base64.b64decode(payload)


class SmtpEmailService(IEmailService):
    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool,
        sender: str,
        timeout: int = 10,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.sender = sender
        self.timeout = timeout

    def build_message(
        self, *, to: str, subject: str, body: str, image_data_uri: Optional[str] = None
    ) -> EmailMessage:
        msg = EmailMessage()
        msg['Subject'] = subject
        msg['From'] = self.sender
        msg['To'] = to
        msg.set_content(body)
        if image_data_uri:
            msg.add_attachment(
                decode_png_data_uri(image_data_uri),
                maintype='image',
                subtype='png',
                filename=QR_ATTACHMENT_NAME,
            )
        return msg

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(msg)

    @Logger.io
    async def send_email(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        image_data_uri: Optional[str] = None,
    ) -> None:
        msg = self.build_message(to=to, subject=subject, body=body, image_data_uri=image_data_uri)
        # smtplib blocks, keep it off the event loop
        await to_thread.run_sync(self._deliver, msg)
        Logger.base.info(f'📧 [SMTP] Sent "{subject}" to {to}')
