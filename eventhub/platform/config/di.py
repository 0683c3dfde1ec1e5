"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from eventhub.platform.config.core_setting import Settings
from eventhub.service.ticketing.app.service.notification_dispatcher import NotificationDispatcher
from eventhub.service.ticketing.driven_adapter.mailer.mock_email_service import MockEmailService
from eventhub.service.ticketing.driven_adapter.mailer.smtp_email_service import SmtpEmailService
from eventhub.service.ticketing.driven_adapter.qr.qrcode_renderer import QrCodeRenderer
from eventhub.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Background task group (set by main.py lifespan)
    # Used for fire-and-forget notification delivery
    task_group = providers.Object(None)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # QR image rendering
    qr_renderer = providers.Singleton(
        QrCodeRenderer,
        box_size=config_service.provided.QR_BOX_SIZE,
        border=config_service.provided.QR_BORDER,
    )

    # Email backend chosen by EMAIL_BACKEND
    email_service = providers.Selector(
        config_service.provided.EMAIL_BACKEND,
        smtp=providers.Singleton(
            SmtpEmailService,
            host=config_service.provided.SMTP_HOST,
            port=config_service.provided.SMTP_PORT,
            username=config_service.provided.SMTP_USER,
            password=config_service.provided.SMTP_PASSWORD.get_secret_value.call(),
            use_tls=config_service.provided.SMTP_USE_TLS,
            sender=config_service.provided.MAIL_FROM,
            timeout=config_service.provided.SMTP_TIMEOUT,
        ),
        mock=providers.Singleton(MockEmailService),
    )

    notification_dispatcher = providers.Factory(
        NotificationDispatcher,
        email_service=email_service,
        task_group=task_group,
    )


container = Container()
