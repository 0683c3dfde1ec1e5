"""
Notification Dispatcher

Fire-and-forget email delivery. A send that fails is logged and dropped;
it never reaches the caller and never undoes the state change that
triggered it.
"""

from functools import partial
from typing import Optional

from anyio.abc import TaskGroup

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_email_service import IEmailService
from eventhub.service.ticketing.app.service.email_template import EmailContent


class NotificationDispatcher:
    def __init__(self, *, email_service: IEmailService, task_group: Optional[TaskGroup] = None):
        self.email_service = email_service
        self.task_group = task_group

    async def notify(self, *, to: Optional[str], content: EmailContent) -> None:
        if not to:
            Logger.base.warning(f'⚠️ [NOTIFY] No recipient for "{content.subject}", skipped')
            return

        deliver = partial(self._deliver, to=to, content=content)
        if self.task_group is not None:
            self.task_group.start_soon(deliver)
        else:
            await deliver()

    async def _deliver(self, *, to: str, content: EmailContent) -> None:
        try:
            await self.email_service.send_email(
                to=to,
                subject=content.subject,
                body=content.body,
                image_data_uri=content.image_data_uri,
            )
        except Exception as e:
            Logger.base.error(f'❌ [NOTIFY] Failed to send "{content.subject}" to {to}: {e}')
