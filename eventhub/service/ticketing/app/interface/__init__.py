"""Application layer interfaces (Ports)"""

from eventhub.service.ticketing.app.interface.i_email_service import IEmailService
from eventhub.service.ticketing.app.interface.i_event_repo import IEventRepo
from eventhub.service.ticketing.app.interface.i_qr_renderer import IQrRenderer
from eventhub.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from eventhub.service.ticketing.app.interface.i_user_repo import IUserRepo


__all__ = ['IEmailService', 'IEventRepo', 'IQrRenderer', 'ITicketRepo', 'IUserRepo']
