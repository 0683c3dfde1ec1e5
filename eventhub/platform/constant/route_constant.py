API_BASE = '/api'

# Event catalog
EVENT_BASE = f'{API_BASE}/events'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_TICKETS = f'{EVENT_BASE}/{{event_id}}/tickets'

# Tickets
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_MINE = f'{TICKET_BASE}/mine'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_BUY = f'{TICKET_BASE}/{{ticket_id}}/buy'

# Admin moderation
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_ATTENDEE = f'{ADMIN_BASE}/attendees/{{user_id}}'
ADMIN_ORGANIZER = f'{ADMIN_BASE}/organizers/{{user_id}}'

HEALTH = '/health'
