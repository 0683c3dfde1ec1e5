from datetime import datetime
from typing import Optional

import attrs

from eventhub.service.ticketing.domain.enum.user_role import UserRole


@attrs.define
class UserEntity:
    """Principal as seen by this service; credentials live with the auth provider."""

    id: int
    role: UserRole
    name: str = ''
    email: str = ''
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
